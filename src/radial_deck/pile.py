"""Ordered pile of items with top/bottom insertion, drawing and shuffling.

Index 0 is the top of the pile: the next item to be drawn.  A pile can
be used on its own or as one of the three piles managed by a ``Deck``.
"""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from radial_deck.errors import EmptyError, InsufficientItemsError, InvalidIndexError
from radial_deck.rng import RandomProvider, fisher_yates
from radial_deck.shuffler import get_default_provider

T = TypeVar("T")


class Pile(Generic[T]):
    """Mutable ordered sequence of items, drawn from the top.

    This is a plain Python class (not a Pydantic model) because it holds
    arbitrary caller-supplied items and a live random provider.

    Parameters
    ----------
    items:
        Initial contents in draw order; the first element is drawn first.
        The iterable is copied.
    rng:
        Provider used by ``shuffle()``.  Defaults to the shared provider
        from ``radial_deck.shuffler`` as it is at construction time.
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        rng: RandomProvider | None = None,
    ) -> None:
        self._items: list[T] = list(items) if items is not None else []
        self._rng = rng if rng is not None else get_default_provider()

    # -- queries -------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def items(self) -> list[T]:
        """A copy of the contents, top first."""
        return list(self._items)

    @property
    def rng(self) -> RandomProvider:
        return self._rng

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyError("Cannot peek at an empty pile")
        return self._items[0]

    # -- insertion -----------------------------------------------------------

    def add_to_top(self, item: T) -> None:
        """Add *item* to the top of the pile (drawn next)."""
        self._items.insert(0, item)

    def add_many_to_top(self, items: Iterable[T]) -> None:
        """Add *items* to the top, keeping their order.

        The first element of *items* becomes the new top card.
        """
        self._items[0:0] = list(items)

    def add_to_bottom(self, item: T) -> None:
        """Add *item* to the bottom of the pile (drawn last)."""
        self._items.append(item)

    def add_many_to_bottom(self, items: Iterable[T]) -> None:
        """Add *items* below everything already in the pile.

        Once the existing items are exhausted, the first element of
        *items* is drawn first.
        """
        self._items.extend(items)

    def add_at_index(self, index: int, item: T) -> None:
        """Insert *item* so that it ends up at position *index*.

        Valid positions are ``0`` (top) through ``size`` (bottom).
        Negative indices are rejected rather than counted from the bottom.
        """
        if not 0 <= index <= len(self._items):
            raise InvalidIndexError(
                f"Index {index} out of range for a pile of size {len(self._items)}"
            )
        self._items.insert(index, item)

    # -- removal -------------------------------------------------------------

    def remove_all(
        self,
        item: T,
        eq: Callable[[T, T], bool] = operator.eq,
    ) -> int:
        """Remove every element equal to *item* and return how many went.

        *eq* is called as ``eq(element, item)``; pass e.g.
        ``operator.is_`` to remove by identity instead of value.
        """
        kept = [e for e in self._items if not eq(e, item)]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def clear(self) -> None:
        self._items.clear()

    # -- drawing -------------------------------------------------------------

    def draw_one(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyError("Tried to draw more items than exist in the pile")
        return self._items.pop(0)

    def draw_n(self, n: int) -> list[T]:
        """Remove and return the top *n* items, first-drawn first.

        Either all *n* items are drawn or, if the pile holds fewer than
        *n*, nothing is removed and ``InsufficientItemsError`` is raised.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of items: {n}")
        if n > len(self._items):
            raise InsufficientItemsError(n, len(self._items))
        drawn = self._items[:n]
        del self._items[:n]
        return drawn

    # -- ordering ------------------------------------------------------------

    def shuffle(self) -> None:
        """Shuffle the pile in place using this pile's provider."""
        fisher_yates(self._items, self._rng)

    def replace_random_provider(self, rng: RandomProvider) -> None:
        """Use *rng* for future shuffles.  The current order is unchanged."""
        self._rng = rng

    # -- dunder helpers ------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Pile(size={len(self._items)})"
