"""Three-pile deck: library, discard pile and exile pile.

Drawing comes from the library.  When the library runs out, the discard
pile is returned to it and shuffled, then drawing continues.  Exiled
items stay out of play until ``return_exiled_to_bottom_of_library()`` is
called explicitly.

The deck never moves drawn items anywhere; callers put them in
``discarded`` or ``exiled`` (directly or via ``discard()``/``exile()``)
according to their own game rules.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, TypeVar

from radial_deck.config import DeckSettings
from radial_deck.errors import EmptyError, InsufficientItemsError
from radial_deck.pile import Pile
from radial_deck.rng import RandomProvider
from radial_deck.shuffler import get_default_provider

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Deck(Generic[T]):
    """A library, discard pile and exile pile sharing one random provider.

    Parameters
    ----------
    library:
        Initial library contents in draw order.  Defaults to empty.
    rng:
        Provider shared by all three piles, so a single seed controls
        every shuffle.  Defaults to the shared provider from
        ``radial_deck.shuffler``.
    """

    def __init__(
        self,
        library: Iterable[T] | None = None,
        rng: RandomProvider | None = None,
    ) -> None:
        self._rng = rng if rng is not None else get_default_provider()
        self._library: Pile[T] = Pile(library, self._rng)
        self._discarded: Pile[T] = Pile(rng=self._rng)
        self._exiled: Pile[T] = Pile(rng=self._rng)
        self._recycle_count = 0

    @classmethod
    def from_settings(
        cls,
        library: Iterable[T] | None = None,
        settings: DeckSettings | None = None,
    ) -> Deck[T]:
        """Build a deck whose provider comes from *settings*.

        With ``settings.shuffle_on_create`` the library is shuffled once
        before the deck is returned.  *settings* defaults to
        ``DeckSettings.from_env()``.
        """
        settings = settings if settings is not None else DeckSettings.from_env()
        deck: Deck[T] = cls(library, settings.make_provider())
        if settings.shuffle_on_create:
            deck._library.shuffle()
        return deck

    # -- queries -------------------------------------------------------------

    @property
    def library(self) -> Pile[T]:
        return self._library

    @property
    def discarded(self) -> Pile[T]:
        return self._discarded

    @property
    def exiled(self) -> Pile[T]:
        return self._exiled

    @property
    def rng(self) -> RandomProvider:
        return self._rng

    @property
    def library_and_discard_size(self) -> int:
        """Items reachable by drawing.  Exiled items are not counted."""
        return self._library.size + self._discarded.size

    @property
    def recycle_count(self) -> int:
        """How many times drawing has recycled the discard pile."""
        return self._recycle_count

    # -- pile movement -------------------------------------------------------

    def discard(self, item: T) -> None:
        """Put *item* on the bottom of the discard pile."""
        self._discarded.add_to_bottom(item)

    def exile(self, item: T) -> None:
        """Put *item* on the bottom of the exile pile."""
        self._exiled.add_to_bottom(item)

    def return_discards_to_bottom_of_library(self) -> Deck[T]:
        """Move every discarded item, in order, under the library."""
        self._library.add_many_to_bottom(self._discarded.items)
        self._discarded.clear()
        return self

    def return_exiled_to_bottom_of_library(self) -> Deck[T]:
        """Move every exiled item, in order, under the library."""
        logger.debug("Returning %d exiled item(s) to the library", self._exiled.size)
        self._library.add_many_to_bottom(self._exiled.items)
        self._exiled.clear()
        return self

    # -- drawing -------------------------------------------------------------

    def draw_one(self) -> T:
        """Draw the top library item, recycling the discard pile if needed.

        The library is shuffled only when the discard pile was just
        recycled into it; a library that never runs dry keeps its order.
        Draw from ``library`` directly to avoid recycling altogether.
        """
        if self._library.is_empty:
            if self._discarded.is_empty:
                logger.debug("Draw failed: library and discard pile are both empty")
                raise EmptyError(
                    "Requested an item when there are no items in the library or discard pile"
                )
            logger.debug(
                "Library empty; recycling %d discarded item(s)", self._discarded.size
            )
            self.return_discards_to_bottom_of_library()
            self._library.shuffle()
            self._recycle_count += 1

        return self._library.draw_one()

    def draw_n(self, n: int) -> list[T]:
        """Draw *n* items one at a time, recycling as often as needed.

        Nothing is drawn if the library and discard pile together hold
        fewer than *n* items.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of items: {n}")
        available = self.library_and_discard_size
        if n > available:
            raise InsufficientItemsError(n, available, "the library and discard pile")
        return [self.draw_one() for _ in range(n)]

    # -- configuration -------------------------------------------------------

    def replace_random_provider(self, rng: RandomProvider) -> None:
        """Switch all three piles to *rng* for future shuffles."""
        self._rng = rng
        self._library.replace_random_provider(rng)
        self._discarded.replace_random_provider(rng)
        self._exiled.replace_random_provider(rng)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Deck(library={self._library.size}, discarded={self._discarded.size}, "
            f"exiled={self._exiled.size})"
        )
