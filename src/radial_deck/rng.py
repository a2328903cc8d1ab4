"""Seeded random number provider used for shuffling piles.

Wraps Python's random.Random to provide reproducible randomness.  A
provider always knows its seed: when none is given, one is drawn from
system entropy and recorded, so any shuffle sequence can be replayed
later by constructing ``RandomProvider(provider.seed)``.

Several decks that must not perturb each other can share one master seed
by each taking a *forked* provider.
"""

from __future__ import annotations

import hashlib
import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_SEED_BITS = 64


def fisher_yates(items: MutableSequence[T], rng: RandomProvider) -> MutableSequence[T]:
    """Shuffle *items* in place and return it.

    Forward Fisher-Yates: for each position ``i`` except the last, swap it
    with a uniformly chosen position in ``[i, len(items))``.  The result
    depends only on the input order and the provider's state.
    """
    size = len(items)
    for i in range(size - 1):
        pos = rng.next_in_range(i, size)
        items[i], items[pos] = items[pos], items[i]
    return items


class RandomProvider:
    """Deterministic RNG that can be reseeded or forked into sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.  ``None`` picks
        a fresh seed from system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed if seed is not None else _entropy_seed()
        self._rng = random.Random(self._seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed currently in force."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Restart the generator from *seed*.

        Subsequent values depend only on *seed* and the calls made after
        this one.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    # -- core random methods -------------------------------------------------

    def next_in_range(self, lo: int, hi: int) -> int:
        """Return a random integer *N* such that ``lo <= N < hi``."""
        if hi <= lo:
            raise ValueError(f"Empty range: [{lo}, {hi})")
        return self._rng.randrange(lo, hi)

    def next_float_in_range(self, min_value: float, max_value: float) -> float:
        """Return a random float in the half-open interval ``[min_value, max_value)``."""
        return self._rng.random() * (max_value - min_value) + min_value

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle *items* in-place and return it."""
        return fisher_yates(items, self)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> RandomProvider:
        """Create a child provider whose seed is derived from this
        provider's seed and *name*.

        The derivation is deterministic: forking with the same *name*
        from a provider with the same seed always produces the same child
        seed.  This lets each deck (e.g. ``"player_1"``, ``"market"``)
        have its own independent random stream under one master seed.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        child_seed = int.from_bytes(digest[:8], "big")
        return RandomProvider(child_seed)

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"RandomProvider(seed={self._seed})"


def _entropy_seed() -> int:
    return random.SystemRandom().getrandbits(_SEED_BITS)
