"""Process-wide default random provider and free shuffle helpers.

Piles and decks built without an explicit provider bind to the shared
provider returned by ``get_default_provider()`` at construction time.
The shared provider is created lazily from ``DeckSettings.from_env()``,
so ``RADIAL_DECK_SEED`` makes an entire program reproducible without
threading a provider through every call site.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, TypeVar

from radial_deck.config import DeckSettings
from radial_deck.rng import RandomProvider, fisher_yates

T = TypeVar("T")

logger = logging.getLogger(__name__)

_default_provider: RandomProvider | None = None


def get_default_provider() -> RandomProvider:
    """Return the shared provider, creating it on first use."""
    global _default_provider
    if _default_provider is None:
        _default_provider = DeckSettings.from_env().make_provider()
        logger.debug("Created shared random provider (seed=%d)", _default_provider.seed)
    return _default_provider


def set_random_seed(seed: int) -> RandomProvider:
    """Replace the shared provider with a fresh one seeded with *seed*.

    Piles created earlier keep the provider they captured; only piles
    created afterwards (and the helpers in this module) see the new one.
    """
    global _default_provider
    _default_provider = RandomProvider(seed)
    logger.debug("Reseeded shared random provider (seed=%d)", seed)
    return _default_provider


def reset_default_provider() -> None:
    """Forget the shared provider; the next access rebuilds it from the environment."""
    global _default_provider
    _default_provider = None


def shuffle(items: MutableSequence[T], rng: RandomProvider | None = None) -> MutableSequence[T]:
    """Shuffle *items* in place with *rng* (or the shared provider) and return it."""
    return fisher_yates(items, rng if rng is not None else get_default_provider())


def random_float_in_range(min_value: float, max_value: float) -> float:
    """Return a float in ``[min_value, max_value)`` from the shared provider."""
    return get_default_provider().next_float_in_range(min_value, max_value)
