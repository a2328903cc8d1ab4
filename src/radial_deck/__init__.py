"""Ordered piles and three-pile decks for turn-based card game logic."""

from radial_deck.config import DeckSettings
from radial_deck.deck import Deck
from radial_deck.errors import (
    DeckError,
    EmptyError,
    InsufficientItemsError,
    InvalidIndexError,
)
from radial_deck.pile import Pile
from radial_deck.rng import RandomProvider, fisher_yates
from radial_deck.shuffler import (
    get_default_provider,
    random_float_in_range,
    reset_default_provider,
    set_random_seed,
    shuffle,
)

__all__ = [
    # rng
    "RandomProvider",
    "fisher_yates",
    # shuffler
    "get_default_provider",
    "set_random_seed",
    "reset_default_provider",
    "shuffle",
    "random_float_in_range",
    # config
    "DeckSettings",
    # piles
    "Pile",
    "Deck",
    # errors
    "DeckError",
    "EmptyError",
    "InsufficientItemsError",
    "InvalidIndexError",
]
