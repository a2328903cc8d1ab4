"""Exceptions raised by pile and deck operations.

Every error derives from ``DeckError`` and also from the closest builtin
exception, so callers can catch either the package-specific type or the
familiar ``LookupError`` / ``ValueError`` / ``IndexError``.
"""

from __future__ import annotations


class DeckError(Exception):
    """Base class for all radial_deck errors."""


class EmptyError(DeckError, LookupError):
    """A single item was requested but nothing is available to draw."""


class InsufficientItemsError(DeckError, ValueError):
    """A bulk draw asked for more items than are available.

    Raised before any pile is touched, so a failed bulk draw never
    removes anything.
    """

    def __init__(self, requested: int, available: int, where: str = "the pile") -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot draw more items than are in {where}. "
            f"Requested: {requested}, Available: {available}"
        )


class InvalidIndexError(DeckError, IndexError):
    """An insertion index fell outside ``[0, size]``."""
