"""Settings for building random providers and decks.

``DeckSettings`` is a Pydantic v2 model so values coming from the
environment (always strings) are coerced and validated in one place::

    RADIAL_DECK_SEED=1234 RADIAL_DECK_SHUFFLE_ON_CREATE=true python game.py
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from radial_deck.rng import RandomProvider

ENV_PREFIX = "RADIAL_DECK_"


class DeckSettings(BaseModel):
    """Seed and construction options shared by providers and decks."""

    model_config = ConfigDict(frozen=True)

    seed: int | None = None
    """Seed for providers made from these settings.  ``None`` means an
    entropy-derived seed."""

    shuffle_on_create: bool = False
    """Shuffle the library once when a deck is built from these settings."""

    @field_validator("seed", mode="before")
    @classmethod
    def _blank_seed_is_unset(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> DeckSettings:
        """Build settings from ``<prefix>SEED`` and ``<prefix>SHUFFLE_ON_CREATE``.

        Unset or empty variables fall back to the field defaults.

        Raises
        ------
        pydantic.ValidationError
            If a variable holds a value that cannot be coerced.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field in ("seed", "shuffle_on_create"):
            raw = env.get(f"{prefix}{field.upper()}")
            if raw is not None and raw.strip():
                values[field] = raw.strip()
        return cls(**values)

    def make_provider(self) -> RandomProvider:
        """Return a new provider seeded from these settings."""
        return RandomProvider(self.seed)
