"""Shared fixtures for pile and deck tests."""

from __future__ import annotations

import pytest

from radial_deck.rng import RandomProvider
from radial_deck.shuffler import reset_default_provider


@pytest.fixture(autouse=True)
def _isolated_default_provider(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh shared provider unaffected by the caller's env."""
    monkeypatch.delenv("RADIAL_DECK_SEED", raising=False)
    monkeypatch.delenv("RADIAL_DECK_SHUFFLE_ON_CREATE", raising=False)
    reset_default_provider()
    yield
    reset_default_provider()


@pytest.fixture
def rng() -> RandomProvider:
    return RandomProvider(42)
