"""Demo script: play through a small seeded deck, discarding and exiling.

Usage:
    uv run python scripts/demo_deck.py [--seed 42] [--turns 6] [--hand-size 3]
"""

from __future__ import annotations

import argparse
import logging

from radial_deck import Deck, DeckSettings, EmptyError, InsufficientItemsError

STARTER_CARDS = ["strike"] * 5 + ["defend"] * 4 + ["bash"]


def separator(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def show(deck: Deck) -> None:
    print(f"  library   : {deck.library.items}")
    print(f"  discarded : {deck.discarded.items}")
    print(f"  exiled    : {deck.exiled.items}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk through deck draw/discard/recycle")
    parser.add_argument("--seed", type=int, default=42, help="Seed for every shuffle")
    parser.add_argument("--turns", type=int, default=6, help="Number of turns to play")
    parser.add_argument("--hand-size", type=int, default=3, help="Cards drawn per turn")
    parser.add_argument("--verbose", action="store_true", help="Show library debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    deck: Deck[str] = Deck.from_settings(
        STARTER_CARDS, DeckSettings(seed=args.seed, shuffle_on_create=True)
    )
    separator(f"Starting deck (seed={deck.rng.seed})")
    show(deck)

    for turn in range(1, args.turns + 1):
        separator(f"Turn {turn}")
        try:
            hand = deck.draw_n(args.hand_size)
        except InsufficientItemsError as exc:
            print(f"  cannot draw a full hand: {exc}")
            break
        print(f"  drew      : {hand}")

        # Bash is exiled after use; everything else goes to the discard pile.
        for card in hand:
            if card == "bash":
                deck.exile(card)
            else:
                deck.discard(card)
        show(deck)

    separator("Returning exiled cards")
    deck.return_exiled_to_bottom_of_library()
    show(deck)

    separator("Draining the deck")
    drawn = 0
    while True:
        try:
            deck.draw_one()
        except EmptyError:
            break
        drawn += 1
    print(f"  drew {drawn} more card(s); recycles performed: {deck.recycle_count}")


if __name__ == "__main__":
    main()
