#!/usr/bin/env python3
"""
Example showing the War engine without the command line wrapper.

Plays a full 52-card deck dealt in suit order, then prints the statistics
for the game. Use -v to see every round narrated.
"""

import argparse

from cardwar.common.deck import Deck
from cardwar.common.io_interface import ConsoleIOInterface, TestIOInterface
from cardwar.war.loader import deal
from cardwar.war.rules import WarRules
from cardwar.war.game import run_game


def main():
    parser = argparse.ArgumentParser(description="Play a demo game of War.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="narrate every round"
    )
    parser.add_argument(
        "-r",
        "--max-rounds",
        type=int,
        default=None,
        help="stop after this many rounds (default: no limit)",
    )
    args = parser.parse_args()

    deck_a, deck_b = deal(Deck.standard().cards)
    io_interface = ConsoleIOInterface() if args.verbose else TestIOInterface()

    result = run_game(
        deck_a, deck_b, io_interface=io_interface, rules=WarRules(args.max_rounds)
    )

    print("\n=== Final Results ===")
    print(f"Winner: {result.winner or 'Tie'} ({result.end_reason.name.lower()})")
    for line in result.stats.summary_lines():
        print(line)
    if not args.verbose:
        rounds = len(io_interface.lines_starting_with("Round "))
        print(f"Narrated {rounds} rounds")


if __name__ == "__main__":
    main()
