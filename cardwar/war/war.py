import argparse
import sys

from cardwar.common.io_interface import (
    CompositeIOInterface,
    ConsoleIOInterface,
    LoggingIOInterface,
)
from cardwar.common.log import configure_logging
from cardwar.war.errors import DeckLoadError, FileError
from cardwar.war.game import run_game
from cardwar.war.loader import load_decks
from cardwar.war.recorder import write_results
from cardwar.war.rules import WarRules

PROG = "war_game"


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv=None):
    parser = UsageArgumentParser(
        prog=PROG, description="Play a game of War from a deck CSV file."
    )
    parser.add_argument("input", help="CSV file with one suit,rank card per line")
    parser.add_argument("output", help="CSV file to write the round results to")
    parser.add_argument(
        "--log-level",
        default=None,
        help="diagnostic log level (default: $CARDWAR_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--narration-log",
        metavar="FILE",
        help="also write the game narration to FILE",
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=None,
        help="end the game as a tie after this many rounds (default: no limit)",
    )
    parser.add_argument(
        "--no-repeat-detection",
        action="store_true",
        help="keep playing even when both decks return to an earlier order",
    )
    return parser.parse_args(argv)


def build_rules(args) -> WarRules:
    """Environment settings, overridden by any flags given on the command line."""
    rules = WarRules.from_env()
    if args.max_rounds is not None:
        rules = WarRules(max_rounds=args.max_rounds, detect_repeats=rules.detect_repeats)
    if args.no_repeat_detection:
        rules = WarRules(max_rounds=rules.max_rounds, detect_repeats=False)
    return rules


def fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        configure_logging(args.log_level)
        rules = build_rules(args)
    except ValueError as exc:
        return fail(str(exc))

    try:
        deck_a, deck_b = load_decks(args.input)
    except DeckLoadError as exc:
        return fail(str(exc))

    if deck_a.is_empty():
        return fail(f"Not enough cards in {args.input} to deal both players")

    io_interface = ConsoleIOInterface()
    if args.narration_log:
        try:
            io_interface = CompositeIOInterface(
                io_interface, LoggingIOInterface(args.narration_log)
            )
        except OSError as exc:
            return fail(f"Failed to open narration log {args.narration_log}: {exc}")

    result = run_game(deck_a, deck_b, io_interface=io_interface, rules=rules)

    try:
        write_results(result.records, args.output)
    except FileError as exc:
        return fail(str(exc))

    return 0


if __name__ == "__main__":
    sys.exit(main())
