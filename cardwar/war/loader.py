"""
Reading War decks from CSV.

The input has no header and one card per line: ``suit,rank``. Ranks are
1 (Ace) to 13 (King); a row whose suit is ``Joker`` may carry any label in
the second field. Cards are dealt alternately, the first card to Player A,
and a trailing odd card is discarded so both players start even.
"""

import csv
import logging
import os
from typing import List, TextIO, Tuple, Union

from cardwar.common.card import Card
from cardwar.common.deck import Deck
from cardwar.war.errors import (
    EmptyInputError,
    FileError,
    MalformedRowError,
    ParseError,
)

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", TextIO]


def _parse_rows(stream: TextIO) -> List[Card]:
    cards = []
    reader = csv.reader(stream)
    try:
        for row in reader:
            # line_num is the physical line a record ends on
            line_number = reader.line_num
            # Blank lines are not records
            if not row or all(not field.strip() for field in row):
                continue
            if len(row) != 2:
                raise MalformedRowError(
                    f"expected 2 fields (suit,rank), got {len(row)}", line_number
                )
            suit, token = row
            try:
                cards.append(Card.from_tokens(suit, token))
            except ParseError as exc:
                raise MalformedRowError(str(exc), line_number) from exc
    except csv.Error as exc:
        raise MalformedRowError(str(exc), reader.line_num) from exc
    return cards


def read_cards(source: Source) -> List[Card]:
    """
    Parse every card in ``source``, in file order.

    :param source: A path to a CSV file, or an open text stream.
    :raises FileError: If the file cannot be opened or decoded.
    :raises EmptyInputError: If there are no card rows.
    :raises MalformedRowError: If a row is not a valid ``suit,rank`` pair.
    """
    if hasattr(source, "read"):
        name = getattr(source, "name", "<stream>")
        try:
            cards = _parse_rows(source)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileError(f"Failed to read input deck {name}: {exc}") from exc
    else:
        name = os.fspath(source)
        try:
            with open(name, newline="", encoding="utf-8") as stream:
                cards = _parse_rows(stream)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileError(f"Failed to open input deck {name}: {exc}") from exc

    if not cards:
        raise EmptyInputError(f"Empty or invalid CSV deck: {name}")

    logger.debug("Read %d cards from %s", len(cards), name)
    return cards


def deal(cards: List[Card]) -> Tuple[Deck, Deck]:
    """
    Split cards alternately between two players.

    Even-indexed cards go to Player A and odd-indexed cards to Player B, in
    order. With an odd number of cards the last one is discarded.
    """
    if len(cards) % 2:
        logger.warning("Trailing odd card discarded: %s", cards[-1])
        cards = cards[:-1]
    return Deck(cards[0::2]), Deck(cards[1::2])


def load_decks(source: Source) -> Tuple[Deck, Deck]:
    """Read ``source`` and deal it into Player A's and Player B's decks."""
    deck_a, deck_b = deal(read_cards(source))
    logger.info("Dealt %d cards to each player", deck_a.size)
    return deck_a, deck_b
