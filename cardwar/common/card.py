"""
This module defines the `Rank` and `Card` classes, which are used to represent
the playing cards of a War deck.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, Ace (1) through King (13), plus a Joker rank.

- `Card`: An immutable playing card. A card has a free-form suit label and a
rank. Cards compare against each other by war value only; the suit never
takes part in ordering.

Cards are usually built from the two raw fields of an input CSV row with
`Card.from_tokens`.
"""

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Optional

from cardwar.war.constants import JOKER_SUIT, get_war_value
from cardwar.war.errors import ParseError


@unique
class Rank(Enum):
    """
    Enum for ranks in a War deck.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 14

    @property
    def rank_str(self):
        """A string representation of the rank."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.JOKER):
            return self.name.capitalize()
        return str(self.value)

    @classmethod
    def from_token(cls, token: str) -> "Rank":
        """
        Parse a standard rank from its numeric token.

        >>> Rank.from_token("12")
        <Rank.QUEEN: 12>
        """
        try:
            value = int(token.strip())
        except (AttributeError, ValueError) as exc:
            raise ParseError(f"Invalid rank: {token!r}") from exc
        if not Rank.ACE.value <= value <= Rank.KING.value:
            raise ParseError(f"Rank out of range 1-13: {token!r}")
        return cls(value)

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card in a War deck.

    >>> card = Card("Hearts", Rank.QUEEN)
    >>> print(card)
    Queen of Hearts
    >>> joker = Card.from_tokens("Joker", "Red")
    >>> print(joker)
    Joker
    >>> joker.war_value > card.war_value
    True
    """

    suit: str
    rank: Rank
    label: Optional[str] = field(default=None)

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, str) or not self.suit:
            raise TypeError(f"Invalid suit: {self.suit}")

    @classmethod
    def from_tokens(cls, suit: str, token: str) -> "Card":
        """
        Build a card from the two raw fields of an input row.

        :param suit: Suit label. "Joker" (any case) makes a Joker.
        :param token: Rank token 1-13, or any label when the suit is Joker.
        :raises ParseError: If the suit is empty or the rank token is invalid.
        """
        suit = (suit or "").strip()
        if not suit:
            raise ParseError("Missing suit")
        if suit.lower() == JOKER_SUIT.lower():
            return cls(JOKER_SUIT, Rank.JOKER, (token or "").strip() or None)
        return cls(suit, Rank.from_token(token))

    @property
    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    @property
    def war_value(self) -> int:
        """The value used to compare this card in a round."""
        return get_war_value(self.rank)

    def __lt__(self, other):
        if isinstance(other, Card):
            return self.war_value < other.war_value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Card):
            return self.war_value > other.war_value
        return NotImplemented

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        if self.is_joker:
            return f"Card('Joker', Rank.JOKER, {self.label!r})"
        return f"Card({self.suit!r}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        if self.is_joker:
            return self.rank.rank_str
        return f"{self.rank.rank_str} of {self.suit}"
