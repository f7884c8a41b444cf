"""
This module contains the Deck class, which represents one player's pile of
cards in a game of War.

Cards are drawn from the front of the deck and cards won are added to the
bottom, so the deck behaves as a queue.

>>> from cardwar.common.card import Card, Rank
>>> deck = Deck([Card("Hearts", Rank.TWO), Card("Spades", Rank.KING)])
>>> deck.size
2
>>> deck.draw()
Card('Hearts', Rank.TWO)
>>> deck.size
1
"""

from collections import deque
from typing import Iterable, List, Tuple, Union

from cardwar.common.card import Card, Rank

STANDARD_SUITS = ["Hearts", "Diamonds", "Clubs", "Spades"]


class Deck:
    """
    A class representing a player's deck of cards.
    """

    def __init__(self, cards: Union[Iterable[Card], None] = None):
        """
        Initialize a Deck instance.

        :param cards: Cards in draw order (optional). The deck keeps its own
                      copy; if not provided the deck starts empty.
        >>> Deck().size
        0
        """
        self._cards = deque(cards or ())

    @classmethod
    def standard(cls) -> "Deck":
        """
        Build the 52 standard cards, suit by suit, Ace to King.

        >>> Deck.standard().size
        52
        """
        return cls(
            Card(suit, rank)
            for suit in STANDARD_SUITS
            for rank in Rank
            if rank is not Rank.JOKER
        )

    @property
    def cards(self) -> List[Card]:
        """A copy of the cards in draw order."""
        return list(self._cards)

    def draw(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Take cards from the front of the deck.

        :return: A card instance, or a list of card instances in draw order
                 when more than one card is requested.
        :raises IndexError: If the deck holds fewer than ``num_cards`` cards.
        """
        if num_cards > len(self._cards):
            raise IndexError(
                f"Cannot draw {num_cards} cards from a deck of {len(self._cards)}"
            )
        if num_cards == 1:
            return self._cards.popleft()
        return [self._cards.popleft() for _ in range(num_cards)]

    def draw_all(self) -> List[Card]:
        """Empty the deck, returning its cards in draw order."""
        cards = list(self._cards)
        self._cards.clear()
        return cards

    def add_to_bottom(self, cards: Iterable[Card]) -> None:
        """
        Put cards at the bottom of the deck, keeping their order.

        :param cards: The cards to add; the first one will be drawn first.
        """
        self._cards.extend(cards)

    def snapshot(self) -> Tuple[Card, ...]:
        """Return an immutable view of the current card order."""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        """
        Return the number of cards in the deck.

        :return: The size of the deck.
        """
        return len(self._cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self._cards) == 0

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __eq__(self, other):
        if isinstance(other, Deck):
            return list(self._cards) == list(other._cards)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.

        :return: A string representation of the deck.
        """
        return f"Deck({[repr(card) for card in self._cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        :return: A string representation of the deck.
        >>> str(Deck.standard())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self._cards)} cards"
