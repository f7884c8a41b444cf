"""
Round resolution for War.

A round starts with each player turning over the top card of their deck. The
higher war value takes every card in the pot. Equal cards start a war: each
player puts two cards face down and a third face up, and the new face-up cards
are compared the same way until one side wins. A player who cannot put three
cards into a war loses it.

``play_round`` only draws cards; ``award`` moves the pot to the winner.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from cardwar.common.card import Card
from cardwar.common.deck import Deck
from cardwar.war.constants import WAR_ANTE
from cardwar.war.errors import InsufficientCardsError

logger = logging.getLogger(__name__)


class Player(Enum):
    """The two seats at a War table."""

    A = "A"
    B = "B"

    @property
    def display_name(self) -> str:
        return f"Player {self.value}"

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class RoundOutcome:
    """
    Immutable result of a single round.

    Attributes:
        winner: Player who takes the pot, or None when nobody can (both
            players ran out of cards in a war at the same time)
        cards_won: Every card in the pot, in the order it was played
        war_depth: Number of wars fought before the round was decided
        cards_a: Every card Player A put into the pot
        cards_b: Every card Player B put into the pot
        face_up_a: Player A's face-up cards, one per comparison
        face_up_b: Player B's face-up cards, one per comparison
        short_players: Players who could not put a full ante into the last war
    """

    winner: Optional[Player]
    cards_won: Tuple[Card, ...]
    war_depth: int
    cards_a: Tuple[Card, ...]
    cards_b: Tuple[Card, ...]
    face_up_a: Tuple[Card, ...]
    face_up_b: Tuple[Card, ...]
    short_players: Tuple[Player, ...] = ()

    @property
    def is_dead_pot(self) -> bool:
        return self.winner is None


class _Pot:
    """Cards at stake in the current round, with each player's share."""

    def __init__(self):
        self.cards: List[Card] = []
        self.by_player = {Player.A: [], Player.B: []}
        self.face_up = {Player.A: [], Player.B: []}

    def add(self, player: Player, cards: List[Card], face_up: bool = True) -> None:
        self.cards.extend(cards)
        self.by_player[player].extend(cards)
        if face_up and cards:
            self.face_up[player].append(cards[-1])

    def outcome(
        self,
        winner: Optional[Player],
        war_depth: int,
        short_players: Tuple[Player, ...] = (),
    ) -> RoundOutcome:
        return RoundOutcome(
            winner=winner,
            cards_won=tuple(self.cards),
            war_depth=war_depth,
            cards_a=tuple(self.by_player[Player.A]),
            cards_b=tuple(self.by_player[Player.B]),
            face_up_a=tuple(self.face_up[Player.A]),
            face_up_b=tuple(self.face_up[Player.B]),
            short_players=short_players,
        )


def compare(card_a: Card, card_b: Card) -> Optional[Player]:
    """Return the player holding the higher card, or None on a tie."""
    if card_a.war_value > card_b.war_value:
        return Player.A
    if card_b.war_value > card_a.war_value:
        return Player.B
    return None


def _short_war_winner(deck_a: Deck, deck_b: Deck) -> Optional[Player]:
    """Decide a war in which at least one player cannot ante in full."""
    short_a = deck_a.size < WAR_ANTE
    short_b = deck_b.size < WAR_ANTE
    if short_a and short_b:
        if deck_a.size == deck_b.size:
            return None
        return Player.A if deck_a.size > deck_b.size else Player.B
    return Player.B if short_a else Player.A


def play_round(deck_a: Deck, deck_b: Deck) -> RoundOutcome:
    """
    Play one round between two decks, drawing from both.

    The pot is not handed out here; pass the outcome to ``award``.

    :raises InsufficientCardsError: If either deck is empty.
    """
    if deck_a.is_empty() or deck_b.is_empty():
        raise InsufficientCardsError(
            f"Cannot play a round with {deck_a.size} and {deck_b.size} cards"
        )

    pot = _Pot()
    card_a = deck_a.draw()
    card_b = deck_b.draw()
    pot.add(Player.A, [card_a])
    pot.add(Player.B, [card_b])
    war_depth = 0

    while True:
        winner = compare(card_a, card_b)
        if winner is not None:
            return pot.outcome(winner, war_depth)

        war_depth += 1
        logger.debug(
            "War %d over %s and %s (%d vs %d cards left)",
            war_depth,
            card_a,
            card_b,
            deck_a.size,
            deck_b.size,
        )

        if deck_a.size < WAR_ANTE or deck_b.size < WAR_ANTE:
            winner = _short_war_winner(deck_a, deck_b)
            short_players = tuple(
                player
                for player, deck in ((Player.A, deck_a), (Player.B, deck_b))
                if deck.size < WAR_ANTE
            )
            # Whoever is short puts in everything they have left
            for player in short_players:
                deck = deck_a if player is Player.A else deck_b
                pot.add(player, deck.draw_all(), face_up=False)
            logger.debug("War %d decided by a short deck: %s", war_depth, winner)
            return pot.outcome(winner, war_depth, short_players)

        ante_a = deck_a.draw(WAR_ANTE)
        ante_b = deck_b.draw(WAR_ANTE)
        pot.add(Player.A, ante_a)
        pot.add(Player.B, ante_b)
        card_a = ante_a[-1]
        card_b = ante_b[-1]


def award(outcome: RoundOutcome, deck_a: Deck, deck_b: Deck) -> None:
    """Put the pot at the bottom of the winner's deck."""
    if outcome.winner is Player.A:
        deck_a.add_to_bottom(outcome.cards_won)
    elif outcome.winner is Player.B:
        deck_b.add_to_bottom(outcome.cards_won)
    else:
        logger.info("Dead pot of %d cards leaves play", len(outcome.cards_won))
