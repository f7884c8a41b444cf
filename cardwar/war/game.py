"""
Game loop for War.

``WarGame`` plays rounds between two decks until one of them is empty,
narrating each round to an IOInterface and keeping a ``RoundRecord`` per round
for the result file.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Set, Tuple

from cardwar.common.card import Card
from cardwar.common.deck import Deck
from cardwar.common.io_interface import ConsoleIOInterface, IOInterface
from cardwar.war.constants import WAR_ANTE, WAR_FACE_DOWN
from cardwar.war.engine import Player, RoundOutcome, award, play_round
from cardwar.war.rules import WarRules

logger = logging.getLogger(__name__)


class EndReason(Enum):
    """Why a game of War stopped."""

    KNOCKOUT = auto()  # one player holds every card still in play
    EXHAUSTED = auto()  # both players are out of cards
    REPEATED_POSITION = auto()  # both decks are back in an order seen before
    ROUND_LIMIT = auto()


def format_cards(cards: Iterable[Card]) -> str:
    return ", ".join(str(card) for card in cards)


@dataclass(frozen=True)
class RoundRecord:
    """
    Immutable summary of one round, as written to the result file.

    Attributes:
        round_number: 1-based round number
        player_a_count: Cards Player A holds after the round
        player_b_count: Cards Player B holds after the round
        player_a_cards: Cards Player A played this round
        player_b_cards: Cards Player B played this round
    """

    round_number: int
    player_a_count: int
    player_b_count: int
    player_a_cards: str
    player_b_cards: str

    def to_row(self) -> List:
        return [
            self.round_number,
            self.player_a_count,
            self.player_b_count,
            self.player_a_cards,
            self.player_b_cards,
        ]


class WarGameStats:
    def __init__(self):
        self.rounds_played = 0
        self.wars = 0
        self.longest_war = 0
        self.wins = {player: 0 for player in Player}
        self.current_streak = {player: 0 for player in Player}
        self.max_streak = {player: 0 for player in Player}

    def record(self, outcome: RoundOutcome) -> None:
        self.rounds_played += 1
        self.wars += outcome.war_depth
        self.longest_war = max(self.longest_war, outcome.war_depth)

        for player in Player:
            if player is outcome.winner:
                self.wins[player] += 1
                self.current_streak[player] += 1
                self.max_streak[player] = max(
                    self.max_streak[player], self.current_streak[player]
                )
            else:
                self.current_streak[player] = 0

    def get_state(self):
        return {
            "rounds_played": self.rounds_played,
            "wars": self.wars,
            "longest_war": self.longest_war,
            "wins": {player.value: wins for player, wins in self.wins.items()},
            "current_streak": {
                player.value: streak for player, streak in self.current_streak.items()
            },
            "max_streak": {
                player.value: streak for player, streak in self.max_streak.items()
            },
        }

    def summary_lines(self) -> List[str]:
        lines = [f"Rounds Played: {self.rounds_played}"]
        for player, wins in self.wins.items():
            if self.rounds_played:
                win_percentage = (wins / self.rounds_played) * 100
            else:
                win_percentage = 0.0
            lines.append(
                f"{player} won {wins} rounds ({win_percentage:.2f}%), "
                f"longest win streak: {self.max_streak[player]}"
            )
        lines.append(f"Wars fought: {self.wars} (longest: {self.longest_war})")
        return lines


@dataclass(frozen=True)
class GameResult:
    """
    Final result of a game of War.

    Attributes:
        records: One RoundRecord per round played, in order
        winner: The player who won, or None for a tie
        end_reason: Why the game stopped
        stats: Round statistics for the whole game
    """

    records: Tuple[RoundRecord, ...]
    winner: Optional[Player]
    end_reason: EndReason
    stats: WarGameStats = field(compare=False)

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def rounds_played(self) -> int:
        return len(self.records)


class WarGame:
    """
    A game of War between Player A and Player B.

    :param deck_a: Player A's deck; it is played from directly.
    :param deck_b: Player B's deck; it is played from directly.
    :param io_interface: Where narration goes. Defaults to the console.
    :param rules: Game settings. Defaults to ``WarRules()``.
    """

    def __init__(
        self,
        deck_a: Deck,
        deck_b: Deck,
        io_interface: Optional[IOInterface] = None,
        rules: Optional[WarRules] = None,
    ):
        self.decks = {Player.A: deck_a, Player.B: deck_b}
        self.io_interface = io_interface or ConsoleIOInterface()
        self.rules = rules or WarRules()
        self.stats = WarGameStats()
        self.records: List[RoundRecord] = []
        self._seen_positions: Set[Tuple[Tuple[Card, ...], Tuple[Card, ...]]] = set()

    @property
    def deck_a(self) -> Deck:
        return self.decks[Player.A]

    @property
    def deck_b(self) -> Deck:
        return self.decks[Player.B]

    def _counts(self) -> str:
        return f"Player A: {self.deck_a.size}, Player B: {self.deck_b.size}"

    def _check_game_over(self) -> Optional[Tuple[Optional[Player], EndReason]]:
        """Return (winner, reason) if the game should stop before the next round."""
        empty_a = self.deck_a.is_empty()
        empty_b = self.deck_b.is_empty()
        if empty_a and empty_b:
            return None, EndReason.EXHAUSTED
        if empty_a:
            return Player.B, EndReason.KNOCKOUT
        if empty_b:
            return Player.A, EndReason.KNOCKOUT

        if (
            self.rules.max_rounds is not None
            and len(self.records) >= self.rules.max_rounds
        ):
            return None, EndReason.ROUND_LIMIT

        if self.rules.detect_repeats:
            position = (self.deck_a.snapshot(), self.deck_b.snapshot())
            if position in self._seen_positions:
                return None, EndReason.REPEATED_POSITION
            self._seen_positions.add(position)

        return None

    def _narrate_round(self, round_number: int, outcome: RoundOutcome) -> None:
        output = self.io_interface.output
        output(f"Round {round_number}")

        face_up = list(zip(outcome.face_up_a, outcome.face_up_b))
        for step, (card_a, card_b) in enumerate(face_up):
            if step:
                output(
                    f"War! Each player puts {WAR_FACE_DOWN} cards face down "
                    f"(war {step})"
                )
            output(f"Player A plays {card_a}")
            output(f"Player B plays {card_b}")

        if outcome.short_players:
            output(f"War! (war {outcome.war_depth})")
            # Cards played before the short war: the opening card plus full antes
            anted = 1 + WAR_ANTE * (outcome.war_depth - 1)
            for player in outcome.short_players:
                played = outcome.cards_a if player is Player.A else outcome.cards_b
                remaining = len(played) - anted
                output(
                    f"{player} cannot finish the war and puts in "
                    f"{remaining} remaining card{'' if remaining == 1 else 's'}"
                )

        if outcome.winner is None:
            output(
                f"Nobody can win the war; {len(outcome.cards_won)} cards leave play "
                f"({self._counts()})"
            )
        else:
            output(
                f"{outcome.winner} wins the round and takes "
                f"{len(outcome.cards_won)} cards ({self._counts()})"
            )

    def play_round(self) -> RoundRecord:
        """Play, narrate and record a single round."""
        round_number = len(self.records) + 1
        outcome = play_round(self.deck_a, self.deck_b)
        award(outcome, self.deck_a, self.deck_b)
        self.stats.record(outcome)
        self._narrate_round(round_number, outcome)

        record = RoundRecord(
            round_number=round_number,
            player_a_count=self.deck_a.size,
            player_b_count=self.deck_b.size,
            player_a_cards=format_cards(outcome.cards_a),
            player_b_cards=format_cards(outcome.cards_b),
        )
        self.records.append(record)
        logger.debug("Round %d: %s", round_number, record)
        return record

    def play(self) -> GameResult:
        """Play until the game is over and return the result."""
        output = self.io_interface.output
        output(
            f"Starting War: Player A has {self.deck_a.size} cards, "
            f"Player B has {self.deck_b.size} cards"
        )

        while True:
            game_over = self._check_game_over()
            if game_over is not None:
                winner, reason = game_over
                break
            self.play_round()

        output(f"Game Over after {len(self.records)} rounds")
        if winner is not None:
            output(f"{winner} wins the game!")
        elif reason is EndReason.EXHAUSTED:
            output("The game ends in a Tie: both players are out of cards")
        elif reason is EndReason.REPEATED_POSITION:
            output("The game ends in a Tie: the decks are repeating")
        else:
            output(f"The game ends in a Tie: round limit reached ({self._counts()})")
        for line in self.stats.summary_lines():
            output(line)

        logger.info("Game over after %d rounds: %s", len(self.records), reason.name)
        return GameResult(
            records=tuple(self.records),
            winner=winner,
            end_reason=reason,
            stats=self.stats,
        )


def run_game(
    deck_a: Deck,
    deck_b: Deck,
    io_interface: Optional[IOInterface] = None,
    rules: Optional[WarRules] = None,
) -> GameResult:
    """Play a full game of War between two decks."""
    return WarGame(deck_a, deck_b, io_interface=io_interface, rules=rules).play()
