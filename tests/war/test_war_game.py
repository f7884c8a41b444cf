import re
import time

import pytest

from cardwar.common.deck import Deck
from cardwar.common.io_interface import DummyIOInterface
from cardwar.war.engine import Player
from cardwar.war.game import EndReason, RoundRecord, WarGame, run_game
from cardwar.war.loader import load_decks
from cardwar.war.rules import WarRules

ROUND_LINE = re.compile(r"^Round \d+$")


def test_ace_vs_two_player_b_wins(make_deck, io_interface):
    result = run_game(make_deck("Hearts,1"), make_deck("Spades,2"), io_interface)

    assert result.winner is Player.B
    assert result.end_reason is EndReason.KNOCKOUT
    assert result.records == (RoundRecord(1, 0, 2, "Ace of Hearts", "2 of Spades"),)
    assert "Player B wins the game!" in io_interface.sent_messages


def test_king_vs_joker_player_b_wins(make_deck, io_interface):
    result = run_game(make_deck("Hearts,13"), make_deck("Joker,Red"), io_interface)

    assert result.winner is Player.B
    assert result.records[0].player_b_cards == "Joker"


def test_narration_markers(make_deck, io_interface):
    run_game(make_deck("Hearts,5"), make_deck("Spades,3"), io_interface)
    messages = io_interface.sent_messages

    assert messages[0] == "Starting War: Player A has 1 cards, Player B has 1 cards"
    assert messages[1:5] == [
        "Round 1",
        "Player A plays 5 of Hearts",
        "Player B plays 3 of Spades",
        "Player A wins the round and takes 2 cards (Player A: 2, Player B: 0)",
    ]
    assert "Game Over after 1 rounds" in messages
    assert "Player A wins the game!" in messages


def test_war_is_narrated(make_deck, io_interface):
    deck_a = make_deck("Hearts,7", "Hearts,2", "Hearts,3", "Hearts,12")
    deck_b = make_deck("Spades,7", "Spades,2", "Spades,3", "Spades,4")

    result = run_game(deck_a, deck_b, io_interface)

    assert result.winner is Player.A
    assert result.stats.wars == 1
    assert "War! Each player puts 2 cards face down (war 1)" in io_interface.sent_messages
    assert "Player A plays Queen of Hearts" in io_interface.sent_messages
    assert result.records[0].player_a_cards == (
        "7 of Hearts, 2 of Hearts, 3 of Hearts, Queen of Hearts"
    )


def test_short_war_is_narrated(make_deck, io_interface):
    deck_a = make_deck("Hearts,8", "Hearts,13", "Hearts,13")
    deck_b = make_deck("Spades,8", "Spades,2", "Spades,3", "Spades,4")

    result = run_game(deck_a, deck_b, io_interface)

    assert result.winner is Player.B
    assert "War! (war 1)" in io_interface.sent_messages
    assert (
        "Player A cannot finish the war and puts in 2 remaining cards"
        in io_interface.sent_messages
    )


def test_dead_pot_ends_in_tie(make_deck, io_interface):
    result = run_game(make_deck("Hearts,5"), make_deck("Spades,5"), io_interface)

    assert result.is_tie
    assert result.end_reason is EndReason.EXHAUSTED
    assert result.records == (RoundRecord(1, 0, 0, "5 of Hearts", "5 of Spades"),)
    assert any("Tie" in message for message in io_interface.sent_messages)


def test_repeated_position_ends_in_tie(make_deck, io_interface):
    # Each player wins one round and the decks return to their starting order
    deck_a = make_deck("Hearts,9", "Hearts,2")
    deck_b = make_deck("Spades,3", "Spades,10")

    result = run_game(deck_a, deck_b, io_interface)

    assert result.end_reason is EndReason.REPEATED_POSITION
    assert result.rounds_played == 4
    assert result.is_tie
    assert "The game ends in a Tie: the decks are repeating" in io_interface.sent_messages


def test_round_limit(io_interface):
    deck_a = Deck.standard()
    deck_b = Deck(list(reversed(Deck.standard().cards)))

    result = run_game(deck_a, deck_b, io_interface, WarRules(max_rounds=3))

    assert result.rounds_played == 3
    assert result.end_reason is EndReason.ROUND_LIMIT
    assert result.is_tie


def test_round_parity_with_narration(data_dir, io_interface):
    deck_a, deck_b = load_decks(data_dir / "simple_deck.csv")

    result = run_game(deck_a, deck_b, io_interface)

    round_lines = [m for m in io_interface.sent_messages if ROUND_LINE.match(m)]
    assert len(round_lines) == len(result.records)
    assert [r.round_number for r in result.records] == list(
        range(1, len(result.records) + 1)
    )


def test_six_card_deck_keeps_six_cards(data_dir, io_interface):
    result = run_game(*load_decks(data_dir / "simple_deck.csv"), io_interface)

    first = result.records[0]
    assert first.player_a_count + first.player_b_count == 6
    assert result.winner is not None or result.is_tie


@pytest.mark.parametrize("name", ["simple_deck.csv", "face_cards.csv", "with_jokers.csv"])
def test_conservation_every_round(data_dir, name):
    deck_a, deck_b = load_decks(data_dir / name)
    total = deck_a.size + deck_b.size
    result = WarGame(deck_a, deck_b, io_interface=DummyIOInterface()).play()

    for record in result.records:
        if record.player_a_count + record.player_b_count == 0:
            assert result.end_reason is EndReason.EXHAUSTED
            continue
        assert record.player_a_count + record.player_b_count == total


def test_full_deck_finishes_quickly():
    cards = Deck.standard().cards
    deck_a, deck_b = Deck(cards[0::2]), Deck(cards[1::2])

    start = time.monotonic()
    result = run_game(deck_a, deck_b, DummyIOInterface())

    assert time.monotonic() - start < 30
    assert result.winner is not None or result.is_tie
    assert result.rounds_played > 0


def test_stats_track_wins_and_streaks(make_deck, io_interface):
    deck_a = make_deck("Hearts,10", "Hearts,11", "Hearts,2")
    deck_b = make_deck("Spades,3", "Spades,4", "Spades,12")

    result = run_game(deck_a, deck_b, io_interface, WarRules(max_rounds=3))

    state = result.stats.get_state()
    assert state["rounds_played"] == 3
    assert state["wins"] == {"A": 2, "B": 1}
    assert state["max_streak"] == {"A": 2, "B": 1}
    assert any(m.startswith("Rounds Played: 3") for m in io_interface.sent_messages)


def test_records_are_immutable(make_deck):
    result = run_game(make_deck("Hearts,1"), make_deck("Spades,2"), DummyIOInterface())
    with pytest.raises(AttributeError):
        result.records[0].round_number = 5


def test_default_io_interface_is_console(make_deck, capsys):
    run_game(make_deck("Hearts,1"), make_deck("Spades,2"))
    out = capsys.readouterr().out
    assert "Starting War" in out
    assert "Round 1" in out
    assert "Game Over" in out
