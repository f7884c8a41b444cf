"""
Pytest configuration for tests at the root level.

This module contains shared fixtures for building cards, decks and deck files.
"""

from pathlib import Path

import pytest

from cardwar.common.card import Card
from cardwar.common.deck import Deck
from cardwar.common.io_interface import TestIOInterface

DATA_DIR = Path(__file__).parent / "data"


def cards(*lines):
    """Build cards from "suit,rank" strings, e.g. cards("Hearts,2", "Joker,Red")."""
    return [Card.from_tokens(*line.split(",", 1)) for line in lines]


def deck(*lines):
    return Deck(cards(*lines))


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def write_deck(tmp_path):
    """Write deck lines to a CSV file and return its path."""

    def _write(*lines, name="deck.csv"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_cards():
    return cards


@pytest.fixture
def make_deck():
    return deck
