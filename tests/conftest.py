"""Shared test fixtures for scrabblecore."""

import random

import pytest

from scrabblecore.config import EngineConfig
from scrabblecore.game.dictionary import Dictionary
from scrabblecore.game.engine import GameMode, ScrabbleGame
from scrabblecore.game.tiles import Tile

WORDS = [
    "CAT", "CATS", "AT", "TA", "AS", "SO", "TO", "ACE", "ACES", "DOG",
    "DO", "GO", "OX", "AX", "XI", "HELLO", "SALTIER", "ZA", "CAB", "CABS",
    "ARE", "TAR", "ART", "RAT", "CART", "QI",
]


def set_rack(player, letters: str) -> None:
    """Replace a player's rack with tiles for ``letters`` ('?' = blank)."""
    player.rack.clear()
    for ch in letters:
        player.rack.add(Tile.from_letter(ch))


def place_word(game, word: str, row: int, col: int, horizontal: bool = True):
    """Rack up ``word`` for the current player and lay it out, skipping occupied cells.

    Returns the confirm result.
    """
    dr, dc = (0, 1) if horizontal else (1, 0)
    needed = "".join(
        ch for i, ch in enumerate(word)
        if not game.board.is_occupied(row + i * dr, col + i * dc)
    )
    set_rack(game.current_player, needed)
    for i, ch in enumerate(word):
        r, c = row + i * dr, col + i * dc
        if game.board.is_occupied(r, c):
            continue
        idx = [t.letter for t in game.current_player.rack].index(ch)
        assert game.request_placement(r, c, rack_index=idx).success
    return game.confirm_word()


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def config():
    return EngineConfig()


@pytest.fixture
def game(dictionary, config):
    g = ScrabbleGame(dictionary, config, rng=random.Random(42))
    g.start_new_game(GameMode.HUMAN_VS_HUMAN, "Alice", "Bob")
    return g


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory for test runs."""
    return tmp_path / "output"
