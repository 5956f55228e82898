"""Tests for word and move scoring with bonus squares."""

import pytest

from scrabblecore.game.board import Board, Orientation
from scrabblecore.game.scoring import score_breakdown, score_move, score_word
from scrabblecore.game.tiles import Tile
from scrabblecore.game.words import WordInfo, find_words


def _lay(board, word, row, col, horizontal=True):
    dr, dc = (0, 1) if horizontal else (1, 0)
    cells = []
    for i, ch in enumerate(word):
        cell = (row + i * dr, col + i * dc)
        board.place_tile(*cell, Tile.wildcard().with_letter(ch) if ch.islower()
                         else Tile.from_letter(ch))
        cells.append(cell)
    return cells


def _info(board, cells, new_cells=None, orientation=Orientation.HORIZONTAL):
    return WordInfo(
        word=board.letters_at(cells),
        anchor=cells[0],
        orientation=orientation,
        cells=tuple(cells),
        new_cells=frozenset(cells if new_cells is None else new_cells),
    )


@pytest.fixture
def board():
    return Board()


class TestWordScore:
    def test_center_doubles_first_word(self, board):
        cells = _lay(board, "CAT", 7, 6)
        assert score_word(board, _info(board, cells)) == 10

    def test_breakdown_fields(self, board):
        cells = _lay(board, "CAT", 7, 6)
        ws = score_breakdown(board, _info(board, cells))
        assert ws.word == "CAT"
        assert ws.letter_points == 5
        assert ws.word_multiplier == 2
        assert ws.total == 10

    def test_double_letter(self, board):
        # (6,6) is a double letter square
        cells = _lay(board, "DO", 6, 6)
        assert score_word(board, _info(board, cells)) == 2 * 2 + 1

    def test_triple_letter(self, board):
        # (5,5) is a triple letter square
        cells = _lay(board, "ZA", 5, 5)
        assert score_word(board, _info(board, cells)) == 30 + 1

    def test_two_double_words_compound(self, board):
        # (4,4) and (4,10) are double word squares with nothing between
        cells = _lay(board, "AAAAAAA", 4, 4)
        assert score_word(board, _info(board, cells)) == 7 * 4

    def test_two_triple_words_compound(self, board):
        # (0,0) and (0,7) triple word, (0,3) double letter
        cells = _lay(board, "AAAAAAAA", 0, 0)
        assert score_word(board, _info(board, cells)) == (7 + 2) * 9

    def test_used_squares_do_not_score_again(self, board):
        cells = _lay(board, "CAT", 7, 6)
        board.place_tile(7, 9, Tile.from_letter("S"))
        cells.append((7, 9))
        info = _info(board, cells, new_cells=[(7, 9)])
        assert score_word(board, info) == 6

    def test_wildcard_scores_zero_but_takes_multiplier(self, board):
        cells = _lay(board, "CAt", 7, 6)
        ws = score_breakdown(board, _info(board, cells))
        assert ws.letter_points == 4
        assert ws.total == 8

    def test_scoring_is_repeatable(self, board):
        cells = _lay(board, "CAT", 7, 6)
        info = _info(board, cells)
        assert score_word(board, info) == score_word(board, info)


class TestMoveScore:
    def test_move_is_sum_of_words(self, board):
        _lay(board, "CAT", 7, 6)
        placed = _lay(board, "OX", 8, 8)
        words = find_words(board, placed)
        # OX: O on double letter (2) + X (8); TO: T (1) + O doubled (2)
        assert [score_word(board, w) for w in words] == [10, 3]
        assert score_move(board, words) == 13

    def test_no_words_scores_zero(self, board):
        assert score_move(board, []) == 0
