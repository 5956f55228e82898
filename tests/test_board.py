"""Tests for the board: bonus layout, occupancy and placement legality."""

import pytest

from scrabblecore.game.board import (
    BONUS_SQUARES,
    CENTER,
    SIZE,
    Board,
    BonusKind,
    Orientation,
)
from scrabblecore.game.tiles import Tile


def _tiles(letters):
    return [Tile.from_letter(ch) for ch in letters]


@pytest.fixture
def board():
    return Board()


# ------------------------------------------------------------------
# Bonus layout
# ------------------------------------------------------------------

class TestBonusLayout:
    def test_center_is_center_kind(self, board):
        assert board.get_bonus(*CENTER) is BonusKind.CENTER

    def test_square_counts(self):
        kinds = list(BONUS_SQUARES.values())
        assert kinds.count(BonusKind.TRIPLE_WORD) == 8
        assert kinds.count(BonusKind.DOUBLE_WORD) == 16
        assert kinds.count(BonusKind.TRIPLE_LETTER) == 12
        assert kinds.count(BonusKind.DOUBLE_LETTER) == 24
        assert kinds.count(BonusKind.CENTER) == 1

    def test_layout_is_symmetric(self, board):
        for r in range(SIZE):
            for c in range(SIZE):
                kind = board.get_bonus(r, c)
                assert board.get_bonus(c, r) is kind
                assert board.get_bonus(SIZE - 1 - r, c) is kind
                assert board.get_bonus(r, SIZE - 1 - c) is kind

    def test_corners_are_triple_word(self, board):
        for r, c in [(0, 0), (0, 14), (14, 0), (14, 14)]:
            assert board.get_bonus(r, c) is BonusKind.TRIPLE_WORD

    def test_out_of_range_bonus_is_normal(self, board):
        assert board.get_bonus(-1, 0) is BonusKind.NORMAL
        assert board.get_bonus(0, 15) is BonusKind.NORMAL

    def test_clear_keeps_layout(self, board):
        board.place_tile(0, 0, Tile.from_letter("A"))
        board.clear()
        assert board.is_empty()
        assert board.get_bonus(0, 0) is BonusKind.TRIPLE_WORD


# ------------------------------------------------------------------
# Occupancy
# ------------------------------------------------------------------

class TestOccupancy:
    def test_place_and_get(self, board):
        tile = Tile.from_letter("Q")
        assert board.place_tile(3, 4, tile) is True
        assert board.get_tile(3, 4) == tile
        assert not board.is_empty()
        assert board.tile_count() == 1

    def test_place_on_occupied_fails_without_change(self, board):
        board.place_tile(3, 4, Tile.from_letter("Q"))
        assert board.place_tile(3, 4, Tile.from_letter("Z")) is False
        assert board.get_tile(3, 4).letter == "Q"
        assert board.tile_count() == 1

    def test_place_out_of_range_fails(self, board):
        assert board.place_tile(15, 0, Tile.from_letter("A")) is False
        assert board.place_tile(0, -1, Tile.from_letter("A")) is False
        assert board.is_empty()

    def test_remove_returns_tile(self, board):
        tile = Tile.from_letter("K")
        board.place_tile(1, 1, tile)
        assert board.remove_tile(1, 1) == tile
        assert board.is_empty()

    def test_remove_empty_cell(self, board):
        assert board.remove_tile(1, 1) is None
        assert board.remove_tile(99, 99) is None

    def test_out_of_range_read_is_empty(self, board):
        assert board.get_tile(-1, -1) is None

    def test_occupied_cells(self, board):
        board.place_tile(2, 3, Tile.from_letter("A"))
        board.place_tile(0, 1, Tile.from_letter("B"))
        assert board.occupied_cells() == [(0, 1), (2, 3)]


# ------------------------------------------------------------------
# Placement legality
# ------------------------------------------------------------------

class TestPlacementLegality:
    def test_first_move_must_cover_center(self, board):
        assert board.is_valid_placement((7, 5), _tiles("CAT"), Orientation.HORIZONTAL)
        assert not board.is_valid_placement((7, 8), _tiles("CAT"), Orientation.HORIZONTAL)
        assert board.is_valid_placement((5, 7), _tiles("CAT"), Orientation.VERTICAL)
        assert not board.is_valid_placement((0, 0), _tiles("CAT"), Orientation.VERTICAL)

    def test_first_move_iff_covers_center(self, board):
        for r in range(SIZE):
            for c in range(SIZE - 2):
                cells = {(r, c), (r, c + 1), (r, c + 2)}
                expected = CENTER in cells
                assert board.is_valid_placement(
                    (r, c), _tiles("ABC"), Orientation.HORIZONTAL
                ) is expected

    def test_later_move_must_touch_existing(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        assert board.is_valid_placement((8, 7), _tiles("T"), Orientation.HORIZONTAL)
        assert board.is_valid_placement((6, 5), _tiles("TO"), Orientation.HORIZONTAL) is False
        assert not board.is_valid_placement((0, 0), _tiles("TO"), Orientation.HORIZONTAL)

    def test_diagonal_contact_is_not_adjacent(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        assert not board.is_valid_placement((8, 8), _tiles("T"), Orientation.HORIZONTAL)

    def test_overlap_rejected(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        assert not board.is_valid_placement((7, 6), _tiles("AT"), Orientation.HORIZONTAL)

    def test_running_off_board_rejected(self, board):
        assert not board.is_valid_placement((7, 13), _tiles("CAT"), Orientation.HORIZONTAL)

    def test_empty_tile_list_rejected(self, board):
        assert not board.is_valid_placement(CENTER, [], Orientation.HORIZONTAL)

    def test_pending_cells_count_as_empty(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        board.place_tile(7, 8, Tile.from_letter("T"))
        # both tiles tentative: the board is still logically empty
        assert board.is_valid_cells([(7, 7), (7, 8)], pending=[(7, 7), (7, 8)])
        # tentative tiles away from the center on an otherwise empty board
        board.clear()
        board.place_tile(0, 0, Tile.from_letter("A"))
        assert not board.is_valid_cells([(0, 0)], pending=[(0, 0)])

    def test_pending_neighbours_do_not_anchor(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        board.place_tile(2, 2, Tile.from_letter("T"))
        board.place_tile(2, 3, Tile.from_letter("O"))
        assert not board.is_valid_cells([(2, 2), (2, 3)], pending=[(2, 2), (2, 3)])
        assert board.is_valid_cells([(7, 8)], pending=[])


# ------------------------------------------------------------------
# Runs and rendering
# ------------------------------------------------------------------

class TestRuns:
    def test_run_extends_both_ways(self, board):
        for i, ch in enumerate("HELLO"):
            board.place_tile(7, 3 + i, Tile.from_letter(ch))
        cells = board.run_through(7, 5, Orientation.HORIZONTAL)
        assert cells == [(7, 3), (7, 4), (7, 5), (7, 6), (7, 7)]
        assert board.letters_at(cells) == "HELLO"

    def test_run_of_isolated_cell(self, board):
        board.place_tile(7, 7, Tile.from_letter("A"))
        assert board.run_through(7, 7, Orientation.VERTICAL) == [(7, 7)]

    def test_ascii_shows_bonuses_and_blanks(self, board):
        board.place_tile(7, 7, Tile.wildcard().with_letter("e"))
        text = board.to_ascii()
        assert "3W" in text
        assert "  e" in text
