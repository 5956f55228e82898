"""15×15 Scrabble board over a fixed bonus-square layout."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from scrabblecore.game.tiles import Tile

SIZE = 15
CENTER = (7, 7)

Cell = tuple[int, int]


class BonusKind(Enum):
    NORMAL = "normal"
    DOUBLE_LETTER = "DL"
    TRIPLE_LETTER = "TL"
    DOUBLE_WORD = "DW"
    TRIPLE_WORD = "TW"
    CENTER = "center"  # scores as a double word


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def step(self) -> Cell:
        return (0, 1) if self is Orientation.HORIZONTAL else (1, 0)

    @property
    def other(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


# Bonus square positions ----------------------------------------------------

# Triple Word Score
_TW_POSITIONS = [
    (0, 0), (0, 7), (0, 14),
    (7, 0), (7, 14),
    (14, 0), (14, 7), (14, 14),
]

# Double Word Score (the center star is listed separately)
_DW_POSITIONS = [
    (1, 1), (2, 2), (3, 3), (4, 4),
    (1, 13), (2, 12), (3, 11), (4, 10),
    (10, 4), (11, 3), (12, 2), (13, 1),
    (10, 10), (11, 11), (12, 12), (13, 13),
]

# Triple Letter Score
_TL_POSITIONS = [
    (1, 5), (1, 9),
    (5, 1), (5, 5), (5, 9), (5, 13),
    (9, 1), (9, 5), (9, 9), (9, 13),
    (13, 5), (13, 9),
]

# Double Letter Score
_DL_POSITIONS = [
    (0, 3), (0, 11),
    (2, 6), (2, 8),
    (3, 0), (3, 7), (3, 14),
    (6, 2), (6, 6), (6, 8), (6, 12),
    (7, 3), (7, 11),
    (8, 2), (8, 6), (8, 8), (8, 12),
    (11, 0), (11, 7), (11, 14),
    (12, 6), (12, 8),
    (14, 3), (14, 11),
]

BONUS_SQUARES: dict[Cell, BonusKind] = {CENTER: BonusKind.CENTER}
for _pos in _TW_POSITIONS:
    BONUS_SQUARES[_pos] = BonusKind.TRIPLE_WORD
for _pos in _DW_POSITIONS:
    BONUS_SQUARES[_pos] = BonusKind.DOUBLE_WORD
for _pos in _TL_POSITIONS:
    BONUS_SQUARES[_pos] = BonusKind.TRIPLE_LETTER
for _pos in _DL_POSITIONS:
    BONUS_SQUARES[_pos] = BonusKind.DOUBLE_LETTER

_NEIGHBOURS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

_ASCII_BONUS = {
    BonusKind.TRIPLE_WORD: " 3W",
    BonusKind.DOUBLE_WORD: " 2W",
    BonusKind.CENTER: "  *",
    BonusKind.TRIPLE_LETTER: " 3L",
    BonusKind.DOUBLE_LETTER: " 2L",
}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


class Board:
    """15×15 Scrabble board with bonus squares.

    The board exclusively owns the tiles placed on it. Bonus kinds are fixed
    at construction and never change; only place/remove touch occupancy.
    """

    def __init__(self) -> None:
        self._grid: list[list[Tile | None]] = [
            [None] * SIZE for _ in range(SIZE)
        ]
        self._bonus: list[list[BonusKind]] = [
            [BONUS_SQUARES.get((r, c), BonusKind.NORMAL) for c in range(SIZE)]
            for r in range(SIZE)
        ]
        self._count = 0

    # ------------------------------------------------------------------
    # Occupancy
    # ------------------------------------------------------------------

    def place_tile(self, row: int, col: int, tile: Tile) -> bool:
        """Put ``tile`` on an empty in-range cell. Returns False otherwise."""
        if not in_bounds(row, col) or self._grid[row][col] is not None:
            return False
        self._grid[row][col] = tile
        self._count += 1
        return True

    def remove_tile(self, row: int, col: int) -> Tile | None:
        """Take the tile off (row, col). Returns it, or None if there was none."""
        if not in_bounds(row, col):
            return None
        tile = self._grid[row][col]
        if tile is not None:
            self._grid[row][col] = None
            self._count -= 1
        return tile

    def get_tile(self, row: int, col: int) -> Tile | None:
        if in_bounds(row, col):
            return self._grid[row][col]
        return None

    def get_bonus(self, row: int, col: int) -> BonusKind:
        if in_bounds(row, col):
            return self._bonus[row][col]
        return BonusKind.NORMAL

    def is_occupied(self, row: int, col: int) -> bool:
        return self.get_tile(row, col) is not None

    def is_empty(self) -> bool:
        return self._count == 0

    def tile_count(self) -> int:
        return self._count

    def occupied_cells(self) -> list[Cell]:
        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self._grid[r][c] is not None
        ]

    def clear(self) -> None:
        """Remove every tile. The bonus layout is untouched."""
        self._grid = [[None] * SIZE for _ in range(SIZE)]
        self._count = 0

    # ------------------------------------------------------------------
    # Placement legality
    # ------------------------------------------------------------------

    def is_valid_placement(
        self,
        origin: Cell,
        tiles: list[Tile],
        orientation: Orientation,
    ) -> bool:
        """Check laying ``tiles`` on consecutive cells from ``origin``.

        Necessary but not sufficient: word boundaries across existing tiles
        are left to the word finder.
        """
        if not tiles:
            return False
        dr, dc = orientation.step
        row, col = origin
        cells = [(row + i * dr, col + i * dc) for i in range(len(tiles))]
        return self.is_valid_cells(cells)

    def is_valid_cells(
        self, cells: Iterable[Cell], pending: Iterable[Cell] = ()
    ) -> bool:
        """Check an explicit set of target cells.

        ``pending`` cells hold tentative tiles already sitting on the board;
        they count as empty targets and are ignored when looking for
        existing neighbours.
        """
        targets = set(cells)
        ignored = set(pending)
        if not targets:
            return False

        for r, c in targets:
            if not in_bounds(r, c):
                return False
            if self._grid[r][c] is not None and (r, c) not in ignored:
                return False

        committed = self._count - sum(
            1 for r, c in ignored if self.is_occupied(r, c)
        )
        if committed == 0:
            return CENTER in targets

        for r, c in targets:
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if (nr, nc) in ignored:
                    continue
                if self.is_occupied(nr, nc):
                    return True
        return False

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------

    def run_through(
        self, row: int, col: int, orientation: Orientation
    ) -> list[Cell]:
        """All occupied cells of the contiguous run through (row, col).

        Extends backward then forward while cells are occupied. The starting
        cell is always included, occupied or not.
        """
        dr, dc = orientation.step
        positions: list[Cell] = [(row, col)]

        r, c = row - dr, col - dc
        while self.is_occupied(r, c):
            positions.insert(0, (r, c))
            r, c = r - dr, c - dc

        r, c = row + dr, col + dc
        while self.is_occupied(r, c):
            positions.append((r, c))
            r, c = r + dr, c + dc

        return positions

    def letters_at(self, cells: Iterable[Cell]) -> str:
        return "".join(self._grid[r][c].letter for r, c in cells)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_ascii(self) -> str:
        """Render the board as ASCII (wildcard letters in lowercase)."""
        col_hdr = "     " + "".join(f"{c:3d}" for c in range(SIZE))
        lines = [col_hdr]

        for r in range(SIZE):
            cells: list[str] = []
            for c in range(SIZE):
                tile = self._grid[r][c]
                if tile is not None:
                    if tile.is_wildcard:
                        cells.append(f"  {tile.letter.lower()}")
                    else:
                        cells.append(f"  {tile.letter}")
                else:
                    cells.append(_ASCII_BONUS.get(self._bonus[r][c], "  ."))
            lines.append(f" {r:2d} " + "".join(cells))

        return "\n".join(lines)
