"""Word discovery: every word a placement forms, primary and cross.

The tiles placed this turn are not the word. A run of new tiles may close
gaps with letters already on the board on either side, so each word is
re-derived by walking outward from the placed cells until an empty square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scrabblecore.game.board import Board, Cell, Orientation


@dataclass(frozen=True)
class WordInfo:
    """One word formed by a move."""

    word: str
    anchor: Cell
    orientation: Orientation
    cells: tuple[Cell, ...]
    new_cells: frozenset[Cell]

    @property
    def key(self) -> tuple[str, Cell, Orientation]:
        return (self.word, self.anchor, self.orientation)

    def __len__(self) -> int:
        return len(self.cells)


def dominant_orientation(placed: Iterable[Cell]) -> Orientation:
    """Horizontal if every placed cell shares a row, vertical otherwise."""
    rows = {r for r, _ in placed}
    return Orientation.HORIZONTAL if len(rows) <= 1 else Orientation.VERTICAL


def _word_at(
    board: Board, cell: Cell, orientation: Orientation, placed: frozenset[Cell]
) -> WordInfo | None:
    cells = board.run_through(cell[0], cell[1], orientation)
    if len(cells) < 2:
        return None
    return WordInfo(
        word=board.letters_at(cells),
        anchor=cells[0],
        orientation=orientation,
        cells=tuple(cells),
        new_cells=frozenset(c for c in cells if c in placed),
    )


def find_words(board: Board, placed_cells: Iterable[Cell]) -> list[WordInfo]:
    """All words formed by the tiles at ``placed_cells`` (already on the board).

    Primary word first, then one cross word per placed cell where one forms.
    A lone tile has no real orientation; its horizontal and vertical runs are
    both picked up because the cross pass covers the other axis.
    Duplicates are merged on (word, anchor, orientation).
    """
    ordered = sorted(set(placed_cells))
    if not ordered:
        return []
    placed = frozenset(ordered)
    orientation = dominant_orientation(ordered)

    found: list[WordInfo] = []
    seen: set[tuple[str, Cell, Orientation]] = set()

    def _keep(info: WordInfo | None) -> None:
        if info is None or info.key in seen:
            return
        seen.add(info.key)
        found.append(info)

    _keep(_word_at(board, ordered[0], orientation, placed))
    for cell in ordered:
        _keep(_word_at(board, cell, orientation.other, placed))

    return found


def primary_covers(words: list[WordInfo], placed_cells: Iterable[Cell]) -> bool:
    """True if one discovered word in the dominant orientation spans every placed cell.

    Detects gaps: tiles in one line but separated by empty squares.
    """
    placed = set(placed_cells)
    if len(placed) <= 1:
        return True
    orientation = dominant_orientation(placed)
    return any(
        w.orientation is orientation and placed <= set(w.cells) for w in words
    )
