"""Move scoring.

Bonus squares only count under tiles placed this turn. A square that was
covered in an earlier turn has already been used up.
"""

from __future__ import annotations

from dataclasses import dataclass

from scrabblecore.game.board import Board, BonusKind
from scrabblecore.game.words import WordInfo

_LETTER_MULT = {BonusKind.DOUBLE_LETTER: 2, BonusKind.TRIPLE_LETTER: 3}
_WORD_MULT = {
    BonusKind.DOUBLE_WORD: 2,
    BonusKind.CENTER: 2,
    BonusKind.TRIPLE_WORD: 3,
}


@dataclass(frozen=True)
class WordScore:
    word: str
    letter_points: int
    word_multiplier: int
    total: int


def score_breakdown(board: Board, info: WordInfo) -> WordScore:
    letter_total = 0
    word_mult = 1

    for r, c in info.cells:
        tile = board.get_tile(r, c)
        lv = tile.points if tile is not None else 0

        if (r, c) in info.new_cells:
            bonus = board.get_bonus(r, c)
            lv *= _LETTER_MULT.get(bonus, 1)
            word_mult *= _WORD_MULT.get(bonus, 1)

        letter_total += lv

    return WordScore(
        word=info.word,
        letter_points=letter_total,
        word_multiplier=word_mult,
        total=letter_total * word_mult,
    )


def score_word(board: Board, info: WordInfo) -> int:
    return score_breakdown(board, info).total


def score_move(board: Board, words: list[WordInfo]) -> int:
    """Sum of each word's independent score."""
    return sum(score_word(board, w) for w in words)
