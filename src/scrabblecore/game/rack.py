"""Player racks and players."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from scrabblecore.game.tiles import Tile, rack_value

RACK_SIZE = 7


class PlayerKind(Enum):
    HUMAN = "human"
    AI_EASY = "ai_easy"
    AI_MEDIUM = "ai_medium"
    AI_HARD = "ai_hard"


class Rack:
    """Ordered hand of at most ``capacity`` tiles."""

    def __init__(self, capacity: int = RACK_SIZE) -> None:
        self._capacity = capacity
        self._tiles: list[Tile] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def tiles(self) -> list[Tile]:
        return list(self._tiles)

    @property
    def has_room(self) -> bool:
        return len(self._tiles) < self._capacity

    @property
    def value(self) -> int:
        return rack_value(self._tiles)

    def add(self, tile: Tile) -> bool:
        """Append a tile. Returns False (no change) if the rack is full."""
        if not self.has_room:
            return False
        self._tiles.append(tile)
        return True

    def get(self, index: int) -> Tile | None:
        if 0 <= index < len(self._tiles):
            return self._tiles[index]
        return None

    def remove(self, index: int) -> Tile | None:
        """Remove and return the tile at ``index`` (None if out of range)."""
        if 0 <= index < len(self._tiles):
            return self._tiles.pop(index)
        return None

    def remove_many(self, indices: list[int]) -> list[Tile]:
        """Remove several positions at once, returned in the order given."""
        picked = {i: self._tiles[i] for i in indices}
        for i in sorted(set(indices), reverse=True):
            del self._tiles[i]
        return [picked[i] for i in indices]

    def clear(self) -> None:
        self._tiles = []

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self._tiles)

    def tiles_for_word(self, word: str) -> list[int] | None:
        """Rack indices that spell ``word`` in order, or None if it can't be made.

        Exact letters are used before blanks so a blank is never spent on a
        letter the rack already holds.
        """
        if not word:
            return None
        used: set[int] = set()
        picks: list[int] = []
        for ch in word.upper():
            match = next(
                (i for i, t in enumerate(self._tiles)
                 if i not in used and not t.is_wildcard and t.letter == ch),
                None,
            )
            if match is None:
                match = next(
                    (i for i, t in enumerate(self._tiles)
                     if i not in used and t.is_wildcard),
                    None,
                )
            if match is None:
                return None
            used.add(match)
            picks.append(match)
        return picks

    def can_form(self, word: str) -> bool:
        return self.tiles_for_word(word) is not None

    def letters(self) -> str:
        return "".join(t.letter for t in self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self):
        return iter(list(self._tiles))


@dataclass
class Player:
    """A seat at the table: name, running score, rack and kind."""

    name: str
    kind: PlayerKind = PlayerKind.HUMAN
    score: int = 0
    rack: Rack = field(default_factory=Rack)

    @property
    def is_ai(self) -> bool:
        return self.kind is not PlayerKind.HUMAN

    def add_score(self, points: int) -> None:
        self.score += points

    def subtract_score(self, points: int, clamp: bool = True) -> None:
        """Lower the score; never below 0 unless ``clamp`` is False."""
        self.score -= points
        if clamp:
            self.score = max(0, self.score)
