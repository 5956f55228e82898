"""The tile bag: shuffled supply of undrawn tiles."""

from __future__ import annotations

import random

from scrabblecore.game.tiles import Tile, create_full_bag

class TileBag:
    """Undrawn tiles. Draws come off the front; the bag is already shuffled."""

    def __init__(self, rng: random.Random, tiles: list[Tile] | None = None) -> None:
        self._rng = rng
        self._tiles: list[Tile] = list(tiles) if tiles is not None else []

    @classmethod
    def standard(cls, rng: random.Random) -> TileBag:
        """Full 100-tile distribution, shuffled once with ``rng``."""
        bag = cls(rng, create_full_bag())
        bag.shuffle()
        return bag

    def draw(self, count: int) -> list[Tile]:
        """Take up to ``count`` tiles. Fewer come back if the bag runs out."""
        n = max(0, min(count, len(self._tiles)))
        drawn = self._tiles[:n]
        self._tiles = self._tiles[n:]
        return drawn

    def put_back(self, tiles: list[Tile]) -> None:
        """Return exchanged tiles and reshuffle."""
        self._tiles.extend(t.unassigned() for t in tiles)
        self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self._tiles)

    @property
    def tiles(self) -> list[Tile]:
        return list(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def __len__(self) -> int:
        return len(self._tiles)
