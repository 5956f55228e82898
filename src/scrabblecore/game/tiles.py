"""Letter values and the standard tile distribution."""

from __future__ import annotations

from dataclasses import dataclass, replace

WILDCARD = "?"

# Tile point values (wildcard = 0, handled separately)
LETTER_POINTS: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2, "H": 4,
    "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1, "O": 1, "P": 3,
    "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1, "V": 4, "W": 4, "X": 8,
    "Y": 4, "Z": 10,
}

# Standard 100-tile distribution: letter -> count
TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9, "B": 2, "C": 2, "D": 4, "E": 12, "F": 2, "G": 3, "H": 2,
    "I": 9, "J": 1, "K": 1, "L": 4, "M": 2, "N": 6, "O": 8, "P": 2,
    "Q": 1, "R": 6, "S": 4, "T": 6, "U": 4, "V": 2, "W": 2, "X": 1,
    "Y": 2, "Z": 1, WILDCARD: 2,
}

TOTAL_TILES = sum(TILE_DISTRIBUTION.values())


def letter_points(letter: str) -> int:
    """Point value of a letter. Wildcards and unknown characters are 0."""
    return LETTER_POINTS.get(letter.upper(), 0)


@dataclass(frozen=True)
class Tile:
    """A single tile. Wildcards keep 0 points whatever letter they stand for."""

    letter: str
    points: int
    is_wildcard: bool = False

    @classmethod
    def from_letter(cls, letter: str) -> Tile:
        letter = letter.upper()
        if letter == WILDCARD:
            return cls.wildcard()
        return cls(letter=letter, points=letter_points(letter))

    @classmethod
    def wildcard(cls) -> Tile:
        return cls(letter=WILDCARD, points=0, is_wildcard=True)

    @property
    def is_assigned(self) -> bool:
        """False only for a wildcard that has not been given a letter yet."""
        return self.letter != WILDCARD

    def with_letter(self, letter: str) -> Tile:
        """Return a copy of a wildcard standing for ``letter``."""
        if not self.is_wildcard:
            raise ValueError(f"Tile '{self.letter}' is not a wildcard")
        return replace(self, letter=letter.upper())

    def unassigned(self) -> Tile:
        """Return the tile as it sits in a rack (wildcards lose their letter)."""
        if self.is_wildcard:
            return Tile.wildcard()
        return self


def create_full_bag() -> list[Tile]:
    """Create the standard 100-tile bag (unshuffled)."""
    bag: list[Tile] = []
    for letter, count in TILE_DISTRIBUTION.items():
        bag.extend(Tile.from_letter(letter) for _ in range(count))
    return bag


def rack_value(tiles) -> int:
    """Sum of point values of a collection of tiles."""
    return sum(t.points for t in tiles)
