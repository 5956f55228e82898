"""Tests for the tile bag."""

import random

from scrabblecore.game.bag import TileBag
from scrabblecore.game.tiles import Tile


class TestTileBag:
    def test_standard_bag(self):
        bag = TileBag.standard(random.Random(1))
        assert len(bag) == 100
        assert not bag.is_empty()

    def test_same_seed_same_order(self):
        a = TileBag.standard(random.Random(9))
        b = TileBag.standard(random.Random(9))
        assert [t.letter for t in a.tiles] == [t.letter for t in b.tiles]

    def test_draw_partial_when_short(self):
        bag = TileBag(random.Random(0), [Tile.from_letter("A"), Tile.from_letter("B")])
        drawn = bag.draw(5)
        assert [t.letter for t in drawn] == ["A", "B"]
        assert bag.is_empty()
        assert bag.draw(1) == []

    def test_draw_negative(self):
        bag = TileBag(random.Random(0), [Tile.from_letter("A")])
        assert bag.draw(-1) == []
        assert len(bag) == 1

    def test_put_back_clears_blank_letters(self):
        bag = TileBag(random.Random(0))
        bag.put_back([Tile.wildcard().with_letter("E"), Tile.from_letter("Q")])
        assert len(bag) == 2
        assert Tile.wildcard() in bag.tiles
        assert all(t.letter != "E" for t in bag.tiles)

    def test_tiles_is_a_copy(self):
        bag = TileBag(random.Random(0), [Tile.from_letter("A")])
        bag.tiles.clear()
        assert len(bag) == 1
