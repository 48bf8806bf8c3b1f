"""Tests for tile.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from shanten_trainer.core.tile import (
    NUM_KINDS, TILE_NAMES_34, YAOCHU_INDICES, TileCounts, TileSuit,
    is_honor_index, suit_of_index, tile_34_to_name,
)


class TestTileKinds:
    def test_kind_count(self):
        assert NUM_KINDS == 34
        assert len(TILE_NAMES_34) == 34

    def test_suit_assignment(self):
        assert suit_of_index(0) == TileSuit.MAN
        assert suit_of_index(8) == TileSuit.MAN
        assert suit_of_index(9) == TileSuit.PIN
        assert suit_of_index(18) == TileSuit.SOU
        assert suit_of_index(27) == TileSuit.HONOR
        assert suit_of_index(33) == TileSuit.HONOR

    def test_suit_out_of_range(self):
        with pytest.raises(ValueError):
            suit_of_index(34)

    def test_honor(self):
        assert not is_honor_index(26)
        assert is_honor_index(27)

    def test_yaochu(self):
        assert len(YAOCHU_INDICES) == 13
        assert 0 in YAOCHU_INDICES    # 1m
        assert 8 in YAOCHU_INDICES    # 9m
        assert 4 not in YAOCHU_INDICES  # 5m
        assert all(i in YAOCHU_INDICES for i in range(27, 34))

    def test_34_name(self):
        assert tile_34_to_name(0) == "1m"
        assert tile_34_to_name(9) == "1p"
        assert tile_34_to_name(27) == "東"
        assert tile_34_to_name(33) == "中"


class TestTileCounts:
    def test_total_and_count(self):
        counts = TileCounts.from_indices([0, 0, 1, 27])
        assert counts.total == 4
        assert counts.count(0) == 2
        assert counts[1] == 1
        assert counts.count(27) == 1
        assert len(counts) == 34

    def test_equality_and_hash(self):
        a = TileCounts.from_indices([0, 1, 2])
        b = TileCounts.from_indices([2, 1, 0])
        assert a == b
        assert hash(a) == hash(b)
        assert a.key == b.key
        assert len({a, b}) == 1

    def test_not_equal_to_list(self):
        a = TileCounts.from_indices([0])
        assert a != a.to_list()

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            TileCounts([0] * 33)

    def test_negative_entry(self):
        arr = [0] * 34
        arr[5] = -1
        with pytest.raises(ValueError):
            TileCounts(arr)

    def test_no_size_validation(self):
        """Hand size is the orchestrator's concern, not the vector's."""
        arr = [0] * 34
        arr[0] = 20
        assert TileCounts(arr).total == 20

    def test_to_list_is_a_copy(self):
        counts = TileCounts.from_indices([3, 3])
        arr = counts.to_list()
        arr[3] = 0
        assert counts[3] == 2

    def test_repr(self):
        assert repr(TileCounts.from_indices([0, 27])) == "TileCounts(1m 東)"
