"""Tests for notation.py - Tenhou notation adapter"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from shanten_trainer.core.notation import (
    NotationError, Tile, counts_from_tenhou, from_counts,
    parse_tenhou, to_counts, to_tenhou,
)
from shanten_trainer.core.tile import TileSuit


class TestParse:
    def test_simple_hand(self):
        hand = parse_tenhou("123m456p789s")
        assert len(hand) == 9
        assert hand[0] == Tile(TileSuit.MAN, 1)
        assert hand[3] == Tile(TileSuit.PIN, 4)
        assert hand[8] == Tile(TileSuit.SOU, 9)

    def test_honors(self):
        hand = parse_tenhou("123m456p789s11z")
        assert len(hand) == 11
        assert hand[9] == Tile(TileSuit.HONOR, 1)

    def test_red_fives(self):
        hand = parse_tenhou("0m5p0s")
        assert hand[0].is_red
        assert not hand[1].is_red
        assert hand[2].is_red
        assert hand[0].index34 == 4
        assert hand[2].index34 == 22

    def test_all_honor_values(self):
        hand = parse_tenhou("1234567z")
        assert [t.index34 for t in hand] == list(range(27, 34))

    @pytest.mark.parametrize("notation", ["0z", "8z", "9z"])
    def test_invalid_honor(self, notation):
        with pytest.raises(NotationError, match="Invalid honor tile value"):
            parse_tenhou(notation)

    def test_digits_read_one_by_one(self):
        hand = parse_tenhou("10m")
        assert hand == [Tile(TileSuit.MAN, 1), Tile(TileSuit.MAN, 0)]

    def test_empty(self):
        assert parse_tenhou("") == []

    def test_suits_in_any_order(self):
        a = parse_tenhou("1z2s3p4m")
        b = parse_tenhou("4m3p2s1z")
        assert sorted(t.name for t in a) == sorted(t.name for t in b)


class TestSerialize:
    def test_round_trip(self):
        assert to_tenhou(parse_tenhou("123m456p789s11z")) == "123m456p789s11z"

    def test_sorted_within_suit(self):
        assert to_tenhou(parse_tenhou("321m654p987s")) == "123m456p789s"

    def test_suit_order(self):
        assert to_tenhou(parse_tenhou("1z2s3p4m")) == "4m3p2s1z"

    def test_red_five_kept(self):
        result = to_tenhou(parse_tenhou("0m5p0s"))
        assert "0m" in result
        assert "5p" in result
        assert "0s" in result


class TestCounts:
    def test_red_and_plain_five_collapse(self):
        counts = to_counts(parse_tenhou("05m"))
        assert counts[4] == 2
        assert counts.total == 2

    def test_from_counts_uses_plain_fives(self):
        tiles = from_counts(counts_from_tenhou("0m"))
        assert tiles == [Tile(TileSuit.MAN, 5)]

    def test_from_counts_order(self):
        counts = counts_from_tenhou("7z1m9s")
        assert [t.name for t in from_counts(counts)] == ["1m", "9s", "7z"]

    def test_counts_back_to_notation(self):
        counts = counts_from_tenhou("1112345678999m")
        assert to_tenhou(from_counts(counts)) == "1112345678999m"

    def test_from_counts_wrong_length(self):
        with pytest.raises(ValueError):
            from_counts([0] * 10)
