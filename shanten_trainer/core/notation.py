"""Tenhou notation (e.g. "123m456p789s11z") <-> tiles <-> count vector.

Digits for m/p/s are 1-9, with 0 meaning the red five.
Digits for z are 1-7: 東南西北 then 白發中.
The count vector cannot tell a red five from a plain one, so converting
back from counts always yields plain fives.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List

from shanten_trainer.core.tile import (
    NUM_KINDS, SUIT_OFFSETS, TileCounts, TileSuit, suit_of_index,
)

_GROUP_RE = re.compile(r"(\d+)([mpsz])")

# Sort order of the suits in the notation string
SUIT_ORDER = [TileSuit.MAN, TileSuit.PIN, TileSuit.SOU, TileSuit.HONOR]


class NotationError(ValueError):
    """Raised for digits that do not name a tile."""


@dataclass(frozen=True)
class Tile:
    """A single tile as written in notation."""
    suit: TileSuit
    value: int  # 0-9 for m/p/s (0 = red five), 1-7 for z

    @property
    def is_red(self) -> bool:
        return self.suit != TileSuit.HONOR and self.value == 0

    @property
    def index34(self) -> int:
        if self.suit == TileSuit.HONOR:
            return SUIT_OFFSETS[self.suit] + self.value - 1
        number = 5 if self.value == 0 else self.value
        return SUIT_OFFSETS[self.suit] + number - 1

    @property
    def name(self) -> str:
        return f"{self.value}{self.suit.value}"

    def __repr__(self):
        return f"Tile({self.name})"


def parse_tenhou(notation: str) -> List[Tile]:
    """Parse a notation string into tiles, in the order written."""
    tiles = []
    for digits, suit_char in _GROUP_RE.findall(notation):
        suit = TileSuit(suit_char)
        for ch in digits:
            value = int(ch)
            if suit == TileSuit.HONOR:
                if not (1 <= value <= 7):
                    raise NotationError(
                        f"Invalid honor tile value: {value} (must be 1-7)")
            tiles.append(Tile(suit, value))
    return tiles


def to_tenhou(tiles: Iterable[Tile]) -> str:
    """Write tiles as notation, grouped by suit (m, p, s, z) and sorted."""
    grouped = {suit: [] for suit in SUIT_ORDER}
    for tile in tiles:
        grouped[tile.suit].append(tile.value)

    parts = []
    for suit in SUIT_ORDER:
        values = sorted(grouped[suit])
        if values:
            parts.append("".join(str(v) for v in values) + suit.value)
    return "".join(parts)


def to_counts(tiles: Iterable[Tile]) -> TileCounts:
    """Collapse tiles into a count vector (red fives count as fives)."""
    return TileCounts.from_indices(tile.index34 for tile in tiles)


def from_counts(counts: Iterable[int]) -> List[Tile]:
    """Expand a count vector into tiles, using plain fives."""
    counts = list(counts)
    if len(counts) != NUM_KINDS:
        raise ValueError(f"count vector must have {NUM_KINDS} entries, got {len(counts)}")
    tiles = []
    for idx, count in enumerate(counts):
        suit = suit_of_index(idx)
        value = idx - SUIT_OFFSETS[suit] + 1
        tiles.extend(Tile(suit, value) for _ in range(count))
    return tiles


def counts_from_tenhou(notation: str) -> TileCounts:
    """Shortcut: notation string straight to a count vector."""
    return to_counts(parse_tenhou(notation))
