"""Tile kinds and the 34-kind count vector used by every algorithm."""

from enum import Enum
from typing import Iterable, Iterator, List, Tuple


NUM_KINDS = 34
MAX_COPIES = 4


class TileSuit(Enum):
    MAN = "m"    # 万子
    PIN = "p"    # 筒子
    SOU = "s"    # 索子
    HONOR = "z"  # 字牌


NUMBER_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)
SUIT_OFFSETS = {TileSuit.MAN: 0, TileSuit.PIN: 9, TileSuit.SOU: 18, TileSuit.HONOR: 27}

# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]


def suit_of_index(index34: int) -> TileSuit:
    """Suit of a 34-encoded kind."""
    if not (0 <= index34 < NUM_KINDS):
        raise ValueError(f"index34 must be 0..33, got {index34}")
    if index34 < 9:
        return TileSuit.MAN
    elif index34 < 18:
        return TileSuit.PIN
    elif index34 < 27:
        return TileSuit.SOU
    return TileSuit.HONOR


def is_honor_index(index34: int) -> bool:
    return index34 >= 27


def tile_34_to_name(index34: int) -> str:
    """Get tile name from 34 encoding."""
    return TILE_NAMES_34[index34]


class TileCounts:
    """Immutable 34-length count vector (index = tile kind, value = copies held).

    Only structural checks happen here: length 34 and no negative entries.
    Whether the hand size is legal is decided by the shanten orchestrator.
    """
    __slots__ = ('_counts',)

    def __init__(self, counts: Iterable[int]):
        counts = tuple(int(c) for c in counts)
        if len(counts) != NUM_KINDS:
            raise ValueError(f"count vector must have {NUM_KINDS} entries, got {len(counts)}")
        if any(c < 0 for c in counts):
            raise ValueError(f"count vector entries must be non-negative: {list(counts)}")
        self._counts = counts

    @classmethod
    def empty(cls) -> 'TileCounts':
        return cls([0] * NUM_KINDS)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> 'TileCounts':
        """Build from a list of 34 indices, one entry per tile."""
        arr = [0] * NUM_KINDS
        for idx in indices:
            arr[idx] += 1
        return cls(arr)

    @property
    def total(self) -> int:
        """Number of tiles in the hand."""
        return sum(self._counts)

    @property
    def key(self) -> Tuple[int, ...]:
        """Hashable canonical key (used for memoization)."""
        return self._counts

    def count(self, index34: int) -> int:
        return self._counts[index34]

    def to_list(self) -> List[int]:
        """Mutable working copy."""
        return list(self._counts)

    def __getitem__(self, index34: int) -> int:
        return self._counts[index34]

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return NUM_KINDS

    def __eq__(self, other):
        if isinstance(other, TileCounts):
            return self._counts == other._counts
        return NotImplemented

    def __hash__(self):
        return hash(self._counts)

    def __repr__(self):
        names = []
        for idx, c in enumerate(self._counts):
            names.extend([tile_34_to_name(idx)] * c)
        return f"TileCounts({' '.join(names)})"
