"""Shanten (向聴数) calculation.

Shanten = minimum number of tile exchanges needed to reach tenpai.
-1 means already a complete hand (agari).
0 means tenpai (one tile away).

Standard form uses the accurate formula
    8 - 2*groups - min(pairs + taatsu, 4 - groups)
      - min(1, max(0, pairs + taatsu + groups - 4))
searched over every way of pulling groups (and at most one head) out of
the hand. The result is the best of standard, chiitoitsu and kokushi,
then checked against the actual winning draws when it claims tenpai.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple

from shanten_trainer.core.tile import NUM_KINDS, YAOCHU_INDICES
from shanten_trainer.rules.agari import correct_tenpai

# (vector key, groups, pair_used) -> shanten
ShantenCache = Dict[Tuple[Tuple[int, ...], int, bool], int]

MAX_GROUPS = 4
MAX_TAATSU = 4
VALID_HAND_SIZES = (13, 14)


class InvalidHandSize(ValueError):
    """Raised when a hand does not hold 13 or 14 tiles."""

    def __init__(self, total: int):
        self.total = total
        super().__init__(f"Invalid hand size: {total} (must be 13 or 14)")


def shanten(tiles_34: Iterable[int], cache: Optional[ShantenCache] = None) -> int:
    """Calculate minimum shanten number across all hand forms.

    Accepts a TileCounts or any sequence of 34 counts. The optional cache is
    passed to the standard-form search and may be reused across calls.
    """
    tiles_34 = list(tiles_34)
    total = sum(tiles_34)
    if total not in VALID_HAND_SIZES:
        raise InvalidHandSize(total)

    best = min(
        shanten_standard(tiles_34, cache),
        shanten_chiitoi(tiles_34),
        shanten_kokushi(tiles_34),
    )
    return correct_tenpai(tiles_34, best)


def shanten_breakdown(tiles_34: Iterable[int]) -> Dict[str, int]:
    """Per-form shanten plus the corrected overall value, for display."""
    tiles_34 = list(tiles_34)
    cache: ShantenCache = {}
    overall = shanten(tiles_34, cache)
    return {
        "standard": shanten_standard(tiles_34, cache),
        "chiitoi": shanten_chiitoi(tiles_34),
        "kokushi": shanten_kokushi(tiles_34),
        "overall": overall,
    }


def _accurate_formula(groups: int, pairs_and_taatsu: int) -> int:
    blocks = min(pairs_and_taatsu, MAX_GROUPS - groups)
    overflow = min(1, max(0, pairs_and_taatsu + groups - MAX_GROUPS))
    return 8 - 2 * groups - blocks - overflow


def shanten_standard(tiles_34: Iterable[int],
                     cache: Optional[ShantenCache] = None) -> int:
    """Shanten for standard form (4 mentsu + 1 jantai)."""
    if cache is None:
        cache = {}
    return _search(tuple(tiles_34), 0, False, cache)


def _search(hand: Tuple[int, ...], groups: int, pair_used: bool,
            cache: ShantenCache) -> int:
    """Best shanten reachable from this state; -1 short-circuits."""
    key = (hand, groups, pair_used)
    if key in cache:
        return cache[key]

    pairs, taatsu = count_pairs_and_partials(hand)
    # The committed head counts as one of the pairs
    blocks = pairs + taatsu + (1 if pair_used else 0)
    best = _accurate_formula(groups, blocks)

    remaining = sum(hand)
    if groups == MAX_GROUPS and pair_used and remaining == 0:
        cache[key] = best
        return best
    # Leftover tiles mean this split is not a finished hand yet
    best = max(best, 0)

    for child_hand, added, child_pair in _child_states(hand, pair_used):
        result = _search(child_hand, groups + added, child_pair, cache)
        if result < best:
            best = result
        if best == -1:
            break

    cache[key] = best
    return best


def _child_states(hand: Tuple[int, ...], pair_used: bool):
    """Yield (hand, groups added, pair_used) for every single extraction."""
    # Triplets
    for i in range(NUM_KINDS):
        if hand[i] >= 3:
            new_hand = list(hand)
            new_hand[i] -= 3
            yield tuple(new_hand), 1, pair_used

    # Sequences (number suits only)
    for suit in range(3):
        start = suit * 9
        for i in range(start, start + 7):
            if hand[i] >= 1 and hand[i + 1] >= 1 and hand[i + 2] >= 1:
                new_hand = list(hand)
                new_hand[i] -= 1
                new_hand[i + 1] -= 1
                new_hand[i + 2] -= 1
                yield tuple(new_hand), 1, pair_used

    # Head
    if not pair_used:
        for i in range(NUM_KINDS):
            if hand[i] >= 2:
                new_hand = list(hand)
                new_hand[i] -= 2
                yield tuple(new_hand), 0, True


# --- Partial-shape (pairs + taatsu) counting ---
#
# Greedy extraction depends on its order, so several orders are tried and the
# one with the most blocks wins. Ties keep the earliest strategy.

def _take_pairs(h: List[int]) -> int:
    pairs = 0
    for i in range(NUM_KINDS):
        if h[i] >= 2:
            pairs += 1
            h[i] -= 2
    return pairs


def _take_taatsu(h: List[int], suit: int, gap: int, taatsu: int,
                 reverse: bool = False) -> int:
    """Take gap-1 (12) or gap-2 (13) shapes from one suit, up to MAX_TAATSU."""
    start = suit * 9
    positions = range(start, start + 9 - gap)
    if reverse:
        positions = reversed(positions)
    for i in positions:
        if taatsu >= MAX_TAATSU:
            break
        if h[i] >= 1 and h[i + gap] >= 1:
            taatsu += 1
            h[i] -= 1
            h[i + gap] -= 1
    return taatsu


def _pairs_then_taatsu(h: List[int]) -> Tuple[int, int]:
    pairs = _take_pairs(h)
    taatsu = 0
    for suit in range(3):
        taatsu = _take_taatsu(h, suit, 1, taatsu)
        taatsu = _take_taatsu(h, suit, 2, taatsu)
    return pairs, taatsu


def _ryanmen_pairs_kanchan(h: List[int]) -> Tuple[int, int]:
    taatsu = 0
    for suit in range(3):
        taatsu = _take_taatsu(h, suit, 1, taatsu)
    pairs = _take_pairs(h)
    for suit in range(3):
        taatsu = _take_taatsu(h, suit, 2, taatsu)
    return pairs, taatsu


def _taatsu_then_pairs(h: List[int]) -> Tuple[int, int]:
    taatsu = 0
    for suit in range(3):
        taatsu = _take_taatsu(h, suit, 1, taatsu)
        taatsu = _take_taatsu(h, suit, 2, taatsu)
    pairs = _take_pairs(h)
    return pairs, taatsu


def _pairs_then_taatsu_reversed(h: List[int]) -> Tuple[int, int]:
    pairs = _take_pairs(h)
    taatsu = 0
    for suit in (2, 1, 0):
        taatsu = _take_taatsu(h, suit, 1, taatsu, reverse=True)
        taatsu = _take_taatsu(h, suit, 2, taatsu, reverse=True)
    return pairs, taatsu


PARTIAL_STRATEGIES: List[Callable[[List[int]], Tuple[int, int]]] = [
    _pairs_then_taatsu,
    _ryanmen_pairs_kanchan,
    _taatsu_then_pairs,
    _pairs_then_taatsu_reversed,
]


def count_pairs_and_partials(tiles_34: Iterable[int]) -> Tuple[int, int]:
    """Return (pairs, taatsu) from the best-scoring extraction order."""
    hand = list(tiles_34)
    best_pairs, best_taatsu = 0, 0
    for strategy in PARTIAL_STRATEGIES:
        pairs, taatsu = strategy(list(hand))
        if pairs + taatsu > best_pairs + best_taatsu:
            best_pairs, best_taatsu = pairs, taatsu
    return best_pairs, best_taatsu


def shanten_chiitoi(tiles_34: Iterable[int]) -> int:
    """Shanten for seven pairs (七対子).

    Formula: 6 - (number of kinds held at least twice).
    """
    pairs = sum(1 for c in tiles_34 if c >= 2)
    return 6 - pairs


def shanten_kokushi(tiles_34: Iterable[int]) -> int:
    """Shanten for thirteen orphans (国士無双).

    Formula: 13 - (number of yaochu types) - (1 if any yaochu pair).
    """
    tiles_34 = list(tiles_34)
    types = sum(1 for idx in YAOCHU_INDICES if tiles_34[idx] >= 1)
    has_pair = any(tiles_34[idx] >= 2 for idx in YAOCHU_INDICES)

    return 13 - types - (1 if has_pair else 0)
