"""Win (和了) detection and the tenpai-validity correction.

The accurate shanten formula can report tenpai for a 13-tile hand that no
drawable tile completes, e.g. 111m3333456666p: the only waits (3p, 6p) are
already held four times. correct_tenpai() settles those cases by trying
every possible draw against an exhaustive completeness check.
"""

from typing import Iterable, List

from shanten_trainer.core.tile import (
    MAX_COPIES, NUM_KINDS, YAOCHU_INDICES, is_honor_index,
)


def is_agari(tiles_34: Iterable[int]) -> bool:
    """Check if the 34-array represents a complete 14-tile hand (any form)."""
    tiles_34 = list(tiles_34)
    if sum(tiles_34) != 14:
        return False
    return (is_standard_agari(tiles_34) or
            is_chiitoi_agari(tiles_34) or
            is_kokushi_agari(tiles_34))


def is_standard_agari(tiles_34: List[int]) -> bool:
    """Check standard form (4 mentsu + 1 jantai) with nothing left over."""
    if sum(tiles_34) != 14:
        return False

    for head in range(NUM_KINDS):
        if tiles_34[head] < 2:
            continue
        remaining = list(tiles_34)
        remaining[head] -= 2
        if _extract_mentsu(remaining, 0, 4):
            return True
    return False


def _extract_mentsu(tiles: List[int], start: int, needed: int) -> bool:
    """Remove exactly 'needed' mentsu from tiles, leaving nothing behind.

    The lowest remaining tile must belong to a triplet or to the sequence it
    starts, so trying both at that position covers every decomposition.
    """
    if needed == 0:
        return all(t == 0 for t in tiles)

    idx = start
    while idx < NUM_KINDS and tiles[idx] == 0:
        idx += 1

    if idx >= NUM_KINDS:
        return False

    # Try koutsu
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        found = _extract_mentsu(tiles, idx, needed - 1)
        tiles[idx] += 3
        if found:
            return True

    # Try shuntsu - only for number tiles (0-26), not starting on 8 or 9
    if not is_honor_index(idx) and idx % 9 <= 6:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            found = _extract_mentsu(tiles, idx, needed - 1)
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1
            if found:
                return True

    return False


def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子) form."""
    if sum(tiles_34) != 14:
        return False
    pairs = sum(1 for c in tiles_34 if c == 2)
    return pairs == 7


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双) form."""
    if sum(tiles_34) != 14:
        return False
    has_pair = False
    for idx in YAOCHU_INDICES:
        if tiles_34[idx] == 0:
            return False
        if tiles_34[idx] == 2:
            has_pair = True
    # Must have exactly 14 tiles all yaochu with one pair
    non_yaochu = sum(tiles_34[i] for i in range(NUM_KINDS) if i not in YAOCHU_INDICES)
    return has_pair and non_yaochu == 0


def has_completing_draw(tiles_34: Iterable[int]) -> bool:
    """Whether any single drawable tile turns this 13-tile hand into a win."""
    tiles_34 = list(tiles_34)
    for i in range(NUM_KINDS):
        # All four copies already in hand - cannot be drawn
        if tiles_34[i] >= MAX_COPIES:
            continue
        tiles_34[i] += 1
        complete = is_agari(tiles_34)
        tiles_34[i] -= 1
        if complete:
            return True
    return False


def correct_tenpai(tiles_34: Iterable[int], shanten_value: int) -> int:
    """Downgrade an apparent tenpai to 1-shanten when nothing completes it.

    Only 13-tile hands at exactly 0 are checked; anything else is returned
    as given.
    """
    tiles_34 = list(tiles_34)
    if shanten_value != 0 or sum(tiles_34) != 13:
        return shanten_value
    return 0 if has_completing_draw(tiles_34) else 1
