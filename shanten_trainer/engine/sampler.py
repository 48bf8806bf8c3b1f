"""Random hand generation for practice questions."""

import random
from typing import List, Optional

from shanten_trainer.core.notation import Tile, from_counts
from shanten_trainer.core.tile import MAX_COPIES, NUM_KINDS, TileCounts
from shanten_trainer.rules.shanten import VALID_HAND_SIZES, InvalidHandSize, shanten


def random_counts(size: int = 13, rng: Optional[random.Random] = None) -> TileCounts:
    """Draw `size` random tiles, never more than four of a kind.

    Kinds are picked uniformly; a pick of an exhausted kind is retried.
    """
    if size not in VALID_HAND_SIZES:
        raise InvalidHandSize(size)
    rng = rng or random.Random()

    counts = [0] * NUM_KINDS
    remaining = size
    while remaining > 0:
        idx = rng.randrange(NUM_KINDS)
        if counts[idx] < MAX_COPIES:
            counts[idx] += 1
            remaining -= 1
    return TileCounts(counts)


def generate_random_hand(size: int = 13, rng: Optional[random.Random] = None) -> List[Tile]:
    """Random hand as tiles, sorted in notation order."""
    return from_counts(random_counts(size, rng))


def generate_hand_with_shanten(target: int, max_attempts: int = 1000,
                               size: int = 13,
                               rng: Optional[random.Random] = None) -> Optional[List[Tile]]:
    """Rejection-sample a hand whose shanten equals `target`.

    Returns None when no hand was found within `max_attempts` draws.
    """
    rng = rng or random.Random()
    for _ in range(max_attempts):
        counts = random_counts(size, rng)
        if shanten(counts) == target:
            return from_counts(counts)
    return None
