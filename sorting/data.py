"""
data.py — Unsorted Input Generator
===================================
Produces the randomised list the player sorts.

Entries are drawn independently as ``round(random() * floor(max_value))`` so
they land in ``[0, max_value]`` even for a fractional bound.  Duplicates are
allowed on purpose: equal neighbours are a case the animation has to handle.
"""

import math
import random
from typing import List, Optional


def generate_list(
    length: int = 15,
    max_value: float = 200,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Args:
        length    : Number of entries.
        max_value : Upper bound (inclusive) of every entry.
        rng       : Optional random.Random for reproducible lists.

    Returns:
        A fresh list of ints.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if max_value < 0:
        raise ValueError(f"max_value must be >= 0, got {max_value}")

    rng = rng or random
    bound = math.floor(max_value)
    return [round(rng.random() * bound) for _ in range(int(length))]
