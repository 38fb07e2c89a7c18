"""Mapping between tracked odd numbers and dense table indices.

Only odd numbers >= 3 are stored in the composite table; 0, 1, 2 and the
even numbers are answered without a lookup. Index ``i`` holds ``2*i + 3``:

    index:  0  1  2  3  4  5 ...
    number: 3  5  7  9 11 13 ...
"""

from __future__ import annotations

import numpy as np


def to_index(number: int) -> int:
    """Table index of an odd number >= 3.

    Raises:
        ValueError: If number is even or less than 3.
    """
    if number < 3 or number % 2 == 0:
        raise ValueError(f"Only odd numbers >= 3 are tracked, got {number}")
    return (number - 3) // 2


def to_number(index: int) -> int:
    """Odd number stored at a table index."""
    if index < 0:
        raise ValueError(f"Index must be >= 0, got {index}")
    return 2 * index + 3


def tracked_count(max_number: int) -> int:
    """Capacity of the composite table: count of odd numbers in [3, max_number]."""
    if max_number < 0:
        raise ValueError(f"max_number must be >= 0, got {max_number}")
    return max(0, (max_number - 1) // 2)


def numbers_for(size: int) -> np.ndarray:
    """Array of the numbers held at indices ``0 .. size-1``."""
    return 2 * np.arange(size, dtype=np.int64) + 3
