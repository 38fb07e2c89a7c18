"""Per-factor composite marking."""

from __future__ import annotations

from prime_table.core.bitset import PackedBitSet
from prime_table.core.index_map import numbers_for


def mark_factor(factor: int, size: int) -> PackedBitSet:
    """Flag every tracked number that is a proper multiple of ``factor``.

    Bit ``i`` of the result is set iff ``to_number(i) % factor == 0`` and
    ``to_number(i) > factor``. The factor itself is never flagged.

    Args:
        factor: Odd factor >= 3.
        size: Capacity of the returned set (number of tracked odd numbers).

    Returns:
        A new PackedBitSet of capacity ``size``.

    Raises:
        ValueError: If factor is even or less than 3.
    """
    if factor < 3 or factor % 2 == 0:
        raise ValueError(f"Factor must be odd and >= 3, got {factor}")

    numbers = numbers_for(size)
    flags = (numbers % factor == 0) & (numbers > factor)
    return PackedBitSet.from_bools(flags, size)
