"""Combining composite tables with logical OR."""

from __future__ import annotations

from prime_table.core.bitset import PackedBitSet


def _check_same_capacity(a: PackedBitSet, b: PackedBitSet) -> None:
    if a.capacity != b.capacity:
        raise ValueError(
            f"Cannot merge sets of capacity {a.capacity} and {b.capacity}"
        )


def merge_tables(a: PackedBitSet, b: PackedBitSet) -> PackedBitSet:
    """Return a new set whose bit ``i`` is ``a[i] or b[i]``.

    Neither input is modified.

    Raises:
        ValueError: If the capacities differ.
    """
    _check_same_capacity(a, b)
    result = a.copy()
    result._or_inplace(b)
    return result


def merge_into(accumulator: PackedBitSet, other: PackedBitSet) -> PackedBitSet:
    """OR ``other`` into ``accumulator`` in place and return it.

    Only for accumulators that no one else holds a reference to.
    """
    _check_same_capacity(accumulator, other)
    accumulator._or_inplace(other)
    return accumulator
