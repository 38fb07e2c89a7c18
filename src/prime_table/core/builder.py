"""Sieve construction of the composite table.

Odd factor candidates 3, 5, 7, ... up to the bound are visited in order.
A candidate that the table built so far already flags as composite is a
multiple of some smaller prime, so all of its multiples are flagged too
and it is skipped with a single lookup. Every other candidate is prime and
gets exactly one marking pass, which is OR-ed into the accumulator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from prime_table.core.bitset import PackedBitSet
from prime_table.core.index_map import to_index, tracked_count
from prime_table.core.marker import mark_factor
from prime_table.core.merge import merge_into
from prime_table.log import get_logger

logger = get_logger(__name__)

StepCallback = Callable[[int, bool], None]


@dataclass(frozen=True)
class CompositeTable:
    """Finished composite flags for every tracked odd number up to a bound.

    Attributes:
        max_number: Bound the table was built for.
        bits: Bit ``to_index(n)`` is set iff odd ``n`` is composite.
        marking_passes: Number of factors that ran a marking pass.
        skipped_factors: Number of factors skipped as already composite.
    """

    max_number: int
    bits: PackedBitSet
    marking_passes: int = field(default=0, compare=False)
    skipped_factors: int = field(default=0, compare=False)

    @property
    def size(self) -> int:
        return self.bits.capacity

    def is_composite(self, number: int) -> bool:
        """Lookup for an odd tracked number."""
        return self.bits[to_index(number)]


class SieveBuilder:
    """Builds the CompositeTable for a fixed bound.

    Attributes:
        max_number: Upper bound (inclusive) of the table.
        size: Number of tracked odd numbers, those in ``[3, max_number]``.
    """

    def __init__(self, max_number: int):
        if max_number < 0:
            raise ValueError(f"max_number must be >= 0, got {max_number}")
        self.max_number = int(max_number)
        self.size = tracked_count(self.max_number)

    def factors(self) -> range:
        """Odd factor candidates visited by the sieve."""
        return range(3, self.max_number + 1, 2)

    def build(self, on_step: Optional[StepCallback] = None) -> CompositeTable:
        """Run the sieve.

        Args:
            on_step: Called as ``on_step(factor, skipped)`` for each visited
                candidate, in ascending order.

        Returns:
            The finished CompositeTable.
        """
        accumulator = PackedBitSet(self.size)
        passes = 0
        skipped = 0

        for factor in self.factors():
            if factor == 3:
                accumulator = mark_factor(3, self.size)
                passes += 1
                is_skip = False
            elif accumulator[to_index(factor)]:
                skipped += 1
                is_skip = True
            else:
                merge_into(accumulator, mark_factor(factor, self.size))
                passes += 1
                is_skip = False

            if on_step is not None:
                on_step(factor, is_skip)

        logger.debug(
            "sieve.built",
            max_number=self.max_number,
            size=self.size,
            marking_passes=passes,
            skipped_factors=skipped,
        )
        return CompositeTable(
            max_number=self.max_number,
            bits=accumulator,
            marking_passes=passes,
            skipped_factors=skipped,
        )


def build_composite_table(max_number: int) -> CompositeTable:
    """Build the composite table for ``max_number``."""
    return SieveBuilder(max_number).build()
