"""Independent primality checks used to verify a built table."""

from __future__ import annotations

from math import isqrt
from typing import List

from prime_table.core.oracle import PrimalityOracle


def trial_division(n: int) -> bool:
    """True if ``n >= 2`` and no integer in ``[2, isqrt(n)]`` divides it."""
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def find_mismatches(oracle: PrimalityOracle) -> List[int]:
    """Numbers in ``[0, max_number]`` where the oracle disagrees with trial division."""
    return [
        n for n in range(oracle.max_number + 1)
        if oracle.check(n) != trial_division(n)
    ]
