"""Read-only primality queries backed by the composite table.

The table is built lazily on first use. Construction is guarded by a lock
so concurrent first callers trigger exactly one build; after that the
table is never modified and lookups take no lock.
"""

from __future__ import annotations

import threading
from typing import Iterator, Optional

import numpy as np

from prime_table.config import SieveConfig
from prime_table.core.builder import CompositeTable, SieveBuilder
from prime_table.core.index_map import to_index, to_number
from prime_table.errors import RangeError
from prime_table.log import get_logger

logger = get_logger(__name__)


class PrimalityOracle:
    """Answers ``is prime?`` for every integer in ``[0, max_number]``.

    Attributes:
        max_number: Bound fixed at creation.
    """

    def __init__(self, max_number: int):
        """Initialize the oracle. The table is not built until needed.

        Args:
            max_number: Largest number that can be queried.

        Raises:
            ValueError: If max_number is negative.
        """
        if max_number < 0:
            raise ValueError(f"max_number must be >= 0, got {max_number}")

        self.max_number = int(max_number)
        self._table: Optional[CompositeTable] = None
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> CompositeTable:
        """The composite table, built on first access."""
        table = self._table
        if table is None:
            with self._lock:
                if self._table is None:
                    self._table = SieveBuilder(self.max_number).build()
                    logger.info(
                        "oracle.table_ready",
                        max_number=self.max_number,
                        nbytes=self._table.bits.nbytes,
                    )
                table = self._table
        return table

    def build(self) -> PrimalityOracle:
        """Force construction of the table now."""
        _ = self.table
        return self

    def check(self, num: int) -> bool:
        """Return True if ``num`` is prime.

        Raises:
            TypeError: If num is not an integer.
            RangeError: If num is negative or greater than max_number.
        """
        if isinstance(num, (bool, np.bool_)) or not isinstance(num, (int, np.integer)):
            raise TypeError(f"Number must be an integer, got {type(num).__name__}")
        num = int(num)

        if num < 0 or num > self.max_number:
            raise RangeError(num, self.max_number)
        if num == 0 or num == 1:
            return False
        if num == 2:
            return True
        if num % 2 == 0:
            return False
        return not self.table.bits[to_index(num)]

    __call__ = check

    def primes(self) -> Iterator[int]:
        """Yield every prime up to max_number in ascending order."""
        if self.max_number >= 2:
            yield 2

        flags = self.table.bits.to_bools()
        for index in np.flatnonzero(~flags):
            yield to_number(int(index))

    def count(self) -> int:
        """Number of primes up to max_number."""
        table = self.table
        return int(self.max_number >= 2) + table.size - table.bits.count()

    def __repr__(self) -> str:
        state = "built" if self.is_built else "pending"
        return f"PrimalityOracle(max_number={self.max_number}, {state})"


_default_oracle: Optional[PrimalityOracle] = None
_default_lock = threading.Lock()


def get_default_oracle() -> PrimalityOracle:
    """Shared oracle whose bound comes from :meth:`SieveConfig.from_env`."""
    global _default_oracle
    with _default_lock:
        if _default_oracle is None:
            config = SieveConfig.from_env()
            _default_oracle = PrimalityOracle(config.max_number)
        return _default_oracle


def is_prime(number: int) -> bool:
    """Return True if ``number`` is prime, using the shared oracle.

    Raises:
        RangeError: If number is outside ``[0, max_number]``.
    """
    return get_default_oracle().check(number)
