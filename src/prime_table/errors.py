"""Exceptions raised by prime_table."""

from __future__ import annotations


class PrimeTableError(Exception):
    """Base class for all prime_table errors."""


class ConstructionError(PrimeTableError, ValueError):
    """Raised when a bit set cannot be built from the supplied bits."""


class RangeError(PrimeTableError, ValueError):
    """Raised when a query falls outside the bound the table was built for.

    Attributes:
        number: The number that was queried.
        max_number: The bound of the table that rejected it.
    """

    def __init__(self, number: int, max_number: int):
        self.number = number
        self.max_number = max_number
        super().__init__(
            f"Number must be in [0, {max_number}], got {number}"
        )
