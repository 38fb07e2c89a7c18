"""prime_table - bit-packed sieve of Eratosthenes with a read-only is_prime query."""

__version__ = "0.1.0"

from prime_table.errors import ConstructionError, PrimeTableError, RangeError
from prime_table.config import SieveConfig
from prime_table.core.bitset import PackedBitSet
from prime_table.core.builder import CompositeTable, SieveBuilder, build_composite_table
from prime_table.core.oracle import PrimalityOracle, get_default_oracle, is_prime

__all__ = [
    "ConstructionError",
    "PrimeTableError",
    "RangeError",
    "SieveConfig",
    "PackedBitSet",
    "CompositeTable",
    "SieveBuilder",
    "build_composite_table",
    "PrimalityOracle",
    "get_default_oracle",
    "is_prime",
]
