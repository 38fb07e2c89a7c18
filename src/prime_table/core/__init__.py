"""Sieve construction, bit-packed storage and primality lookup."""

from prime_table.core.bitset import PackedBitSet
from prime_table.core.index_map import to_index, to_number, tracked_count
from prime_table.core.marker import mark_factor
from prime_table.core.merge import merge_tables
from prime_table.core.builder import CompositeTable, SieveBuilder, build_composite_table
from prime_table.core.oracle import PrimalityOracle, get_default_oracle, is_prime

__all__ = [
    "PackedBitSet",
    "to_index",
    "to_number",
    "tracked_count",
    "mark_factor",
    "merge_tables",
    "CompositeTable",
    "SieveBuilder",
    "build_composite_table",
    "PrimalityOracle",
    "get_default_oracle",
    "is_prime",
]
