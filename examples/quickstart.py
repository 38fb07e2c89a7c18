"""Quick start example for prime_table.

Run this script to build a few tables and query them.
"""

import time


def main():
    from prime_table.log import configure_logging

    configure_logging("WARNING")

    print("Prime Table - Quick Start Demo")
    print("=" * 50)

    print("\n1. Querying the shared table (bound 101 unless PRIME_TABLE_MAX_NUMBER is set)...")
    from prime_table import is_prime, get_default_oracle

    for n in (0, 1, 2, 3, 4, 29, 33, 97):
        print(f"   is_prime({n}) = {is_prime(n)}")

    print("\n2. Out-of-range queries raise instead of guessing...")
    from prime_table import RangeError

    bound = get_default_oracle().max_number
    try:
        is_prime(bound + 1)
    except RangeError as exc:
        print(f"   {exc}")

    print("\n3. Building a larger table...")
    from prime_table import PrimalityOracle

    start = time.perf_counter()
    oracle = PrimalityOracle(20_001).build()
    elapsed = time.perf_counter() - start

    table = oracle.table
    print(f"   Built table for 0..{oracle.max_number:,} in {elapsed:.3f}s")
    print(f"   {table.size:,} odd numbers in {table.bits.nbytes:,} bytes")
    print(f"   {table.marking_passes:,} marking passes, {table.skipped_factors:,} skipped factors")
    print(f"   {oracle.count():,} primes, last: {list(oracle.primes())[-3:]}")

    print("\n4. Tracing the sieve for a small bound...")
    from prime_table import SieveBuilder

    def trace(factor, skipped):
        print(f"   factor {factor:>2}: {'skipped' if skipped else 'marked multiples'}")

    SieveBuilder(25).build(on_step=trace)

    print("\n" + "=" * 50)
    print("Done.")


if __name__ == "__main__":
    main()
