"""Command-line interface for prime_table."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from prime_table.config import LOG_LEVELS, SieveConfig
from prime_table.errors import PrimeTableError
from prime_table.log import configure_logging


def _oracle(args: argparse.Namespace):
    from prime_table.core.oracle import PrimalityOracle

    return PrimalityOracle(args.max_number)


def cmd_check(args: argparse.Namespace) -> int:
    """Report primality of each number given on the command line."""
    oracle = _oracle(args)

    status = 0
    for n in args.numbers:
        try:
            result = oracle.check(n)
        except PrimeTableError as exc:
            print(f"{n}: error: {exc}", file=sys.stderr)
            status = 1
            continue
        print(f"{n}: {'prime' if result else 'composite'}")

    return status


def cmd_list(args: argparse.Namespace) -> int:
    """Print every prime up to the bound."""
    oracle = _oracle(args)

    primes = list(oracle.primes())
    if args.count:
        print(len(primes))
    else:
        print(" ".join(str(p) for p in primes))
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print construction statistics for the table."""
    oracle = _oracle(args)
    table = oracle.table

    print(f"Composite table for max_number={table.max_number}")
    print(f"  Tracked odd numbers: {table.size:,}")
    print(f"  Packed size:         {table.bits.nbytes:,} bytes")
    print(f"  Composites flagged:  {table.bits.count():,}")
    print(f"  Marking passes:      {table.marking_passes:,}")
    print(f"  Skipped factors:     {table.skipped_factors:,}")
    print(f"  Primes <= bound:     {oracle.count():,}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Cross-check the table against trial division."""
    from prime_table.core.reference import find_mismatches

    oracle = _oracle(args)

    print(f"Verifying 0..{oracle.max_number:,} against trial division...")
    mismatches = find_mismatches(oracle)

    if mismatches:
        print(f"FAILED: {len(mismatches)} mismatches, first: {mismatches[:10]}")
        return 1

    print("OK")
    return 0


def build_parser(config: SieveConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-table",
        description="Sieve of Eratosthenes primality table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=config.log_level,
                        help="Logging level (default: %(default)s)")
    parser.add_argument("--json-logs", action="store_true", default=config.json_logs,
                        help="Emit log events as JSON")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_bound(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--max-number", "-m", type=int, default=config.max_number,
                         help="Table bound (default: %(default)s)")

    check_parser = subparsers.add_parser("check", help="Check numbers for primality")
    check_parser.add_argument("numbers", type=int, nargs="+", help="Numbers to check")
    add_bound(check_parser)

    list_parser = subparsers.add_parser("list", help="List primes up to the bound")
    list_parser.add_argument("--count", action="store_true", help="Only print how many")
    add_bound(list_parser)

    stats_parser = subparsers.add_parser("stats", help="Show table statistics")
    add_bound(stats_parser)

    verify_parser = subparsers.add_parser("verify", help="Verify table against trial division")
    add_bound(verify_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        config = SieveConfig.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.max_number < 0:
        parser.error(f"--max-number must be >= 0, got {args.max_number}")

    configure_logging(args.log_level, json=args.json_logs)

    commands = {
        "check": cmd_check,
        "list": cmd_list,
        "stats": cmd_stats,
        "verify": cmd_verify,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
