#!/usr/bin/env python3
"""Dataset generation script for performance runs.

Writes a synthetic input file in the format the grouping tool reads: one row
per line, ';'-separated fields, non-empty fields quoted digits.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from linegroups.ingest.synthetic import generate_lines


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic row files for performance testing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 100k rows, 10 columns
  %(prog)s input.txt

  # Few distinct tokens -> many merges
  %(prog)s dense.txt --rows 200000 --cols 12 --vocabulary 500

  # Show the plan only
  %(prog)s big.txt --rows 1000000 --dry-run
        """
    )
    parser.add_argument("output", type=Path, help="Output file path")
    parser.add_argument("--rows", type=int, default=100_000, help="Number of lines (default: 100,000)")
    parser.add_argument("--cols", type=int, default=10, help="Maximum fields per line (default: 10)")
    parser.add_argument("--vocabulary", type=int, default=10_000, help="Distinct token values (default: 10,000)")
    parser.add_argument("--empty-ratio", type=float, default=0.1, help="Share of empty fields (default: 0.1)")
    parser.add_argument("--malformed-ratio", type=float, default=0.01, help="Share of invalid lines (default: 0.01)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducible data (default: 42)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be generated without creating files")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.cols <= 0:
        print("Error: --cols must be positive", file=sys.stderr)
        return 1
    if args.vocabulary <= 0:
        print("Error: --vocabulary must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Max columns: {args.cols}")
    print(f"  Vocabulary: {args.vocabulary:,}")
    print(f"  Random seed: {args.seed}")

    if args.dry_run:
        print("\n[DRY RUN] Would generate file but not creating it.")
        return 0

    try:
        lines = generate_lines(
            args.rows,
            args.cols,
            vocabulary=args.vocabulary,
            empty_ratio=args.empty_ratio,
            malformed_ratio=args.malformed_ratio,
            seed=args.seed,
        )
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1

    print(f"\nCreated {args.output} ({len(lines):,} lines)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
