"""
Weight-biased leftist heap Command-Line Interface (CLI)

This script exposes the heap operations via subcommands. It ties together:
- The heap itself (bulk build, melding, sorted extraction)
- Shape analysis (spine length, height, invariant checks)
- The benchmark runner (timing + space CSV)

Usage examples:
    python -m meldheap.cli sort 5 3 8 1
    python -m meldheap.cli sort --reverse 5 3 8 1
    python -m meldheap.cli merge --left 4 2 --right 3 1
    python -m meldheap.cli inspect 7 1 9 4 4
    python -m meldheap.cli bench --path report.csv --base-input 100 --rounds 6
"""

import argparse
import random
import sys

from .analysis import benchmark, shape
from .datastructures import HeapError, WBLeftistHeap, natural_order, reverse_order


# -------------------------------------------------------------------
# Utility: argument parsing and output
# -------------------------------------------------------------------
def parse_number(text):
    """Parse a command-line value as ``int`` when possible, else ``float``."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def print_values(values):
    """Print values on one line separated by spaces."""
    print(" ".join(str(v) for v in values))


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Heap-sort the given numbers (descending with --reverse)."""
    comparator = reverse_order if args.reverse else natural_order
    heap = WBLeftistHeap.from_iterable(args.values, comparator)
    print_values(heap.drain())


def cmd_merge(args):
    """Meld a heap built from --left with one built from --right."""
    left = WBLeftistHeap.from_iterable(args.left)
    right = WBLeftistHeap.from_iterable(args.right)
    merged = WBLeftistHeap.meld(left, right)
    print(f"Merged {len(args.left)} + {len(args.right)} elements.")
    print_values(merged.drain())


def cmd_inspect(args):
    """Show the shape of a heap built from the given numbers."""
    heap = WBLeftistHeap.from_iterable(args.values)
    shape.check_invariants(heap)
    for key, value in shape.describe(heap).items():
        print(f"{key}: {value}")
    print(repr(heap))


def cmd_bench(args):
    """Run the timing/space benchmark and write a CSV report."""
    rng = random.Random(args.seed)
    benchmark.run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        rng=rng,
    )


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="meldheap", description="Weight-biased leftist heap CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- extraction ---
    s = sub.add_parser("sort", help="Heap-sort numbers")
    s.add_argument("values", nargs="*", type=parse_number)
    s.add_argument("--reverse", action="store_true", help="Largest first")
    s.set_defaults(func=cmd_sort)

    # --- melding ---
    s = sub.add_parser("merge", help="Meld two heaps and print their elements in order")
    s.add_argument("--left", nargs="*", type=parse_number, default=[])
    s.add_argument("--right", nargs="*", type=parse_number, default=[])
    s.set_defaults(func=cmd_merge)

    # --- shape ---
    s = sub.add_parser("inspect", help="Show heap shape and tree")
    s.add_argument("values", nargs="*", type=parse_number)
    s.set_defaults(func=cmd_inspect)

    # --- benchmarks ---
    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", default=benchmark.DEFAULT_OUTPUT_CSV)
    s.add_argument("--base-input", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=benchmark.DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m meldheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except HeapError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
