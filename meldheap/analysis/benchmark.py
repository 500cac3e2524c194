"""Timing and space benchmarks for :class:`WBLeftistHeap` operations.

Each operation runs on random integer inputs whose sizes grow exponentially
(``base_input * 2**i``); the mean and standard deviation of the wall time and
the average memory footprint are written to a CSV file, one row per
(operation, size) pair.
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Any, Callable, Optional

from ..datastructures.errors import InvalidArgumentError
from ..datastructures.heap import WBLeftistHeap

DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 8
DEFAULT_ITERATIONS = 5
DEFAULT_OUTPUT_CSV = "wb_leftist_heap_performance.csv"

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: random.Random) -> list[int]:
    """Generate a list of random integers of given size."""
    return [rng.randint(0, 1000000) for _ in range(size)]


def heap_footprint(heap: WBLeftistHeap) -> int:
    """Estimate the bytes held by a heap: handle, every node and every element."""
    total = sys.getsizeof(heap)
    stack = [heap._root] if heap._root is not None else []
    while stack:
        node = stack.pop()
        total += sys.getsizeof(node) + sys.getsizeof(node.element)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return total


# ----------------------------
# Untimed setup steps
# ----------------------------

def prepare_list(data: list[int]) -> list[int]:
    return data


def prepare_heap(data: list[int]) -> WBLeftistHeap:
    return WBLeftistHeap.from_iterable(data)


def prepare_halves(data: list[int]) -> tuple[WBLeftistHeap, WBLeftistHeap]:
    half = len(data) // 2
    return WBLeftistHeap.from_iterable(data[:half]), WBLeftistHeap.from_iterable(data[half:])


def measure_operation(
    operation: Callable[[Any], WBLeftistHeap],
    input_size: int,
    rng: random.Random,
    iterations: int = DEFAULT_ITERATIONS,
    setup: Callable[[list[int]], Any] = prepare_list,
) -> tuple[float, float, float]:
    """Run `operation` several times; return (avg ms, stdev ms, avg bytes).

    `setup` turns the random input into the operation's argument and is
    not timed.
    """
    times = []
    sizes = []
    for _ in range(iterations):
        prepared = setup(generate_random_list(input_size, rng))
        start = time.perf_counter()
        heap = operation(prepared)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        sizes.append(heap_footprint(heap))

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data: list[int]) -> WBLeftistHeap:
    heap: WBLeftistHeap[int] = WBLeftistHeap()
    for item in data:
        heap.insert(item)
    return heap


def bench_delete_minimum(heap: WBLeftistHeap) -> WBLeftistHeap:
    while not heap.is_empty():
        heap.delete_minimum()
    return heap


def bench_from_iterable(data: list[int]) -> WBLeftistHeap:
    return WBLeftistHeap.from_iterable(data)


def bench_meld(halves: tuple[WBLeftistHeap, WBLeftistHeap]) -> WBLeftistHeap:
    left, right = halves
    return WBLeftistHeap.meld(left, right)


# name -> (untimed setup, timed operation)
OPERATIONS: dict[str, tuple[Callable[[list[int]], Any], Callable[[Any], WBLeftistHeap]]] = {
    "insert": (prepare_list, bench_insert),
    "delete_minimum": (prepare_heap, bench_delete_minimum),
    "from_iterable": (prepare_list, bench_from_iterable),
    "meld": (prepare_halves, bench_meld),
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    rounds: int = DEFAULT_ROUNDS,
    iterations: int = DEFAULT_ITERATIONS,
    rng: Optional[random.Random] = None,
) -> list[list[str]]:
    """Run exponential performance tests for heap operations.

    Returns the data rows written to `output_file` (header excluded).

    Raises:
        InvalidArgumentError: if `base_input`, `rounds` or `iterations` is not positive.
    """
    for name, value in (("base_input", base_input), ("rounds", rounds), ("iterations", iterations)):
        if value <= 0:
            raise InvalidArgumentError(f"{name} must be positive, got {value!r}")
    rng = rng or random.Random()
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows: list[list[str]] = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, (op_setup, op_func) in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space = measure_operation(op_func, size, rng, iterations, op_setup)
                row = [str(size), op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<15} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
