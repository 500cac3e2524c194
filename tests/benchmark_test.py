import csv
import os
import random
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from meldheap.analysis import benchmark
from meldheap.datastructures import InvalidArgumentError, WBLeftistHeap


def test_run_benchmarks_rows_and_csv(tmp_path):
    path = tmp_path / "out.csv"
    rows = benchmark.run_benchmarks(str(path), base_input=8, rounds=3, iterations=2, rng=random.Random(0))

    assert len(rows) == len(benchmark.OPERATIONS) * 3
    assert {r[1] for r in rows} == set(benchmark.OPERATIONS)
    assert sorted({int(r[0]) for r in rows}) == [8, 16, 32]

    with open(path, newline="") as f:
        written = list(csv.reader(f))
    assert written[0] == benchmark.CSV_HEADER
    assert written[1:] == rows


@pytest.mark.parametrize("kwargs", [{"base_input": 0}, {"rounds": -1}, {"iterations": 0}])
def test_run_benchmarks_rejects_non_positive_settings(tmp_path, kwargs):
    with pytest.raises(InvalidArgumentError):
        benchmark.run_benchmarks(str(tmp_path / "out.csv"), **kwargs)


def test_operations_leave_expected_heaps():
    data = benchmark.generate_random_list(50, random.Random(1))
    assert benchmark.bench_insert(data).size() == 50
    assert benchmark.bench_from_iterable(data).minimum() == min(data)
    assert benchmark.bench_meld(benchmark.prepare_halves(data)).size() == 50
    assert benchmark.bench_delete_minimum(benchmark.prepare_heap(data)).is_empty()


def test_footprint_grows_with_nodes():
    empty = WBLeftistHeap()
    assert benchmark.heap_footprint(empty) == sys.getsizeof(empty)
    assert benchmark.heap_footprint(WBLeftistHeap.of(1, 2, 3)) > benchmark.heap_footprint(empty)


def test_setup_is_outside_the_timed_region(monkeypatch):
    clock = [0.0]
    monkeypatch.setattr(benchmark.time, "perf_counter", lambda: clock[0])

    def slow_setup(data):
        clock[0] += 100.0
        return benchmark.prepare_heap(data)

    def drain(heap):
        clock[0] += 0.5
        return benchmark.bench_delete_minimum(heap)

    avg_time, std_time, _ = benchmark.measure_operation(drain, 20, random.Random(4), iterations=3, setup=slow_setup)
    assert avg_time == 500.0
    assert std_time == 0.0


def test_timed_operations_get_prebuilt_heaps():
    assert benchmark.OPERATIONS["delete_minimum"][0] is benchmark.prepare_heap
    assert benchmark.OPERATIONS["meld"][0] is benchmark.prepare_halves
    left, right = benchmark.prepare_halves(list(range(9)))
    assert (left.size(), right.size()) == (4, 5)
