"""
Heap benchmark runner.

Times push, pop and bulk-build (heapify) on inputs that double in size,
then writes the averages to a CSV file and prints one line per row.

Usage examples:
    python -m priorityheap.benchmark
    python -m priorityheap.benchmark --queue min --base-input 50 --steps 8
    python -m priorityheap.benchmark --output results.csv --iterations 10
"""

import argparse
import csv
import random
import statistics
import sys
import time

from .datastructures import BinaryHeap, MaxPriorityQueue, MinPriorityQueue

# Defaults used when no flag overrides them
OUTPUT_CSV = "heap_performance.csv"
BASE_INPUT = 100
SIZE_STEPS = 12
ITERATIONS = 5

HEAP_TYPES = {
    "heap": BinaryHeap,
    "min": MinPriorityQueue,
    "max": MaxPriorityQueue,
}

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

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_heap_size(heap) -> int:
    """Approximate bytes held by a heap: the object, its list and every element."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._data)
    for item in heap:
        total += sys.getsizeof(item)
    return total


def measure_operation(operation, heap_cls, input_size: int, iterations: int = ITERATIONS):
    """Run the operation several times; return (avg ms, std ms, avg bytes)."""
    times = []
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        heap = operation(heap_cls, data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        sizes.append(measure_heap_size(heap))

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(heap_cls, data):
    heap = heap_cls()
    for item in data:
        heap.push(item)
    return heap


def bench_pop(heap_cls, data):
    heap = bench_push(heap_cls, data)
    while heap.size() > 0:
        heap.pop()
    return heap


def bench_heapify(heap_cls, data):
    return heap_cls(data)


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "heapify": bench_heapify,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str = OUTPUT_CSV,
    base_input: int = BASE_INPUT,
    steps: int = SIZE_STEPS,
    iterations: int = ITERATIONS,
    heap_type: str = "heap",
):
    """Run exponential performance tests and return the rows written to ``output_file``."""
    if heap_type not in HEAP_TYPES:
        raise ValueError(f"Unknown heap type: {heap_type!r}")
    if base_input < 1 or steps < 1 or iterations < 1:
        raise ValueError("base_input, steps and iterations must be positive")

    heap_cls = HEAP_TYPES[heap_type]
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space = measure_operation(op_func, heap_cls, size, iterations)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows


# ----------------------------
# Main Entry Point
# ----------------------------

def build_parser():
    """Build the argparse parser for the benchmark runner."""
    p = argparse.ArgumentParser(prog="python -m priorityheap.benchmark", description="Heap benchmark")
    p.add_argument("--output", default=OUTPUT_CSV, help="CSV file to write")
    p.add_argument("--base-input", type=int, default=BASE_INPUT, help="Smallest input size")
    p.add_argument("--steps", type=int, default=SIZE_STEPS, help="Number of doublings")
    p.add_argument("--iterations", type=int, default=ITERATIONS, help="Runs per measurement")
    p.add_argument("--queue", choices=sorted(HEAP_TYPES), default="heap", help="Heap preset to time")
    return p


def main(argv=None):
    """Entry point when invoked via `python -m priorityheap.benchmark`."""
    args = build_parser().parse_args(argv)
    run_benchmarks(args.output, args.base_input, args.steps, args.iterations, args.queue)


if __name__ == "__main__":
    main()
