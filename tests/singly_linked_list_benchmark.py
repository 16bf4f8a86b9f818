import os
import sys
import csv
import random
import time
import statistics
import sys as py_sys  # to differentiate from the path sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from linkedlist.datastructures.singly_linked_list import SinglyLinkedList

OUTPUT_CSV = "singly_linked_list_performance.csv"
BASE_INPUT = 100
SIZE_STEPS = 8
ITERATIONS = 5

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]

def measure_operation_time(operation, input_size: int, iterations: int = ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        sll = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        space_used.append(measure_true_space(sll))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space

def measure_true_space(sll: SinglyLinkedList):
    """Estimate total memory usage of the list including every node and value."""
    total = py_sys.getsizeof(sll)
    n = sll.head
    while n is not None:
        total += py_sys.getsizeof(n) + py_sys.getsizeof(n.data)
        n = n.next
    return total

def build(data):
    sll = SinglyLinkedList()
    for item in data:
        sll.add_to_back(item)
    return sll

# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_add_to_back(data):
    return build(data)

def op_add_to_front(data):
    sll = SinglyLinkedList()
    for item in data:
        sll.add_to_front(item)
    return sll

def op_remove_from_front(data):
    sll = build(data)
    while not sll.is_empty():
        sll.remove_from_front()
    return sll

def op_remove_from_back(data):
    # O(n) per call, so only drain a bounded number of elements.
    sll = build(data)
    for _ in range(min(50, len(data))):
        sll.remove_from_back()
    return sll

def op_get(data):
    sll = build(data)
    n = len(data)
    for idx in (0, n // 2, n - 1):
        _ = sll.get(idx)
    return sll

def op_remove_last_occurrence(data):
    sll = build(data)
    for item in data[:3]:
        sll.remove_last_occurrence(item)
    return sll

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = BASE_INPUT):
    """Run exponential performance tests for SinglyLinkedList operations."""
    operations = {
        "add_to_back": op_add_to_back,
        "add_to_front": op_add_to_front,
        "remove_from_front": op_remove_from_front,
        "remove_from_back": op_remove_from_back,
        "get": op_get,
        "remove_last_occurrence": op_remove_last_occurrence,
    }

    input_sizes = [base_input * (2 ** i) for i in range(SIZE_STEPS)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Std Dev Time (ms)",
            "Average Space (bytes)",
            "Std Dev Space (bytes)"
        ])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation_time(op_func, size)
                writer.writerow([
                    size,
                    op_name,
                    f"{avg_time:.3f}",
                    f"{std_time:.3f}",
                    f"{avg_space:.0f}",
                    f"{std_space:.0f}"
                ])
                print(f"{op_name:<22} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std Time: {std_time:.3f} ms | Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    run_benchmarks(OUTPUT_CSV)
