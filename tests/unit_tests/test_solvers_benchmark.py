import operator
import time

import pytest

from pathdiff.frontier import frontier_diff
from pathdiff.layered import layered_diff


def create_content(num_lines=2000, modification_rate=100):
    """
    Creates two line lists.
    modification_rate: modifying 1 line every N lines.
    """
    lines_a = [f"This is line number {i} with some static content." for i in range(num_lines)]
    lines_b = list(lines_a)

    for i in range(0, num_lines, modification_rate):
        lines_b[i] = f"This is line number {i} MODIFIED content."

    # Less frequent insertions
    for i in range(0, num_lines, modification_rate * 2):
        lines_b.insert(i, f"Inserted line at {i}")

    return lines_a, lines_b


@pytest.mark.benchmark
def test_benchmark_frontier_vs_layered():
    print("\n\n=== frontier vs layered ===")
    lines_a, lines_b = create_content()

    start_time = time.perf_counter()
    frontier = frontier_diff(lines_a, lines_b, operator.eq)
    frontier_time = time.perf_counter() - start_time
    print(f"frontier: cost={frontier.cost} time={frontier_time:.4f}s")

    start_time = time.perf_counter()
    layered = layered_diff(lines_a, lines_b, operator.eq)
    layered_time = time.perf_counter() - start_time
    print(f"layered:  cost={layered.cost} time={layered_time:.4f}s")

    # 20 modified lines (delete + insert each) and 10 insertions
    assert frontier.cost == layered.cost == 50

    old = [e.item for e in layered.sequence if e.tag != 'insertion']
    new = [e.item for e in layered.sequence if e.tag != 'deletion']
    assert old == lines_a
    assert new == lines_b
