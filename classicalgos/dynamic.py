"""0/1 knapsack by dynamic programming over capacities."""

from __future__ import annotations

import sys
from pathlib import Path

from classicalgos.knapsack_items import KnapsackResult, by_ratio, format_result, read_problem

OUTPUT_NAME = "output2.txt"


def solve_dynamic(items, capacity):
    """Solve with a one-dimensional capacity table after sorting by profit ratio.

    The reported weight is the smallest capacity reaching the optimal profit.
    The count is the number of items no heavier than that weight, and the
    listed items are the sorted items that fit the knapsack, taken in order
    until their running weight equals the reported weight.
    """
    if capacity < 0:
        raise ValueError(f"invalid capacity: {capacity}")
    ordered = by_ratio(items)
    if any(item.weight < 0 for item in ordered):
        raise ValueError("item weights must not be negative")

    best = [0] * (capacity + 1)
    for item in ordered:
        for room in range(capacity, item.weight - 1, -1):
            best[room] = max(best[room], best[room - item.weight] + item.profit)

    used = capacity
    while used > 0 and best[used] == best[used - 1]:
        used -= 1

    count = sum(1 for item in ordered if item.weight <= used)

    listed = []
    running = 0
    for item in ordered:
        if item.weight <= capacity:
            listed.append(item)
            running += item.weight
            if running == used:
                break

    return KnapsackResult(listed, best[capacity], used, count)


def main(argv=None):
    """Solve a problem file and write the result to ``output2.txt``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: dynpro <input_filename>", file=sys.stderr)
        return 1
    try:
        items, capacity = read_problem(args[0])
    except OSError:
        print("Error opening input file.", file=sys.stderr)
        return 1
    try:
        result = solve_dynamic(items, capacity)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        Path(OUTPUT_NAME).write_text(format_result(result))
    except OSError:
        print("Error opening output file.", file=sys.stderr)
        return 1
    print(
        "Dynamic programming algorithm executed successfully. "
        f"Check '{OUTPUT_NAME}' for results."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())