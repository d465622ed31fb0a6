"""Exhaustive search over every subset of items for the 0/1 knapsack problem."""

from __future__ import annotations

import sys
from pathlib import Path

from classicalgos.knapsack_items import Item, KnapsackResult, format_result, read_problem

OUTPUT_NAME = "output1.txt"


def solve_bruteforce(items, capacity):
    """Try every subset and keep the first one with the highest profit that fits.

    Subsets are visited in binary counting order, item ``j`` being bit ``j``.
    Chosen items are reported as ``Item<position>`` with 1-based positions.
    """
    items = list(items)
    best_profit = 0
    best_weight = 0
    best: list[Item] = []
    for mask in range(1 << len(items)):
        chosen = [
            Item(f"Item{position}", item.profit, item.weight)
            for position, item in enumerate(items, 1)
            if mask >> (position - 1) & 1
        ]
        profit = sum(item.profit for item in chosen)
        weight = sum(item.weight for item in chosen)
        if weight <= capacity and profit > best_profit:
            best_profit, best_weight, best = profit, weight, chosen
    return KnapsackResult(best, best_profit, best_weight)


def main(argv=None):
    """Solve a problem file by brute force and write the result to ``output1.txt``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: bruteforce <input_filename>")
        return 1
    try:
        items, capacity = read_problem(args[0])
    except OSError:
        print("Error opening the file.")
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    result = solve_bruteforce(items, capacity)
    try:
        Path(OUTPUT_NAME).write_text(format_result(result))
    except OSError:
        print("Error opening the file.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())