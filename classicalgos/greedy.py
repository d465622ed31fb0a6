"""Greedy 0/1 knapsack by profit per unit weight."""

from __future__ import annotations

import sys
from pathlib import Path

from classicalgos.knapsack_items import Item, KnapsackResult, by_ratio, format_result, read_problem

OUTPUT_NAME = "output3.txt"


def solve_greedy(items, capacity):
    """Take items in order of falling profit ratio whenever they still fit.

    Each reported line carries the profit and weight of the i-th chosen item
    under the name of the i-th item in ratio order.
    """
    ordered = by_ratio(items)
    chosen = []
    weight = 0
    for item in ordered:
        if weight + item.weight <= capacity:
            chosen.append(item)
            weight += item.weight
    listed = [
        Item(label.name, pick.profit, pick.weight) for label, pick in zip(ordered, chosen)
    ]
    return KnapsackResult(listed, sum(item.profit for item in chosen), weight)


def main(argv=None):
    """Solve a problem file greedily and write the result to ``output3.txt``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: igreedy <input_filename>", file=sys.stderr)
        return 1
    try:
        items, capacity = read_problem(args[0])
    except OSError:
        print("Error opening input file.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    result = solve_greedy(items, capacity)
    try:
        Path(OUTPUT_NAME).write_text(format_result(result))
    except OSError:
        print("Error opening output file.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())