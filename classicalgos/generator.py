"""Random 0/1 knapsack problem generator."""

from __future__ import annotations

import random
import sys
from pathlib import Path

from classicalgos.knapsack_items import Item


def generate_problem(rng=None):
    """Create 5 to 10 random items and a capacity of 60% of their total weight.

    Returns ``(items, capacity)``.
    """
    rng = random.Random() if rng is None else rng
    count = rng.randint(5, 10)
    items = []
    for position in range(1, count + 1):
        profit = rng.randint(10, 30)
        weight = rng.randint(5, 20)
        items.append(Item(f"Item{position}", profit, weight))
    capacity = int(sum(item.weight for item in items) * 0.6)
    return items, capacity


def format_problem(items, capacity):
    """Render a problem in the layout the solvers read."""
    lines = "".join(f"\n{item.name} {item.profit} {item.weight}" for item in items)
    return f"{len(items)}  {capacity}{lines}"


def main(argv=None):
    """Write a freshly generated problem to the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: createkn01 <output_filename>")
        return 1
    items, capacity = generate_problem()
    try:
        Path(args[0]).write_text(format_problem(items, capacity))
    except OSError:
        print("Error opening the file.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())