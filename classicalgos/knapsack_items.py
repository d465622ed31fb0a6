"""Knapsack items, problem files and result reports shared by the solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Item:
    """One item that may be packed: a label, its profit and its weight."""

    name: str
    profit: int
    weight: int

    @property
    def ratio(self):
        """Profit per unit of weight; weightless items come first."""
        if self.weight == 0:
            return math.inf
        return self.profit / self.weight


@dataclass
class KnapsackResult:
    """Outcome of a solver: the items reported, their totals and the item count.

    ``count`` defaults to the number of reported items.
    """

    items: list[Item]
    profit: int
    weight: int
    count: int | None = None

    def __post_init__(self):
        if self.count is None:
            self.count = len(self.items)


def _int(token, what):
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def parse_problem(text):
    """Parse ``n capacity`` followed by ``n`` lines of ``name profit weight``.

    Returns ``(items, capacity)``.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("missing item count or capacity")
    count = _int(tokens[0], "item count")
    capacity = _int(tokens[1], "capacity")
    if count < 0:
        raise ValueError(f"invalid item count: {count}")
    body = tokens[2:2 + 3 * count]
    if len(body) < 3 * count:
        raise ValueError(f"expected {count} items, found fewer")
    items = [
        Item(name, _int(profit, "profit"), _int(weight, "weight"))
        for name, profit, weight in zip(body[0::3], body[1::3], body[2::3])
    ]
    return items, capacity


def read_problem(path):
    """Read and parse a knapsack problem file."""
    return parse_problem(Path(path).read_text())


def format_result(result):
    """Render a result as a header line followed by one line per item."""
    lines = [f"{result.count} {result.profit} {result.weight}"]
    lines.extend(f"{item.name} {item.profit} {item.weight}" for item in result.items)
    return "\n".join(lines) + "\n"


def by_ratio(items):
    """Return the items ordered by profit per unit weight, highest first."""
    return sorted(items, key=lambda item: item.ratio, reverse=True)