"""All-pairs shortest paths with Floyd's algorithm, read from and written to a text report."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path

_INT = re.compile(r"\s*([+-]?\d+)")
_HEADER = re.compile(r"Problem\s*([+-]?\d+):\s*n\s*=\s*([+-]?\d+)")
_NUMBER = re.compile(r"Problem\s*([+-]?\d+)")

OUTPUT_NAME = "output.txt"


@dataclass
class Problem:
    """One weighted adjacency matrix taken from an input file."""

    header: str
    number: int
    size: int
    matrix: list[list[int]]


def shortest_paths(matrix):
    """Run Floyd's algorithm on a square matrix.

    Returns ``(dist, next_hop)``; ``next_hop[i][j]`` is the last intermediate
    vertex that improved the distance from ``i`` to ``j``, or ``j`` itself.
    The input matrix is left unchanged.
    """
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    next_hop = [list(range(n)) for _ in range(n)]

    for k, row_k in enumerate(dist):
        for row_i, hops in zip(dist, next_hop):
            for j, d_kj in enumerate(row_k):
                via = row_i[k] + d_kj
                if row_i[j] > via:
                    row_i[j] = via
                    hops[j] = k
    return dist, next_hop


def reconstruct_path(next_hop, source, target):
    """Return the list of 0-based vertices from ``source`` to ``target``."""
    if source == target:
        return [source]
    limit = len(next_hop)
    path = [source]
    hop = next_hop[source][target]
    while hop != target:
        if len(path) >= limit:
            raise ValueError(f"no finite path from V{source + 1} to V{target + 1}")
        path.append(hop)
        hop = next_hop[hop][target]
    path.append(target)
    return path


def _lines(text, pos):
    """Yield ``(line, end)`` pairs from ``pos`` the way a line reader would."""
    while pos < len(text):
        end = text.find("\n", pos)
        end = len(text) if end < 0 else end + 1
        yield text[pos:end], end
        pos = end


def parse_problems(text):
    """Parse every ``Problem`` block of an input text into :class:`Problem` objects."""
    problems: list[Problem] = []
    number = 0
    size: int | None = None
    pos = 0

    while pos < len(text):
        end = text.find("\n", pos)
        end = len(text) if end < 0 else end + 1
        line = text[pos:end]
        pos = end
        if "Problem" not in line:
            continue

        number += 1
        if "n =" in line:
            full = _HEADER.match(line)
            if full:
                number, size = int(full.group(1)), int(full.group(2))
            else:
                partial = _NUMBER.match(line)
                if partial:
                    number = int(partial.group(1))
        if size is None:
            raise ValueError(f"no matrix size known for {line.strip()!r}")
        if size < 0:
            raise ValueError(f"invalid matrix size {size}")

        values = []
        for _ in range(size * size):
            found = _INT.match(text, pos)
            if not found:
                raise ValueError("Error reading matrix elements.")
            values.append(int(found.group(1)))
            pos = found.end()

        matrix = [values[row * size:(row + 1) * size] for row in range(size)]
        problems.append(Problem(header=line, number=number, size=size, matrix=matrix))
    return problems


def format_problem(problem, dist, next_hop):
    """Render the path matrix and every shortest path of one problem."""
    parts = [problem.header, "P matrix:\n"]
    for hops in next_hop:
        parts.append("".join(f"{hop + 1}  " for hop in hops) + "\n")

    for u in range(problem.size):
        parts.append(f"\nV{u + 1}-Vj: shortest path and length\n")
        for v in range(problem.size):
            if u == v:
                parts.append(f"V{u + 1} V{v + 1} : 0\n")
                continue
            path = reconstruct_path(next_hop, u, v)
            names = " ".join(f"V{vertex + 1}" for vertex in path)
            parts.append(f"{names} : {dist[u][v]}\n")
    return "".join(parts)


def solve(text):
    """Solve every problem of an input text and return the full report."""
    return "\n".join(
        format_problem(problem, *shortest_paths(problem.matrix))
        for problem in parse_problems(text)
    )


def main(argv=None):
    """Read an input file and write the shortest-path report to ``output.txt``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: floyd <input_file>", file=sys.stderr)
        return 1
    try:
        text = Path(args[0]).read_text()
    except OSError:
        print("Error in opening input file.", file=sys.stderr)
        return 1
    try:
        report = solve(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        Path(OUTPUT_NAME).write_text(report)
    except OSError:
        print("Error in opening output file.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())