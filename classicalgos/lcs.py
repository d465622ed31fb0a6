"""Longest common subsequence of two strings by dynamic programming."""

from __future__ import annotations

import sys


def lcs_table(x, y):
    """Return the LCS length table with ``len(x) + 1`` rows and ``len(y) + 1`` columns."""
    table = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, x_char in enumerate(x, 1):
        previous, row = table[i - 1], table[i]
        for j, y_char in enumerate(y, 1):
            if x_char == y_char:
                row[j] = previous[j - 1] + 1
            else:
                row[j] = max(row[j - 1], previous[j])
    return table


def longest_common_subsequence(first, second):
    """Return one longest common subsequence of ``first`` and ``second``."""
    x, y = second, first
    table = lcs_table(x, y)
    i, j = len(x), len(y)
    chars = []
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            chars.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def main(argv=None):
    """Print the length and one longest common subsequence of two arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: lcs <string1> <string2>")
        return 1
    result = longest_common_subsequence(args[0], args[1])
    print(f"Length of the string : {len(result)}")
    print(f"LCS: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())