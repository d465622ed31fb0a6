# classicalgos

Small, dependency-free implementations of classic algorithms, each usable
from Python and as a command-line tool:

- Floyd's all-pairs shortest paths, with path reconstruction
- Longest common subsequence
- 0/1 knapsack, solved by brute force, dynamic programming and a greedy
  profit-per-weight heuristic, plus a random problem generator

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Shortest paths (`classicalgos.floyd`)

```
classicalgos-floyd problems.txt
```

The input file holds one or more problems. Each begins with a line
containing the word `Problem`, such as `Problem 1: n = 4`, followed by the
`n` by `n` distance matrix as whitespace-separated integers. A header
without `n =` reuses the size of the previous problem. The report is written
to `output.txt` in the current directory; problems are separated by a blank
line. For each problem it holds the header line, the `P` matrix and, for
every pair of vertices, the path and its length, e.g. `V1 V3 V2 : 7`.

Entries of the `P` matrix are 1-based: for each pair, the last intermediate
vertex that shortened the distance, or the target itself when none did.

If the input file cannot be read, a matrix cannot be read, no size is known
or a path cannot be reconstructed, the command prints a message to standard
error and exits with status 1.

From Python:

- `shortest_paths(matrix)` returns `(dist, next_hop)` and leaves the input
  unchanged; it raises `ValueError` for a non-square matrix.
- `reconstruct_path(next_hop, source, target)` returns the 0-based vertex
  list from `source` to `target`, raising `ValueError` when it cannot reach
  the target.
- `parse_problems(text)` reads the input format into `Problem` objects
  (`header`, `number`, `size`, `matrix`).
- `format_problem(problem, dist, next_hop)` renders one problem's section.
- `solve(text)` produces the whole report as a string.

## Longest common subsequence (`classicalgos.lcs`)

```
classicalgos-lcs ABCBDAB BDCABA
```

prints `Length of the string : <n>` and `LCS: <subsequence>`. In Python,
use `longest_common_subsequence(first, second)` for one longest common
subsequence, or `lcs_table(x, y)` for the dynamic-programming length table
(`len(x) + 1` rows by `len(y) + 1` columns).

## 0/1 knapsack

Problem files start with the number of items and the capacity, followed by
each item's name, profit and weight:

```
4 16
Item1 40 2
Item2 30 5
Item3 50 10
Item4 10 5
```

Generate a random problem (5 to 10 items named `Item1`, `Item2`, ...,
profits 10–30, weights 5–20, capacity 60% of the total weight, rounded
down):

```
classicalgos-knapsack-generate problem.txt
```

Solve it three ways:

```
classicalgos-knapsack-bruteforce problem.txt   # writes output1.txt
classicalgos-knapsack-dynamic problem.txt      # writes output2.txt
classicalgos-knapsack-greedy problem.txt       # writes output3.txt
```

Each output starts with a line holding an item count, a total profit and a
total weight, followed by item lines in the same `name profit weight` form
as the input. What those lines mean differs per solver:

- **Brute force** (`solve_bruteforce`) tries every subset and keeps the
  first one, in binary counting order, with the highest profit that fits.
  The header and item lines describe exactly that subset; items are named
  `Item<position>` by their 1-based position in the input.
- **Dynamic programming** (`solve_dynamic`) sorts the items by profit per
  unit weight and computes the optimal profit for the capacity. The reported
  weight is the smallest capacity reaching that profit, and the count is the
  number of items no heavier than that weight. The listed items are the
  sorted items that individually fit the knapsack, taken in order until
  their running weight equals the reported weight, so they are not
  necessarily an optimal selection. A negative capacity or item weight
  raises `ValueError`.
- **Greedy** (`solve_greedy`) takes items in order of falling profit ratio
  whenever they still fit. The header gives the count, profit and weight of
  the chosen items; each item line pairs the profit and weight of the i-th
  chosen item with the name of the i-th item in ratio order.

From Python, `read_problem(path)` or `parse_problem(text)` give you the
`Item` list (`name`, `profit`, `weight`, and a `ratio` property) and the
capacity, raising `ValueError` on malformed input. Each solver returns a
`KnapsackResult` (`items`, `profit`, `weight`, `count`), which
`format_result(result)` renders in the output format above.
`by_ratio(items)` orders items by profit per unit of weight, highest first,
with weightless items first. `generate_problem(rng)` builds a random problem,
using the `random.Random` you pass or a fresh one, and
`format_problem(items, capacity)` renders it in the input format.