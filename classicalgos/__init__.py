"""Classic algorithms: Floyd shortest paths, longest common subsequence and 0/1 knapsack solvers."""

__version__ = "0.1.0"