"""Classic dynamic programming, recursion and graph traversal algorithms."""

__version__ = "0.1.0"

__all__ = [
    "generators",
    "graph",
    "knapsack",
    "partition",
    "recursion",
    "sequences",
    "stacks",
    "subsets",
]