"""Complete weighted graph given by a dense cost matrix."""

from __future__ import annotations

import math


class Graph:
    """``n`` vertices with symmetric edge costs.

    Unset edges cost infinity and every vertex costs zero to itself.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self.n = n
        self.cost: list[list[float]] = [
            [0.0 if i == j else math.inf for j in range(n)] for i in range(n)
        ]

    def set_cost(self, i: int, j: int, c: float) -> None:
        """Set the cost of edge ``{i, j}`` in both directions."""
        self.cost[i][j] = c
        self.cost[j][i] = c