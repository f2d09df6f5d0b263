"""Projected gradient descent inside an axis-aligned box."""

from __future__ import annotations

from collections.abc import Callable, Sequence

Vec = list[float]


class ConstrainedSGD:
    """Fixed-step gradient descent with projection onto ``[lower, upper]``."""

    def __init__(
        self,
        learning_rate: float,
        max_iters: int,
        lower_bounds: Sequence[float],
        upper_bounds: Sequence[float],
    ) -> None:
        self.learning_rate = learning_rate
        self.max_iters = max_iters
        self.lower_bounds = list(lower_bounds)
        self.upper_bounds = list(upper_bounds)

    def optimize(
        self,
        f: Callable[[Vec], float],
        grad: Callable[[Vec], Sequence[float]],
        x0: Sequence[float],
    ) -> Vec:
        """Run ``max_iters`` projected steps from ``x0`` and return the end point."""
        x = list(x0)
        for _ in range(self.max_iters):
            g = grad(x)
            x = self.project([xi - self.learning_rate * gi for xi, gi in zip(x, g)])
        return x

    def project(self, x: Sequence[float]) -> Vec:
        """Clamp every coordinate of ``x`` into its bounds."""
        return [
            min(max(xi, lo), hi)
            for xi, lo, hi in zip(x, self.lower_bounds, self.upper_bounds)
        ]