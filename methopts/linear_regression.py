"""Least-squares linear regression fitted by projected gradient descent."""

from __future__ import annotations

from collections.abc import Sequence

from methopts.constrained_sgd import ConstrainedSGD

Vec = list[float]


class LinearRegressionSGD:
    """Fits ``y ~ X beta`` minimising mean squared error with ``beta`` kept in a box."""

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

    def fit(
        self,
        x: Sequence[Sequence[float]],
        y: Sequence[float],
        beta0: Sequence[float],
    ) -> Vec:
        """Return the coefficients found starting from ``beta0``."""
        samples = [list(row) for row in x]
        targets = list(y)
        m = len(samples)
        if m == 0:
            raise ValueError("cannot fit a regression on an empty dataset")

        def residuals(beta: Vec) -> list[float]:
            return [
                sum(xij * bj for xij, bj in zip(row, beta)) - target
                for row, target in zip(samples, targets)
            ]

        def loss(beta: Vec) -> float:
            return sum(d * d for d in residuals(beta)) / (2 * m)

        def grad(beta: Vec) -> Vec:
            g = [0.0] * len(beta)
            for row, diff in zip(samples, residuals(beta)):
                g = [gj + diff * xij for gj, xij in zip(g, row)]
            return [gj / m for gj in g]

        sgd = ConstrainedSGD(
            self.learning_rate, self.max_iters, self.lower_bounds, self.upper_bounds
        )
        return sgd.optimize(loss, grad, beta0)