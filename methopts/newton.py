"""Newton's method for unconstrained minimisation."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from methopts.vectors import norm2, sub

Vec = list[float]


def solve_linear_system(h: Sequence[Sequence[float]], g: Sequence[float]) -> Vec:
    """Solve ``h x = g`` by Gaussian elimination without pivoting."""
    n = len(g)
    a = [[float(v) for v in row] for row in h]
    b = [float(v) for v in g]

    for i in range(n):
        diag = a[i][i]
        if diag == 0.0:
            raise ValueError(f"zero pivot in row {i}")
        a[i][i:] = [v / diag for v in a[i][i:]]
        b[i] /= diag
        pivot_tail = a[i][i:]
        for k in range(i + 1, n):
            factor = a[k][i]
            a[k][i:] = [v - factor * p for v, p in zip(a[k][i:], pivot_tail)]
            b[k] -= factor * b[i]

    x = [0.0] * n
    for i in reversed(range(n)):
        x[i] = b[i] - sum(aij * xj for aij, xj in zip(a[i][i + 1:], x[i + 1:]))
    return x


class NewtonOptimizer:
    """Full-step Newton iteration stopping when the gradient norm drops below ``tol``."""

    def __init__(self, tol: float, max_iters: int) -> None:
        self.tol = tol
        self.max_iters = max_iters

    def optimize(
        self,
        f: Callable[[Vec], float],
        grad: Callable[[Vec], Sequence[float]],
        hess: Callable[[Vec], Sequence[Sequence[float]]],
        x0: Sequence[float],
    ) -> Vec:
        """Return the point reached from ``x0``."""
        x = list(x0)
        for _ in range(self.max_iters):
            g = list(grad(x))
            if norm2(g) < self.tol:
                break
            delta = solve_linear_system(hess(x), g)
            x = sub(x, delta)
        return x