"""Limited-memory BFGS with a backtracking Armijo line search."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable, Sequence

from methopts.vectors import dot, norm2, sub

Vec = list[float]
Function = Callable[[Vec], float]
Gradient = Callable[[Vec], Sequence[float]]
HistoryCallback = Callable[[int, Vec, float, float], None]

_ARMIJO_C = 1e-4
_MIN_STEP = 1e-20


def _divide(a: float, b: float) -> float:
    """Floating-point division that yields inf or nan instead of raising on zero."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class LBFGS:
    """L-BFGS keeping the last ``m`` curvature pairs."""

    def __init__(self, m: int, max_iters: int = 1000, tol: float = 1e-6) -> None:
        if m < 1:
            raise ValueError("history size m must be at least 1")
        self.m = m
        self.max_iters = max_iters
        self.tol = tol

    def optimize(
        self,
        f: Function,
        grad: Gradient,
        x0: Sequence[float],
        history_cb: HistoryCallback | None = None,
    ) -> Vec:
        """Minimise ``f`` from ``x0`` and return the final point.

        ``history_cb(iter, x, loss, grad_norm)`` is called at the start of
        every iteration, before the convergence check.
        """
        x = list(x0)
        s_list: deque[Vec] = deque(maxlen=self.m)
        y_list: deque[Vec] = deque(maxlen=self.m)

        for iteration in range(self.max_iters):
            g = list(grad(x))
            grad_norm = norm2(g)
            loss = f(x)
            if history_cb is not None:
                history_cb(iteration, list(x), loss, grad_norm)
            if grad_norm < self.tol:
                break

            pairs = list(zip(s_list, y_list))
            q = list(g)
            alphas = [0.0] * len(pairs)
            rhos = [0.0] * len(pairs)
            for i, (s, y) in reversed(list(enumerate(pairs))):
                rhos[i] = _divide(1.0, dot(y, s))
                alphas[i] = rhos[i] * dot(s, q)
                q = [qj - alphas[i] * yj for qj, yj in zip(q, y)]

            gamma = 1.0
            if pairs:
                s_last, y_last = pairs[-1]
                gamma = _divide(dot(s_last, y_last), dot(y_last, y_last))
            z = [gamma * qj for qj in q]

            for (s, y), rho, alpha in zip(pairs, rhos, alphas):
                beta = rho * dot(y, z)
                z = [zj + sj * (alpha - beta) for zj, sj in zip(z, s)]
            z = [-zj for zj in z]

            directional = dot(g, z)
            step = 1.0
            while True:
                x_new = [xj + step * zj for xj, zj in zip(x, z)]
                if f(x_new) <= loss + _ARMIJO_C * step * directional:
                    break
                step *= 0.5
                if step < _MIN_STEP:
                    break

            g_new = list(grad(x_new))
            s_list.append(sub(x_new, x))
            y_list.append(sub(g_new, g))
            x = x_new
        return x