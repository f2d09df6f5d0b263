"""Commands that run L-BFGS on the paired Rosenbrock function."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from methopts.lbfgs import LBFGS

Vec = list[float]

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class RosenbrockPairs:
    """Sum of independent 2-D Rosenbrock terms over coordinate pairs ``(x[2k], x[2k+1])``.

    With an odd dimension the last coordinate does not enter the function.
    """

    def __init__(self, n: int) -> None:
        self.n = n

    def _pairs(self, x: Sequence[float]):
        return zip(x[0:max(self.n - 1, 0):2], x[1:self.n:2])

    def __call__(self, x: Sequence[float]) -> float:
        total = 0.0
        for t1, t2 in self._pairs(x):
            total += 100 * (t1 * t1 - t2) * (t1 * t1 - t2) + (t1 - 1) * (t1 - 1)
        return total

    def grad(self, x: Sequence[float]) -> Vec:
        g = [0.0] * self.n
        for k, (t1, t2) in enumerate(self._pairs(x)):
            g[2 * k] = 400 * t1 * (t1 * t1 - t2) + 2 * (t1 - 1)
            g[2 * k + 1] = -200 * (t1 * t1 - t2)
        return g


def _parse_dimension(args: Sequence[str]) -> int | None:
    if len(args) != 1:
        print("Usage: <command> N", file=sys.stderr)
        return None
    match = _INT_PREFIX.match(args[0])
    if match is None:
        print(f"Invalid dimension: {args[0]}", file=sys.stderr)
        return None
    n = int(match.group(0))
    if n < 0:
        print(f"Invalid dimension: {args[0]}", file=sys.stderr)
        return None
    return n


def main_history(argv: Sequence[str] | None = None) -> int:
    """Print ``iter,loss,grad_norm`` rows for 30 L-BFGS iterations from zero."""
    args = sys.argv[1:] if argv is None else list(argv)
    n = _parse_dimension(args)
    if n is None:
        return 1
    problem = RosenbrockPairs(n)
    # A zero tolerance: the run always goes to the iteration limit.
    optimizer = LBFGS(10, 30, 0.0)

    print("iter,loss,grad_norm")

    def report(iteration: int, x: Vec, loss: float, grad_norm: float) -> None:
        print(f"{iteration},{loss:.12g},{grad_norm:.12g}")

    optimizer.optimize(problem, problem.grad, [0.0] * n, report)
    return 0


def main_solution(argv: Sequence[str] | None = None) -> int:
    """Print the point L-BFGS reaches from zero."""
    args = sys.argv[1:] if argv is None else list(argv)
    n = _parse_dimension(args)
    if n is None:
        return 1
    problem = RosenbrockPairs(n)
    result = LBFGS(10, 500, 1e-6).optimize(problem, problem.grad, [0.0] * n)
    print("".join(f"{v:g} " for v in result))
    return 0


if __name__ == "__main__":
    sys.exit(main_solution())