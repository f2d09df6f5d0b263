"""Linear programme in minimisation form, solved by the tableau simplex."""

from __future__ import annotations

from collections.abc import Sequence

from methopts.simplex import Simplex

Vec = list[float]


class LPModel:
    """Minimise ``c.x`` over ``x >= 0`` subject to rows ``a_i.x (op_i) b_i``.

    ``op`` is ``"="`` for an equality, ``">="`` for a lower bound, and
    anything else for an upper bound.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self.c: Vec = [0.0] * n
        self.a: list[Vec] = []
        self.b: Vec = []
        self.ops: list[str] = []

    def add_constraint(self, a: Sequence[float], op: str, bi: float) -> None:
        """Append the constraint ``a.x (op) bi``."""
        self.a.append(list(a))
        self.ops.append(op)
        self.b.append(bi)

    def solve_relaxation(self) -> Vec:
        """Solve the continuous relaxation; an unbounded problem gives ``[]``."""
        a_ineq: list[Vec] = []
        b_ineq: Vec = []
        for row, bi, op in zip(self.a, self.b, self.ops):
            negated = [-v for v in row]
            if op == "=":
                a_ineq.extend((list(row), negated))
                b_ineq.extend((bi, -bi))
            elif op == ">=":
                a_ineq.append(negated)
                b_ineq.append(-bi)
            else:
                a_ineq.append(list(row))
                b_ineq.append(bi)

        c_max = [-cj for cj in self.c]
        _, solution = Simplex(a_ineq, b_ineq, c_max).solve()
        return solution