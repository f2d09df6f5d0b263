"""Tableau simplex method for ``max c.x`` subject to ``A x <= b``, ``x >= 0``."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

logger = logging.getLogger(__name__)

EPS = 1e-9
INF = 1e18


class Simplex:
    """Primal simplex on a dense tableau with slack variables as the initial basis."""

    def __init__(
        self,
        a: Sequence[Sequence[float]],
        b: Sequence[float],
        c: Sequence[float],
    ) -> None:
        if not a:
            raise ValueError("constraint matrix must have at least one row")
        self._m = len(a)
        self._n = len(a[0])
        m, n = self._m, self._n

        self._tableau: list[list[float]] = []
        for i, (row, bi) in enumerate(zip(a, b)):
            tableau_row = [float(v) for v in row[:n]] + [0.0] * m + [float(bi)]
            tableau_row[n + i] = 1.0
            self._tableau.append(tableau_row)
        self._tableau.append([-float(cj) for cj in c[:n]] + [0.0] * (m + 1))

        self._basic = list(range(n, n + m))
        self._non_basic = list(range(n))

    def _pivot(self, row: int, col: int) -> None:
        pv = self._tableau[row][col]
        pivot_row = [v / pv for v in self._tableau[row]]
        self._tableau[row] = pivot_row
        for i, current in enumerate(self._tableau):
            if i == row:
                continue
            factor = current[col]
            if abs(factor) < EPS:
                continue
            self._tableau[i] = [v - factor * p for v, p in zip(current, pivot_row)]

        idx = self._non_basic.index(col)
        self._basic[row], self._non_basic[idx] = self._non_basic[idx], self._basic[row]

    def solve(self) -> tuple[float, list[float]]:
        """Run the simplex method.

        Returns the optimal objective value and the values of the original
        variables.  An unbounded problem gives ``(inf, [])``.
        """
        m, n = self._m, self._n
        objective = self._tableau[m]
        while True:
            objective = self._tableau[m]
            entering = next((col for col in self._non_basic if objective[col] < -EPS), None)
            if entering is None:
                break

            leaving = None
            best_ratio = INF
            for i, row in enumerate(self._tableau[:m]):
                a_ij = row[entering]
                if a_ij > EPS:
                    ratio = row[-1] / a_ij
                    if ratio + EPS < best_ratio:
                        best_ratio = ratio
                        leaving = i
            if leaving is None:
                logger.warning("Unbounded LP")
                return math.inf, []

            self._pivot(leaving, entering)

        solution = [0.0] * n
        for var, row in zip(self._basic, self._tableau[:m]):
            if var < n:
                solution[var] = row[-1]
        return self._tableau[m][-1], solution