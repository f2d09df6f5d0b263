"""Travelling salesman solver: brute force for small graphs, branch and cut otherwise."""

from __future__ import annotations

import itertools
import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from methopts.graph import Graph
from methopts.lp_model import LPModel

BRUTE_FORCE_LIMIT = 10
_INTEGRAL_TOL = 1e-6
_PRUNE_TOL = 1e-9


@dataclass
class TSPSolution:
    """Tour length and the vertex order of the tour."""

    length: float = math.inf
    tour: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class _Node:
    fixed_edges: tuple[tuple[int, int], ...] = ()
    forbidden: tuple[tuple[int, int], ...] = ()


def _var_index(i: int, j: int, n: int) -> int:
    return i * n + j - ((i + 2) * (i + 1)) // 2


def _edge_var(i: int, j: int, n: int) -> int:
    return _var_index(i, j, n) if i < j else _var_index(j, i, n)


def _is_fractional(v: float) -> bool:
    if not math.isfinite(v):
        return False
    return abs(v - round(v)) > _INTEGRAL_TOL


class BranchAndCutSolver:
    """Finds a shortest Hamiltonian cycle of ``graph``.

    Graphs of at most ten vertices are enumerated exhaustively. Larger ones
    go through LP relaxation with subtour cuts and branching on the most
    fractional edge, exploring at most ``max_nodes`` nodes over the solver's
    lifetime.
    """

    def __init__(self, graph: Graph, max_nodes: int = 1000) -> None:
        self.graph = graph
        self.max_nodes = max_nodes
        self._nodes_left = max_nodes
        self._best = TSPSolution()
        n = graph.n
        self._edges = [(i, j) for i in range(n) for j in range(i + 1, n)]

    def solve(self) -> TSPSolution:
        """Return the best tour found."""
        if self.graph.n <= BRUTE_FORCE_LIMIT:
            return self._brute_force()

        stack = [_Node()]
        while stack:
            node = stack.pop()
            stack.extend(reversed(self._solve_node(node)))
        return TSPSolution(self._best.length, list(self._best.tour))

    def find_subtours(self, x: Sequence[float]) -> list[set[int]]:
        """Connected components of the edges whose value exceeds one half."""
        n = self.graph.n
        adj: list[list[int]] = [[] for _ in range(n)]
        for (i, j), value in zip(self._edges, x):
            if value > 0.5:
                adj[i].append(j)
                adj[j].append(i)

        used = [False] * n
        components: list[set[int]] = []
        for start in range(n):
            if used[start]:
                continue
            used[start] = True
            queue = deque([start])
            component: set[int] = set()
            while queue:
                u = queue.popleft()
                component.add(u)
                for v in adj[u]:
                    if not used[v]:
                        used[v] = True
                        queue.append(v)
            components.append(component)
        return components

    def _brute_force(self) -> TSPSolution:
        n = self.graph.n
        cost = self.graph.cost
        best = TSPSolution()
        for perm in itertools.permutations(range(n)):
            length = 0.0
            for u, v in zip(perm, perm[1:] + perm[:1]):
                length += cost[u][v]
            if length < best.length:
                best = TSPSolution(length, list(perm))
        return best

    def _build_lp(self, node: _Node) -> LPModel:
        n = self.graph.n
        num_vars = len(self._edges)
        lp = LPModel(num_vars)
        lp.c = [self.graph.cost[i][j] for i, j in self._edges]

        for i in range(n):
            row = [0.0] * num_vars
            for j in range(n):
                if i != j:
                    row[_edge_var(i, j, n)] = 1.0
            lp.add_constraint(row, "=", 2.0)

        for edges, rhs in ((node.fixed_edges, 1.0), (node.forbidden, 0.0)):
            for i, j in edges:
                row = [0.0] * num_vars
                row[_edge_var(i, j, n)] = 1.0
                lp.add_constraint(row, "=", rhs)
        return lp

    def _add_cuts(
        self, lp: LPModel, subsets: list[set[int]], seen: set[frozenset[int]]
    ) -> bool:
        """Add subtour elimination rows for subsets not cut before; report whether any were."""
        n = self.graph.n
        added = False
        for subset in subsets:
            key = frozenset(subset)
            # A repeated cut cannot change the relaxation again.
            if key in seen:
                continue
            seen.add(key)
            row = [0.0] * len(self._edges)
            for i in subset:
                for j in subset:
                    if i < j:
                        row[_var_index(i, j, n)] = 1.0
            lp.add_constraint(row, "<", float(len(subset) - 1))
            added = True
        return added

    def _solve_node(self, node: _Node) -> list[_Node]:
        """Process one node and return its children in exploration order."""
        remaining = self._nodes_left
        self._nodes_left -= 1
        if remaining <= 0:
            return []

        n = self.graph.n
        num_vars = len(self._edges)
        lp = self._build_lp(node)
        seen_cuts: set[frozenset[int]] = set()

        while True:
            x = lp.solve_relaxation()
            if len(x) != num_vars:
                return []
            lp_obj = 0.0
            for ck, xk in zip(lp.c, x):
                lp_obj += ck * xk
            if lp_obj >= self._best.length - _PRUNE_TOL:
                return []

            integral = not any(_is_fractional(v) for v in x)
            tours = self.find_subtours(x)

            if integral:
                if len(tours) == 1:
                    self._record_tour(x)
                    return []
                if not self._add_cuts(lp, tours, seen_cuts):
                    return []
                continue

            if len(tours) > 1 and self._add_cuts(
                lp, [s for s in tours if len(s) < n], seen_cuts
            ):
                continue

            frac_idx = None
            min_dist = 1.0
            for k, value in enumerate(x):
                if _INTEGRAL_TOL < value < 1 - _INTEGRAL_TOL:
                    dist = abs(value - 0.5)
                    if dist < min_dist:
                        min_dist = dist
                        frac_idx = k
            if frac_idx is None:
                return []

            edge = self._edges[frac_idx]
            left = _Node(node.fixed_edges, node.forbidden + (edge,))
            right = _Node(node.fixed_edges + (edge,), node.forbidden)
            return [left, right]

    def _record_tour(self, x: Sequence[float]) -> None:
        n = self.graph.n
        length = 0.0
        adj: list[list[int]] = [[] for _ in range(n)]
        for (i, j), value in zip(self._edges, x):
            if value > 0.5:
                length += self.graph.cost[i][j]
                adj[i].append(j)
                adj[j].append(i)

        if any(len(neighbours) != 2 for neighbours in adj):
            return
        if not length < self._best.length:
            return

        self._best.length = length
        path: list[int] = []
        current, prev = 0, -1
        for _ in range(n):
            path.append(current)
            nxt = next((v for v in adj[current] if v != prev), -1)
            prev, current = current, nxt
            if current == -1:
                return
        if current != path[0]:
            return
        self._best.tour = path