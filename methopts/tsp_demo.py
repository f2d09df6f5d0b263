"""Command that solves a random travelling salesman instance and prints it as JSON."""

from __future__ import annotations

import json
import math
import random
import re
import sys
from collections.abc import Sequence

from methopts.branch_and_cut import BranchAndCutSolver, TSPSolution
from methopts.graph import Graph

DEFAULT_N = 5
DEFAULT_SEED = 113
COST_LOW = 1.0
COST_HIGH = 10.0

_MASK32 = 0xFFFFFFFF
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _mt19937(seed: int) -> random.Random:
    """A Mersenne Twister seeded with the standard single-integer initialisation."""
    state = [seed & _MASK32]
    for i in range(1, 624):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    rng = random.Random()
    rng.setstate((3, tuple(state) + (624,), None))
    return rng


def _uniform(rng: random.Random, low: float, high: float) -> float:
    lo = rng.getrandbits(32)
    hi = rng.getrandbits(32)
    r = (lo + (hi << 32)) / 2**64
    if r >= 1.0:
        r = math.nextafter(1.0, 0.0)
    return r * (high - low) + low


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(0)) if match else 0


def random_graph(n: int, seed: int) -> Graph:
    """Complete graph with costs drawn uniformly from ``[1, 10)``, row by row."""
    graph = Graph(n)
    rng = _mt19937(seed % 2**32)
    for i in range(n):
        for j in range(i + 1, n):
            graph.set_cost(i, j, _uniform(rng, COST_LOW, COST_HIGH))
    return graph


def _json_number(value: float) -> float | None:
    return value if math.isfinite(value) else None


def solution_to_json(graph: Graph, solution: TSPSolution, seed: int) -> str:
    """Render the instance and its tour as indented JSON with sorted keys."""
    document = {
        "N": graph.n,
        "seed": seed,
        "cost": [[_json_number(c) for c in row] for row in graph.cost],
        "tour": list(solution.tour),
        "length": _json_number(solution.length),
    }
    return json.dumps(document, indent=2, sort_keys=True)


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    n = _atoi(args[0]) if len(args) >= 1 else DEFAULT_N
    seed = _atoi(args[1]) % 2**32 if len(args) >= 2 else DEFAULT_SEED
    if n < 0:
        print(f"Invalid number of vertices: {n}", file=sys.stderr)
        return 1

    graph = random_graph(n, seed)
    solution = BranchAndCutSolver(graph).solve()
    print(solution_to_json(graph, solution, seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())