# methopts

A small collection of numerical optimisation methods written in plain Python
with no third-party dependencies:

- `methopts.simplex`: the `Simplex` class, a tableau simplex method for
  `maximise c·x subject to A x <= b, x >= 0`. `solve()` returns the optimal
  value and the values of the variables. An unbounded problem gives
  `(inf, [])`.
- `methopts.constrained_sgd`: `ConstrainedSGD`, fixed-step gradient descent
  projected onto box bounds after every step.
- `methopts.linear_regression`: `LinearRegressionSGD`, least-squares linear
  regression fitted with the box-constrained gradient descent.
- `methopts.newton`: `NewtonOptimizer`, full-step Newton iteration, together
  with `solve_linear_system`, Gaussian elimination without pivoting. A zero
  pivot raises `ValueError`.
- `methopts.lbfgs`: `LBFGS`, limited-memory BFGS with a backtracking Armijo
  line search.
- `methopts.graph`, `methopts.lp_model`, `methopts.branch_and_cut`: an exact
  travelling-salesman solver. Graphs of up to ten vertices are enumerated.
  Larger ones use LP relaxations with subtour cuts and branching.
- `methopts.vectors`: the vector helpers `add`, `sub`, `scalar_mul`, `dot`
  and `norm2`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

A linear programme:

```python
from methopts.simplex import Simplex

value, x = Simplex([[1, 1], [1, 0], [0, 1]], [4, 2, 3], [3, 2]).solve()
print(value, x)   # 10.0 [2.0, 2.0]
```

Projected gradient descent on a quadratic inside a box:

```python
from methopts.constrained_sgd import ConstrainedSGD

f = lambda v: (v[0] - 1.0) ** 2 + (v[1] + 2.0) ** 2
grad = lambda v: [2 * (v[0] - 1.0), 2 * (v[1] + 2.0)]

solver = ConstrainedSGD(0.1, 1000, [0.0, -1.0], [2.0, 2.0])
print(solver.optimize(f, grad, [5.0, 5.0]))   # close to [1.0, -1.0]
```

Newton's method:

```python
from methopts.newton import NewtonOptimizer

f = lambda x: x[0] ** 2 + x[1] ** 2
grad = lambda x: [2 * x[0], 2 * x[1]]
hess = lambda x: [[2.0, 0.0], [0.0, 2.0]]
print(NewtonOptimizer(1e-6, 50).optimize(f, grad, hess, [3.0, -4.0]))   # [0.0, 0.0]
```

L-BFGS takes an optional callback. The callback receives the iteration number,
the current point, the loss and the gradient norm at the start of each
iteration:

```python
from methopts.lbfgs import LBFGS
from methopts.lbfgs_demo import RosenbrockPairs

problem = RosenbrockPairs(10)
opt = LBFGS(5, 2000, 1e-6)
x = opt.optimize(problem, problem.grad, [0.0] * 10, None)
```

Solving a travelling-salesman instance:

```python
from methopts.graph import Graph
from methopts.branch_and_cut import BranchAndCutSolver

g = Graph(4)
g.set_cost(0, 1, 1)
g.set_cost(1, 2, 1)
g.set_cost(2, 3, 1)
g.set_cost(3, 0, 1)
g.set_cost(0, 2, 2)
g.set_cost(1, 3, 2)

solution = BranchAndCutSolver(g, 1000).solve()
print(solution.length, solution.tour)   # 4.0 and a permutation of 0..3
```

## Command-line tools

`methopts-train-regression` fits a two-feature linear regression from a
tab-separated file. The file has one header line, then `x1  x2  y` rows. The
command uses learning rate 0.01, 1000 iterations and bounds [-10, 10]. It writes
the coefficients to `beta.txt` in the given directory, or to the given file
name if that name has an extension:

```
methopts-train-regression dataset.tsv output/
```

Two commands run L-BFGS from zero on an N-dimensional paired Rosenbrock
function. `methopts-lbfgs-history` prints `iter,loss,grad_norm` rows for 30
iterations. `methopts-lbfgs-solution` prints the point reached within 500
iterations with tolerance 1e-6:

```
methopts-lbfgs-history 100
methopts-lbfgs-solution 100
```

`methopts-tsp-demo` builds a random complete graph with edge costs in
[1, 10). It takes the number of cities and a seed, which default to 5 and 113.
It solves the graph and prints the instance and the tour as JSON with the keys
`N`, `seed`, `cost`, `tour` and `length`:

```
methopts-tsp-demo
methopts-tsp-demo 8 42
```

## What is not included

The only first-order methods are plain projected gradient descent and L-BFGS.
There are no momentum or Adam optimisers, and no command that compares
convergence across learning rates. Newton's method is a library class only and
has no command of its own. Nothing in the package draws plots: the commands
print text or JSON, or write plain files.