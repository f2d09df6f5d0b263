import pytest

from methopts.constrained_sgd import ConstrainedSGD


def test_quadratic_constrained():
    f = lambda v: (v[0] - 1.0) ** 2 + (v[1] + 2.0) ** 2
    grad = lambda v: [2 * (v[0] - 1.0), 2 * (v[1] + 2.0)]
    solver = ConstrainedSGD(0.1, 1000, [0.0, -1.0], [2.0, 2.0])
    result = solver.optimize(f, grad, [5.0, 5.0])
    assert result[0] == pytest.approx(1.0, abs=1e-3)
    assert result[1] == pytest.approx(-1.0, abs=1e-3)


def test_quadratic_unconstrained():
    f = lambda v: (v[0] - 3.0) ** 2 + (v[1] - 4.0) ** 2
    grad = lambda v: [2 * (v[0] - 3.0), 2 * (v[1] - 4.0)]
    solver = ConstrainedSGD(0.05, 500, [-10.0, -10.0], [10.0, 10.0])
    result = solver.optimize(f, grad, [0.0, 0.0])
    assert result[0] == pytest.approx(3.0, abs=1e-3)
    assert result[1] == pytest.approx(4.0, abs=1e-3)


def test_starting_point_inside_bounds():
    f = lambda v: v[0] ** 2 + v[1] ** 2
    grad = lambda v: [2 * v[0], 2 * v[1]]
    solver = ConstrainedSGD(0.1, 100, [1.0, 1.0], [5.0, 5.0])
    result = solver.optimize(f, grad, [2.0, 3.0])
    assert result[0] == pytest.approx(1.0, abs=1e-3)
    assert result[1] == pytest.approx(1.0, abs=1e-3)


def test_start_outside_bounds():
    f = lambda v: (v[0] - 2.0) ** 2 + (v[1] - 3.0) ** 2
    grad = lambda v: [2 * (v[0] - 2.0), 2 * (v[1] - 3.0)]
    solver = ConstrainedSGD(0.1, 500, [0.0, 0.0], [4.0, 4.0])
    result = solver.optimize(f, grad, [10.0, -5.0])
    assert result[0] == pytest.approx(2.0, abs=1e-2)
    assert result[1] == pytest.approx(3.0, abs=1e-2)


def test_minimum_outside_bounds():
    f = lambda v: (v[0] + 5.0) ** 2 + (v[1] + 5.0) ** 2
    grad = lambda v: [2 * (v[0] + 5.0), 2 * (v[1] + 5.0)]
    solver = ConstrainedSGD(0.05, 1000, [-2.0, -2.0], [2.0, 2.0])
    result = solver.optimize(f, grad, [0.0, 0.0])
    assert result[0] == pytest.approx(-2.0, abs=1e-3)
    assert result[1] == pytest.approx(-2.0, abs=1e-3)


def test_project_clamps_each_coordinate():
    solver = ConstrainedSGD(0.1, 10, [0.0, -1.0, 2.0], [1.0, 1.0, 3.0])
    assert solver.project([-5.0, 0.5, 7.0]) == [0.0, 0.5, 3.0]


def test_zero_iterations_returns_start_unprojected():
    solver = ConstrainedSGD(0.1, 0, [0.0], [1.0])
    assert solver.optimize(lambda v: 0.0, lambda v: [1.0], [5.0]) == [5.0]


def test_optimize_does_not_mutate_start():
    x0 = [3.0, 3.0]
    solver = ConstrainedSGD(0.1, 5, [-1.0, -1.0], [1.0, 1.0])
    solver.optimize(lambda v: 0.0, lambda v: [1.0, 1.0], x0)
    assert x0 == [3.0, 3.0]