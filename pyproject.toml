[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "methopts"
version = "0.1.0"
description = "Optimisation methods: simplex, projected gradient descent, Newton, L-BFGS and branch-and-cut TSP"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "optimization",
    "simplex",
    "linear-programming",
    "gradient-descent",
    "linear-regression",
    "newton",
    "lbfgs",
    "tsp",
    "branch-and-cut",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
methopts-train-regression = "methopts.train_regression:main"
methopts-lbfgs-history = "methopts.lbfgs_demo:main_history"
methopts-lbfgs-solution = "methopts.lbfgs_demo:main_solution"
methopts-tsp-demo = "methopts.tsp_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["methopts"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
