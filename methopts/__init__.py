"""Numerical optimisation methods: simplex, projected gradient descent, Newton, L-BFGS and TSP branch-and-cut."""

__version__ = "0.1.0"