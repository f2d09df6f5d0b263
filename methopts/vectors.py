"""Element-wise helpers for dense vectors stored as lists of floats."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vec = list[float]


def add(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Return the element-wise sum of ``a`` and ``b``."""
    return [x + y for x, y in zip(a, b)]


def sub(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Return the element-wise difference ``a - b``."""
    return [x - y for x, y in zip(a, b)]


def scalar_mul(a: Sequence[float], c: float) -> Vec:
    """Return ``a`` scaled by ``c``."""
    return [x * c for x in a]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the inner product of ``a`` and ``b``."""
    return sum((x * y for x, y in zip(a, b)), 0.0)


def norm2(a: Sequence[float]) -> float:
    """Return the Euclidean norm of ``a``."""
    return math.sqrt(dot(a, a))