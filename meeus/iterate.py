"""Iteration helpers: fixed decimal places, full precision, binary search."""

from __future__ import annotations

import math
from typing import Callable


class IterationError(ArithmeticError):
    """Iteration did not converge within the allowed number of steps."""


def decimal_places(
    better: Callable[[float], float], start: float, places: int, max_iterations: int
) -> float:
    """Iterate ``better`` from ``start`` until stable to ``places`` decimals."""
    d = 10.0 ** -places
    for _ in range(max_iterations):
        n = better(start)
        if abs(n - start) < d:
            return n
        start = n
    raise IterationError("Maximum iterations reached")


def full_precision(
    better: Callable[[float], float], start: float, max_iterations: int
) -> float:
    """Iterate ``better`` from ``start`` to 15 significant figures."""
    for _ in range(max_iterations):
        n = better(start)
        if n != 0 and not math.isinf(n) and abs((n - start) / n) < 1e-15:
            return n
        start = n
    raise IterationError("Maximum iterations reached")


def binary_root(f: Callable[[float], float], lower: float, upper: float) -> float:
    """Find a root of f between lower and upper by binary search.

    A root must exist between the bounds, otherwise the result is meaningless.
    """
    y_lower = f(lower)
    mid = 0.0
    for _ in range(52):
        mid = (lower + upper) / 2
        y_mid = f(mid)
        if y_mid == 0:
            break
        if (math.copysign(1.0, y_lower) < 0) == (math.copysign(1.0, y_mid) < 0):
            lower = mid
            y_lower = y_mid
        else:
            upper = mid
    return mid