"""Interpolation from tables of equidistant or arbitrary abscissae.

Len3 and Len5 interpolate from tables of three or five rows whose x values
are equally spaced.  Only the first and last x values are given; interior
x values are implicit.  All y values must be given.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Sequence


class InterpolationError(ValueError):
    """Base class for errors raised by the interpolation routines."""


class OutOfRangeError(InterpolationError):
    """An interpolating factor n or argument x lies outside the table."""


class NoExtremumError(InterpolationError):
    """The table has no extremum."""


class ExtremumOutsideError(InterpolationError):
    """The extremum falls outside of the table."""


class ZeroOutsideError(InterpolationError):
    """The zero falls outside of the table."""


class NoConvergenceError(InterpolationError):
    """An iteration failed to converge."""


_N_OUT_OF_RANGE = "Interpolating factor n must be in range -1 to 1"
_X_OUT_OF_RANGE = "Argument x outside of range x1 to x3 (or x5)"


def horner(x: float, *args: float) -> float:
    """Evaluate the polynomial with coefficients ``args`` (constant first) at x."""
    result = 0.0
    for c in reversed(args):
        result = result * x + c
    return result


def _iterate(n0: float, f: Callable[[float], float]) -> float:
    """Iterate f from n0 to full precision, raising NoConvergenceError on failure."""
    for _ in range(50):
        try:
            n1 = f(n0)
        except (ZeroDivisionError, OverflowError):
            break
        if math.isinf(n1) or math.isnan(n1):
            break
        if n0 != 0 and abs((n1 - n0) / n0) < 1e-15:
            return n1
        n0 = n1
    raise NoConvergenceError("Failure to converge")


class Len3:
    """Second difference interpolation from a table of three rows."""

    def __init__(self, x1: float, x3: float, y: Sequence[float]) -> None:
        if len(y) != 3:
            raise InterpolationError("Argument y must be length 3")
        if x3 == x1:
            raise InterpolationError("Argument x3 (or x5) cannot equal x1")
        self.x1 = x1
        self.x3 = x3
        self.y = tuple(float(v) for v in y)
        # differences, (3.1) p. 23
        self._a = self.y[1] - self.y[0]
        self._b = self.y[2] - self.y[1]
        self._c = self._b - self._a
        self._ab_sum = self._a + self._b
        self._x_sum = x3 + x1
        self._x_diff = x3 - x1

    @classmethod
    def for_interpolate_x(
        cls, x: float, x1: float, xn: float, y: Sequence[float]
    ) -> "Len3":
        """Build a Len3 from the three rows of a larger table best suited to x.

        x1 and xn are the x values of the first and last y values of the table.
        """
        if len(y) > 3:
            interval = (xn - x1) / (len(y) - 1)
            if interval == 0:
                raise InterpolationError("Argument x3 (or x5) cannot equal x1")
            nearest = int((x - x1) / interval + 0.5)
            nearest = min(max(nearest, 1), len(y) - 2)
            y = y[nearest - 1 : nearest + 2]
            xn = x1 + (nearest + 1) * interval
            x1 = x1 + (nearest - 1) * interval
        return cls(x1, xn, y)

    def _n(self, x: float) -> float:
        return (2 * x - self._x_sum) / self._x_diff

    def interpolate_x(self, x: float) -> float:
        """Interpolate for a given x value."""
        return self.interpolate_n(self._n(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, which must lie within x1 to x3."""
        try:
            return self.interpolate_n_strict(self._n(x))
        except OutOfRangeError:
            raise OutOfRangeError(_X_OUT_OF_RANGE) from None

    def interpolate_n(self, n: float) -> float:
        """Interpolate for interpolating factor n, formula (3.3)."""
        return self.y[1] + n * 0.5 * (self._ab_sum + n * self._c)

    def interpolate_n_strict(self, n: float) -> float:
        """Interpolate for n, which must lie within -1 to 1."""
        if n < -1 or n > 1:
            raise OutOfRangeError(_N_OUT_OF_RANGE)
        return self.interpolate_n(n)

    def extremum(self) -> tuple[float, float]:
        """Return (x, y) at the extremum, which must lie within the table."""
        if self._c == 0:
            raise NoExtremumError("No extremum in table")
        n = self._ab_sum / (-2 * self._c)  # (3.5), p. 25
        if n < -1 or n > 1:
            raise ExtremumOutsideError("Extremum falls outside of table")
        x = 0.5 * (self._x_sum + self._x_diff * n)
        y = self.y[1] - (self._ab_sum * self._ab_sum) / (8 * self._c)  # (3.4)
        return x, y

    def zero(self, strong: bool) -> float:
        """Return the x value where the quadratic through the table is zero.

        strong selects the more robust estimation formula (3.7) over (3.6).
        """
        y2, ab, c = self.y[1], self._ab_sum, self._c
        if strong:
            def f(n0: float) -> float:
                return n0 - (2 * y2 + n0 * (ab + c * n0)) / (ab + 2 * c * n0)
        else:
            def f(n0: float) -> float:
                return -2 * y2 / (ab + c * n0)
        n0 = _iterate(0.0, f)
        if n0 > 1 or n0 < -1:
            raise ZeroOutsideError("Zero falls outside of table")
        return 0.5 * (self._x_sum + self._x_diff * n0)


def len4_half(y: Sequence[float]) -> float:
    """Interpolate the centre value of a table of four rows, formula (3.12)."""
    if len(y) != 4:
        raise InterpolationError("Argument y must be length 4")
    return (9 * (y[1] + y[2]) - y[0] - y[3]) / 16


class Len5:
    """Fourth difference interpolation from a table of five rows."""

    def __init__(self, x1: float, x5: float, y: Sequence[float]) -> None:
        if len(y) != 5:
            raise InterpolationError("Argument y must be length 5")
        if x5 == x1:
            raise InterpolationError("Argument x3 (or x5) cannot equal x1")
        self.x1 = x1
        self.x5 = x5
        self.y = tuple(float(v) for v in y)
        y1, y2, y3, y4, y5 = self.y
        self._y3 = y3
        self._a = y2 - y1
        self._b = y3 - y2
        self._c = y4 - y3
        self._d = y5 - y4
        self._e = self._b - self._a
        self._f = self._c - self._b
        self._g = self._d - self._c
        self._h = self._f - self._e
        self._j = self._g - self._f
        self._k = self._j - self._h
        self._x_sum = x5 + x1
        self._x_diff = x5 - x1
        # (3.8) p. 28
        self._coeff = (
            y3,
            (self._b + self._c) / 2 - (self._h + self._j) / 12,
            self._f / 2 - self._k / 24,
            (self._h + self._j) / 12,
            self._k / 24,
        )

    def _n(self, x: float) -> float:
        return (4 * x - 2 * self._x_sum) / self._x_diff

    def interpolate_x(self, x: float) -> float:
        """Interpolate for a given x value."""
        return self.interpolate_n(self._n(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, restricted to the central half of the table."""
        try:
            return self.interpolate_n_strict(self._n(x))
        except OutOfRangeError:
            raise OutOfRangeError(_X_OUT_OF_RANGE) from None

    def interpolate_n(self, n: float) -> float:
        """Interpolate for interpolating factor n (x - x3 in table intervals)."""
        return horner(n, *self._coeff)

    def interpolate_n_strict(self, n: float) -> float:
        """Interpolate for n, which must lie within -1 to 1."""
        if n < -1 or n > 1:
            raise OutOfRangeError(_N_OUT_OF_RANGE)
        return horner(n, *self._coeff)

    def extremum(self) -> tuple[float, float]:
        """Return (x, y) at the extremum, which must lie within the table."""
        # (3.9) p. 29
        n_coeff = (
            6 * (self._b + self._c) - self._h - self._j,
            0.0,
            3 * (self._h + self._k),
            2 * self._k,
        )
        den = self._k - 12 * self._f
        if den == 0:
            raise ExtremumOutsideError("Extremum falls outside of table")
        n0 = _iterate(0.0, lambda n: horner(n, *n_coeff) / den)
        if n0 < -2 or n0 > 2:
            raise ExtremumOutsideError("Extremum falls outside of table")
        x = 0.5 * self._x_sum + 0.25 * self._x_diff * n0
        return x, horner(n0, *self._coeff)

    def zero(self, strong: bool) -> float:
        """Return the x value where the quartic through the table is zero.

        strong selects the more robust estimation formula (3.11) over (3.10).
        """
        if strong:
            m = self._k / 24
            n = (self._h + self._j) / 12
            p = self._f / 2 - m
            q = (self._b + self._c) / 2 - n
            num = (self._y3, q, p, n, m)
            den_coeff = (q, 2 * p, 3 * n, 4 * m)

            def f(n0: float) -> float:
                return n0 - horner(n0, *num) / horner(n0, *den_coeff)
        else:
            num = (
                -24 * self._y3,
                0.0,
                self._k - 12 * self._f,
                -2 * (self._h + self._j),
                -self._k,
            )
            den = 12 * (self._b + self._c) - 2 * (self._h + self._j)

            def f(n0: float) -> float:
                return horner(n0, *num) / den
        n0 = _iterate(0.0, f)
        if n0 > 2 or n0 < -2:
            raise ZeroOutsideError("Zero falls outside of table")
        return 0.5 * self._x_sum + 0.25 * self._x_diff * n0


def lagrange(x: float, table: Iterable[tuple[float, float]]) -> float:
    """Interpolate y at x from (x, y) rows with distinct, arbitrary abscissae."""
    rows = list(table)
    total = 0.0
    for i, (xi, yi) in enumerate(rows):
        prod = 1.0
        for j, (xj, _) in enumerate(rows):
            if i != j:
                prod *= (x - xj) / (xi - xj)
        total += yi * prod
    return total


def lagrange_poly(table: Iterable[tuple[float, float]]) -> list[float]:
    """Return coefficients (constant first) of the interpolating polynomial.

    The polynomial has degree n-1 for a table of n rows and can be evaluated
    with horner().
    """
    rows = list(table)
    result = [0.0] * len(rows)
    for i, (xi, yi) in enumerate(rows):
        poly = [1.0]
        den = 1.0
        for j, (xj, _) in enumerate(rows):
            if i != j:
                poly = [a - xj * b for a, b in zip([0.0] + poly, poly + [0.0])]
                den *= xi - xj
        result = [s + yi * p / den for s, p in zip(result, poly)]
    return result