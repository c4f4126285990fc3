"""The equation of Kepler.

Angles are in radians.
"""

from __future__ import annotations

import math

from meeus.iterate import decimal_places


def true_anomaly(E: float, e: float) -> float:
    """Return true anomaly for eccentric anomaly E and eccentricity e, (30.1)."""
    return 2 * math.atan(math.sqrt((1 + e) / (1 - e)) * math.tan(E * 0.5))


def radius(E: float, e: float, a: float) -> float:
    """Return radius vector for eccentric anomaly E, in the unit of axis a, (30.2)."""
    return a * (1 - e * math.cos(E))


def kepler1(e: float, M: float, places: int) -> float:
    """Solve Kepler's equation by iterating E1 = M + e sin E0.

    Raises IterationError when it fails to converge.
    """
    def better(e0: float) -> float:
        return M + e * math.sin(e0)  # (30.5) p. 195

    return decimal_places(better, M, places, places * 5)


def kepler2(e: float, M: float, places: int) -> float:
    """Solve Kepler's equation by Newton's method, formula (30.7).

    Raises IterationError when it fails to converge.
    """
    def better(e0: float) -> float:
        return e0 + (M + e * math.sin(e0) - e0) / (1 - e * math.cos(e0))

    return decimal_places(better, M, places, places)


def kepler2a(e: float, M: float, places: int) -> float:
    """Solve Kepler's equation as kepler2, limiting steps by the method of Leingärtner."""
    def better(e0: float) -> float:
        step = (M + e * math.sin(e0) - e0) / (1 - e * math.cos(e0))
        return e0 + math.asin(math.sin(step))

    return decimal_places(better, M, places, places * 5)


def kepler2b(e: float, M: float, places: int) -> float:
    """Solve Kepler's equation as kepler2, limiting steps by the method of Steele."""
    def better(e0: float) -> float:
        step = (M + e * math.sin(e0) - e0) / (1 - e * math.cos(e0))
        return e0 + min(max(step, -0.5), 0.5)

    return decimal_places(better, M, places, places)


def kepler3(e: float, M: float) -> float:
    """Solve Kepler's equation by binary search."""
    mr = M % (2 * math.pi)
    negative = mr > math.pi
    if negative:
        mr = 2 * math.pi - mr
    e0 = math.pi * 0.5
    d = math.pi * 0.25
    for _ in range(53):
        m1 = e0 - e * math.sin(e0)
        if mr - m1 < 0:
            e0 -= d
        else:
            e0 += d
        d *= 0.5
    return -e0 if negative else e0


def kepler4(e: float, M: float) -> float:
    """Return an approximate solution of Kepler's equation, valid for small e, (30.8)."""
    return math.atan2(math.sin(M), math.cos(M) - e)