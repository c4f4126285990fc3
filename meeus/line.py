"""Bodies in a straight line (great circle) and related angles.

All angles are in radians.
"""

from __future__ import annotations

import math
from typing import Sequence

from meeus.interp import Len5


def time(
    r1: float,
    d1: float,
    r2: float,
    d2: float,
    r3: Sequence[float],
    d3: Sequence[float],
    t1: float,
    t5: float,
) -> float:
    """Return the time a moving body lies on the great circle through two fixed points.

    r3, d3 are a five row ephemeris of the moving body from time t1 to t5.
    """
    if len(r3) != 5 or len(d3) != 5:
        raise ValueError("r3, d3 must be length 5")
    t_d1, t_d2 = math.tan(d1), math.tan(d2)
    s12 = math.sin(r1 - r2)
    # (19.1) p. 121
    gc = [
        t_d1 * math.sin(r2 - r3i) + t_d2 * math.sin(r3i - r1) + math.tan(d3i) * s12
        for r3i, d3i in zip(r3, d3)
    ]
    return Len5(t1, t5, gc).zero(False)


def angle(r1: float, d1: float, r2: float, d2: float, r3: float, d3: float) -> float:
    """Return the angle between the great circles through points 1-2 and 2-3."""
    sd2, cd2 = math.sin(d2), math.cos(d2)
    sr21, cr21 = math.sin(r2 - r1), math.cos(r2 - r1)
    sr32, cr32 = math.sin(r3 - r2), math.cos(r3 - r2)
    c1 = math.atan2(sr21, cd2 * math.tan(d1) - sd2 * cr21)
    c2 = math.atan2(sr32, cd2 * math.tan(d3) - sd2 * cr32)
    return c1 + c2


def error(r1: float, d1: float, r2: float, d2: float, r0: float, d0: float) -> float:
    """Return the angular distance of point 0 from the line through points 1 and 2."""
    sr1, cr1 = math.sin(r1), math.cos(r1)
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sr2, cr2 = math.sin(r2), math.cos(r2)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    x1, x2 = cd1 * cr1, cd2 * cr2
    y1, y2 = cd1 * sr1, cd2 * sr2
    z1, z2 = sd1, sd2
    a = y1 * z2 - z1 * y2
    b = z1 * x2 - x1 * z2
    c = x1 * y2 - y1 * x2
    m = math.tan(r0)
    n = math.tan(d0) / math.cos(r0)
    return math.asin(
        (a + b * m + c * n)
        / (math.sqrt(a * a + b * b + c * c) * math.sqrt(1 + m * m + n * n))
    )


def angle_error(
    r1: float, d1: float, r2: float, d2: float, r3: float, d3: float
) -> tuple[float, float]:
    """Return (angle, error) for three points, by the method of B. Pessens."""
    sr1, cr1 = math.sin(r1), math.cos(r1)
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sr2, cr2 = math.sin(r2), math.cos(r2)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    sr3, cr3 = math.sin(r3), math.cos(r3)
    sd3, cd3 = math.sin(d3), math.cos(d3)
    a1, a2, a3 = cd1 * cr1, cd2 * cr2, cd3 * cr3
    b1, b2, b3 = cd1 * sr1, cd2 * sr2, cd3 * sr3
    c1, c2, c3 = sd1, sd2, sd3
    l1 = b1 * c2 - b2 * c1
    l2 = b2 * c3 - b3 * c2
    l3 = b1 * c3 - b3 * c1
    m1 = c1 * a2 - c2 * a1
    m2 = c2 * a3 - c3 * a2
    m3 = c1 * a3 - c3 * a1
    n1 = a1 * b2 - a2 * b1
    n2 = a2 * b3 - a3 * b2
    n3 = a1 * b3 - a3 * b1
    psi = math.acos(
        (l1 * l2 + m1 * m2 + n1 * n2)
        / (math.sqrt(l1 * l1 + m1 * m1 + n1 * n1) * math.sqrt(l2 * l2 + m2 * m2 + n2 * n2))
    )
    omega = math.asin(
        (a2 * l3 + b2 * m3 + c2 * n3)
        / (math.sqrt(a2 * a2 + b2 * b2 + c2 * c2) * math.sqrt(l3 * l3 + m3 * m3 + n3 * n3))
    )
    return psi, omega