"""Ephemeris for physical observations of Jupiter.

All angles are returned in radians.
"""

from __future__ import annotations

import math

from meeus.julian import J2000

_P = math.pi / 180
_TWO_PI = 2 * math.pi


def physical2(jde: float) -> tuple[float, float, float, float]:
    """Return (DS, DE, ω1, ω2) for Jupiter at jde by the low accuracy method.

    DS and DE are the planetocentric declinations of the Sun and Earth;
    ω1 and ω2 the System I and II longitudes of the central meridian.
    """
    d = jde - J2000
    v = 172.74 * _P + 0.00111588 * _P * d
    m = 357.529 * _P + 0.9856003 * _P * d
    sv = math.sin(v)
    n = 20.02 * _P + 0.0830853 * _P * d + 0.329 * _P * sv
    j = 66.115 * _P + 0.9025179 * _P * d - 0.329 * _P * sv
    a = 1.915 * _P * math.sin(m) + 0.02 * _P * math.sin(2 * m)
    b = 5.555 * _P * math.sin(n) + 0.168 * _P * math.sin(2 * n)
    k = j + a - b
    r_earth = 1.00014 - 0.01671 * math.cos(m) - 0.00014 * math.cos(2 * m)
    r_jup = 5.20872 - 0.25208 * math.cos(n) - 0.00611 * math.cos(2 * n)
    sk, ck = math.sin(k), math.cos(k)
    delta = math.sqrt(r_jup * r_jup + r_earth * r_earth - 2 * r_jup * r_earth * ck)
    psi = math.asin(r_earth / delta * sk)
    dd = d - delta / 173
    w1 = 210.98 * _P + 877.8169088 * _P * dd + psi - b
    w2 = 187.23 * _P + 870.1869088 * _P * dd + psi - b
    c = math.sin(psi / 2) ** 2
    if sk > 0:
        c = -c
    w1 = (w1 + c) % _TWO_PI
    w2 = (w2 + c) % _TWO_PI
    lam = 34.35 * _P + 0.083091 * _P * d + 0.329 * _P * sv + b
    ds = 3.12 * _P * math.sin(lam + 42.8 * _P)
    de = (
        ds
        - 2.22 * _P * math.sin(psi) * math.cos(lam + 22 * _P)
        - 1.3 * _P * (r_jup - delta) / delta * math.sin(lam - 100.5 * _P)
    )
    return ds, de, w1, w2