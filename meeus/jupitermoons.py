"""Positions of the Galilean satellites of Jupiter.

Coordinates are apparent rectangular positions relative to Jupiter's
centre, in units of Jupiter's equatorial radius.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from meeus.julian import J2000

_P = math.pi / 180


@dataclass(frozen=True)
class XY:
    """Apparent position of a satellite in units of Jupiter radii."""

    x: float
    y: float


def positions(jde: float) -> tuple[XY, XY, XY, XY]:
    """Return the positions of satellites I to IV at jde (low accuracy method)."""
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
    lam = 34.35 * _P + 0.083091 * _P * d + 0.329 * _P * sv + b
    ds = 3.12 * _P * math.sin(lam + 42.8 * _P)
    de = (
        ds
        - 2.22 * _P * math.sin(psi) * math.cos(lam + 22 * _P)
        - 1.3 * _P * (r_jup - delta) / delta * math.sin(lam - 100.5 * _P)
    )
    dd = d - delta / 173
    u1 = 163.8069 * _P + 203.4058646 * _P * dd + psi - b
    u2 = 358.414 * _P + 101.2916335 * _P * dd + psi - b
    u3 = 5.7176 * _P + 50.234518 * _P * dd + psi - b
    u4 = 224.8092 * _P + 21.48798 * _P * dd + psi - b
    g = 331.18 * _P + 50.310482 * _P * dd
    h = 87.45 * _P + 21.569231 * _P * dd
    a12 = 2 * (u1 - u2)
    a23 = 2 * (u2 - u3)
    c1 = 0.473 * _P * math.sin(a12)
    c2 = 1.065 * _P * math.sin(a23)
    c3 = 0.165 * _P * math.sin(g)
    c4 = 0.843 * _P * math.sin(h)
    r1 = 5.9057 - 0.0244 * math.cos(a12)
    r2 = 9.3966 - 0.0882 * math.cos(a23)
    r3 = 14.9883 - 0.0216 * math.cos(g)
    r4 = 26.3627 - 0.1939 * math.cos(h)
    sde = math.sin(de)

    def xy(u: float, r: float) -> XY:
        return XY(r * math.sin(u), -r * math.cos(u) * sde)

    return xy(u1 + c1, r1), xy(u2 + c2, r2), xy(u3 + c3, r3), xy(u4 + c4, r4)