"""Passages of the Moon through the nodes of its orbit."""

from __future__ import annotations

import math

from meeus.interp import horner

_P = math.pi / 180
_CK = 1 / 1342.23


def ascending(year: float) -> float:
    """Return the jde of the ascending node passage nearest decimal year."""
    return _node(year, 0.0)


def descending(year: float) -> float:
    """Return the jde of the descending node passage nearest decimal year."""
    return _node(year, 0.5)


def _node(y: float, h: float) -> float:
    k = (y - 2000.05) * 13.4223  # (51.1) p. 365
    k = math.floor(k - h + 0.5) + h  # snap to half orbit
    t = k * _CK
    d = horner(t, 183.638 * _P, 331.73735682 * _P / _CK,
               0.0014852 * _P, 0.00000209 * _P, -0.00000001 * _P)
    m = horner(t, 17.4006 * _P, 26.8203725 * _P / _CK,
               0.0001186 * _P, 0.00000006 * _P)
    mp = horner(t, 38.3776 * _P, 355.52747313 * _P / _CK,
                0.0123499 * _P, 0.000014627 * _P, -0.000000069 * _P)
    omega = horner(t, 123.9767 * _P, -1.44098956 * _P / _CK,
                   0.0020608 * _P, 0.00000214 * _P, -0.000000016 * _P)
    v = horner(t, 299.75 * _P, 132.85 * _P, -0.009173 * _P)
    p = omega + 272.75 * _P - 2.3 * _P * t
    e = horner(t, 1, -0.002516, -0.0000074)
    return (
        horner(t, 2451565.1619, 27.212220817 / _CK,
               0.0002762, 0.000000021, -0.000000000088)
        - 0.4721 * math.sin(mp)
        - 0.1649 * math.sin(2 * d)
        - 0.0868 * math.sin(2 * d - mp)
        + 0.0084 * math.sin(2 * d + mp)
        - 0.0083 * math.sin(2 * d - m) * e
        - 0.0039 * math.sin(2 * d - m - mp) * e
        + 0.0034 * math.sin(2 * mp)
        - 0.0031 * math.sin(2 * (d - mp))
        + 0.003 * math.sin(2 * d + m) * e
        + 0.0028 * math.sin(m - mp) * e
        + 0.0026 * math.sin(m) * e
        + 0.0025 * math.sin(4 * d)
        + 0.0024 * math.sin(d)
        + 0.0022 * math.sin(m + mp) * e
        + 0.0017 * math.sin(omega)
        + 0.0014 * math.sin(4 * d - mp)
        + 0.0005 * math.sin(2 * d + m - mp) * e
        + 0.0004 * math.sin(2 * d - m + mp) * e
        - 0.0003 * math.sin(2 * (d - m)) * e
        + 0.0003 * math.sin(4 * d - m) * e
        + 0.0003 * math.sin(v)
        + 0.0003 * math.sin(p)
    )