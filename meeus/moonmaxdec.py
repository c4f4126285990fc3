"""Maximum declinations of the Moon.

Declinations are returned in radians.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from meeus.interp import horner

_P = math.pi / 180
_CK = 1 / 1336.86


@dataclass(frozen=True)
class _Coefficients:
    d: float
    m: float
    mp: float
    f: float
    jde: float
    sign: float
    time: tuple[float, ...]
    dec: tuple[float, ...]


def north(year: float) -> tuple[float, float]:
    """Return (jde, declination) of the maximum northern declination nearest decimal year."""
    return _extreme(year, _NORTH)


def south(year: float) -> tuple[float, float]:
    """Return (jde, declination) of the maximum southern declination nearest decimal year."""
    return _extreme(year, _SOUTH)


def _extreme(y: float, c: _Coefficients) -> tuple[float, float]:
    k = math.floor((y - 2000.03) * 13.3686 + 0.5)  # (52.1) p. 367
    t = k * _CK
    d = horner(t, c.d, 333.0705546 * _P / _CK, -0.0004214 * _P, 0.00000011 * _P)
    m = horner(t, c.m, 26.9281592 * _P / _CK, -0.0000355 * _P, -0.0000001 * _P)
    mp = horner(t, c.mp, 356.9562794 * _P / _CK, 0.0103066 * _P, 0.00001251 * _P)
    f = horner(t, c.f, 1.4467807 * _P / _CK, -0.002069 * _P, -0.00000215 * _P)
    e = horner(t, 1, -0.002516, -0.0000074)
    sin, cos = math.sin, math.cos
    time_terms = (
        cos(f),
        sin(mp),
        sin(2 * f),
        sin(2 * d - mp),
        cos(mp - f),
        cos(mp + f),
        sin(2 * d),
        sin(m) * e,
        cos(3 * f),
        sin(mp + 2 * f),
        cos(2 * d - f),
        cos(2 * d - mp - f),
        cos(2 * d - mp + f),
        cos(2 * d + f),
        sin(2 * mp),
        sin(mp - 2 * f),
        cos(2 * mp - f),
        sin(mp + 3 * f),
        sin(2 * d - m - mp) * e,
        cos(mp - 2 * f),
        sin(2 * (d - mp)),
        sin(f),
        sin(2 * d + mp),
        cos(mp + 2 * f),
        sin(2 * d - m) * e,
        sin(mp + f),
        sin(m - mp) * e,
        sin(mp - 3 * f),
        sin(2 * mp + f),
        cos(2 * (d - mp) - f),
        sin(3 * f),
        cos(mp + 3 * f),
        cos(2 * mp),
        cos(2 * d - mp),
        cos(2 * d + mp + f),
        cos(mp),
        sin(3 * mp + f),
        sin(2 * d - mp + f),
        cos(2 * (d - mp)),
        cos(d + f),
        sin(m + mp) * e,
        sin(2 * (d - f)),
        cos(2 * mp + f),
        cos(3 * mp + f),
    )
    dec_terms = (
        sin(f),
        cos(2 * f),
        sin(2 * d - f),
        sin(3 * f),
        cos(2 * (d - f)),
        cos(2 * d),
        sin(mp - f),
        sin(mp + 2 * f),
        cos(f),
        sin(2 * d + m - f) * e,
        sin(mp + 3 * f),
        sin(d + f),
        sin(mp - 2 * f),
        sin(2 * d - m - f) * e,
        sin(2 * d - mp - f),
        cos(mp + f),
        cos(mp + 2 * f),
        cos(2 * mp + f),
        cos(mp - 3 * f),
        cos(2 * mp - f),
        cos(mp - 2 * f),
        sin(2 * mp),
        sin(3 * mp + f),
        cos(2 * d + m - f) * e,
        cos(mp - f),
        cos(3 * f),
        sin(2 * d + f),
        cos(mp + 3 * f),
        cos(d + f),
        sin(2 * mp - f),
        cos(3 * mp + f),
        cos(2 * (d + mp) + f),
        sin(2 * (d - mp) - f),
        cos(2 * mp),
        cos(mp),
        sin(2 * f),
        sin(mp + f),
    )
    jde = horner(t, c.jde, 27.321582247 / _CK, 0.000119804, -0.000000141) + sum(
        k * v for k, v in zip(c.time, time_terms)
    )
    dec = 23.6961 * _P - 0.013004 * _P * t + sum(
        k * _P * v for k, v in zip(c.dec, dec_terms)
    )
    return jde, dec * c.sign


_NORTH = _Coefficients(
    d=152.2029 * _P,
    m=14.8591 * _P,
    mp=4.6881 * _P,
    f=325.8867 * _P,
    jde=2451562.5897,
    sign=1.0,
    time=(
        0.8975, -0.4726, -0.1030, -0.0976, -0.0462, -0.0461, -0.0438, 0.0162,
        -0.0157, 0.0145, 0.0136, -0.0095, -0.0091, -0.0089, 0.0075, -0.0068,
        0.0061, -0.0047, -0.0043, -0.004, -0.0037, 0.0031, 0.0030, -0.0029,
        -0.0029, -0.0027, 0.0024, -0.0021, 0.0019, 0.0018, 0.0018, 0.0017,
        0.0017, -0.0014, 0.0013, 0.0013, 0.0012, 0.0011, -0.0011, 0.001,
        0.001, -0.0009, 0.0007, -0.0007,
    ),
    dec=(
        5.1093, 0.2658, 0.1448, -0.0322, 0.0133, 0.0125, -0.0124, -0.0101,
        0.0097, -0.0087, 0.0074, 0.0067, 0.0063, 0.0060, -0.0057, -0.0056,
        0.0052, 0.0041, -0.004, 0.0038, -0.0034, -0.0029, 0.0029, -0.0028,
        -0.0028, -0.0023, -0.0021, 0.0019, 0.0018, 0.0017, 0.0015, 0.0014,
        -0.0012, -0.0012, -0.001, -0.001, 0.0006,
    ),
)

_SOUTH = _Coefficients(
    d=345.6676 * _P,
    m=1.3951 * _P,
    mp=186.21 * _P,
    f=145.1633 * _P,
    jde=2451548.9289,
    sign=-1.0,
    time=(
        -0.8975, -0.4726, -0.1030, -0.0976, 0.0541, 0.0516, -0.0438, 0.0112,
        0.0157, 0.0023, -0.0136, 0.011, 0.0091, 0.0089, 0.0075, -0.003,
        -0.0061, -0.0047, -0.0043, 0.004, -0.0037, -0.0031, 0.0030, 0.0029,
        -0.0029, -0.0027, 0.0024, -0.0021, -0.0019, -0.0006, -0.0018, -0.0017,
        0.0017, 0.0014, -0.0013, -0.0013, 0.0012, 0.0011, 0.0011, 0.001,
        0.001, -0.0009, -0.0007, -0.0007,
    ),
    dec=(
        -5.1093, 0.2658, -0.1448, 0.0322, 0.0133, 0.0125, -0.0015, 0.0101,
        -0.0097, 0.0087, 0.0074, 0.0067, -0.0063, -0.0060, 0.0057, -0.0056,
        -0.0052, -0.0041, -0.004, -0.0038, 0.0034, -0.0029, 0.0029, 0.0028,
        -0.0028, 0.0023, 0.0021, 0.0019, 0.0018, -0.0017, 0.0015, 0.0014,
        0.0012, -0.0012, 0.001, -0.001, 0.0037,
    ),
)