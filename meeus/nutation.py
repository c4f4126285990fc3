"""Nutation and the obliquity of the ecliptic.

All angles are returned in radians.
"""

from __future__ import annotations

import math

from meeus.interp import horner
from meeus.julian import J2000, j2000_century

_DEG = math.pi / 180
_SEC = _DEG / 3600

# 23°26′21.448″ in arc seconds
_OBLIQUITY_J2000_SEC = (23 * 60 + 26) * 60 + 21.448

# Table 22.A: multiples of D, M, M′, F, Ω, then coefficients of sine
# (constant, T) and cosine (constant, T) in units of 0.0001″.
_TABLE_22A = (
    (0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9),
    (-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1),
    (0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5),
    (0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5),
    (0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1),
    (0, 0, 1, 0, 0, 712, 0.1, -7, 0),
    (-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6),
    (0, 0, 0, 2, 1, -386, -0.4, 200, 0),
    (0, 0, 1, 2, 2, -301, 0, 129, -0.1),
    (-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3),
    (-2, 0, 1, 0, 0, -158, 0, 0, 0),
    (-2, 0, 0, 2, 1, 129, 0.1, -70, 0),
    (0, 0, -1, 2, 2, 123, 0, -53, 0),
    (2, 0, 0, 0, 0, 63, 0, 0, 0),
    (0, 0, 1, 0, 1, 63, 0.1, -33, 0),
    (2, 0, -1, 2, 2, -59, 0, 26, 0),
    (0, 0, -1, 0, 1, -58, -0.1, 32, 0),
    (0, 0, 1, 2, 1, -51, 0, 27, 0),
    (-2, 0, 2, 0, 0, 48, 0, 0, 0),
    (0, 0, -2, 2, 1, 46, 0, -24, 0),
    (2, 0, 0, 2, 2, -38, 0, 16, 0),
    (0, 0, 2, 2, 2, -31, 0, 13, 0),
    (0, 0, 2, 0, 0, 29, 0, 0, 0),
    (-2, 0, 1, 2, 2, 29, 0, -12, 0),
    (0, 0, 0, 2, 0, 26, 0, 0, 0),
    (-2, 0, 0, 2, 0, -22, 0, 0, 0),
    (0, 0, -1, 2, 1, 21, 0, -10, 0),
    (0, 2, 0, 0, 0, 17, -0.1, 0, 0),
    (2, 0, -1, 0, 1, 16, 0, -8, 0),
    (-2, 2, 0, 2, 2, -16, 0.1, 7, 0),
    (0, 1, 0, 0, 1, -15, 0, 9, 0),
    (-2, 0, 1, 0, 1, -13, 0, 7, 0),
    (0, -1, 0, 0, 1, -12, 0, 6, 0),
    (0, 0, 2, -2, 0, 11, 0, 0, 0),
    (2, 0, -1, 2, 1, -10, 0, 5, 0),
    (2, 0, 1, 2, 2, -8, 0, 3, 0),
    (0, 1, 0, 2, 2, 7, 0, -3, 0),
    (-2, 1, 1, 0, 0, -7, 0, 0, 0),
    (0, -1, 0, 2, 2, -7, 0, 3, 0),
    (2, 0, 0, 2, 1, -7, 0, 3, 0),
    (2, 0, 1, 0, 0, 6, 0, 0, 0),
    (-2, 0, 2, 2, 2, 6, 0, -3, 0),
    (-2, 0, 1, 2, 1, 6, 0, -3, 0),
    (2, 0, -2, 0, 1, -6, 0, 3, 0),
    (2, 0, 0, 0, 1, -6, 0, 3, 0),
    (0, -1, 1, 0, 0, 5, 0, 0, 0),
    (-2, -1, 0, 2, 1, -5, 0, 3, 0),
    (-2, 0, 0, 0, 1, -5, 0, 3, 0),
    (0, 0, 2, 2, 1, -5, 0, 3, 0),
    (-2, 0, 2, 0, 1, 4, 0, 0, 0),
    (-2, 1, 0, 2, 1, 4, 0, 0, 0),
    (0, 0, 1, -2, 0, 4, 0, 0, 0),
    (-1, 0, 1, 0, 0, -4, 0, 0, 0),
    (-2, 1, 0, 0, 0, -4, 0, 0, 0),
    (1, 0, 0, 0, 0, -4, 0, 0, 0),
    (0, 0, 1, 2, 0, 3, 0, 0, 0),
    (0, 0, -2, 2, 2, -3, 0, 0, 0),
    (-1, -1, 1, 0, 0, -3, 0, 0, 0),
    (0, 1, 1, 0, 0, -3, 0, 0, 0),
    (0, -1, 1, 2, 2, -3, 0, 0, 0),
    (2, -1, -1, 2, 2, -3, 0, 0, 0),
    (0, 0, 3, 2, 2, -3, 0, 0, 0),
    (2, -1, 0, 2, 2, -3, 0, 0, 0),
)


def nutation(jde: float) -> tuple[float, float]:
    """Return (nutation in longitude, nutation in obliquity) for jde.

    IAU 1980 theory, terms smaller than 0.0003″ neglected.
    """
    t = j2000_century(jde)
    d = horner(t, 297.85036, 445267.11148, -0.0019142, 1.0 / 189474) * _DEG
    m = horner(t, 357.52772, 35999.050340, -0.0001603, -1.0 / 300000) * _DEG
    n = horner(t, 134.96298, 477198.867398, 0.0086972, 1.0 / 5620) * _DEG
    f = horner(t, 93.27191, 483202.017538, -0.0036825, 1.0 / 327270) * _DEG
    omega = horner(t, 125.04452, -1934.136261, 0.0020708, 1.0 / 450000) * _DEG
    dpsi = 0.0
    deps = 0.0
    # sum in reverse order to accumulate smaller terms first
    for cd, cm, cn, cf, co, s0, s1, c0, c1 in reversed(_TABLE_22A):
        arg = cd * d + cm * m + cn * n + cf * f + co * omega
        dpsi += math.sin(arg) * (s0 + s1 * t)
        deps += math.cos(arg) * (c0 + c1 * t)
    return dpsi * 0.0001 * _SEC, deps * 0.0001 * _SEC


def approx_nutation(jde: float) -> tuple[float, float]:
    """Return a fast approximation of (Δψ, Δε); accurate to 0.5″ and 0.1″."""
    t = (jde - J2000) / 36525
    omega = (125.04452 - 1934.136261 * t) * _DEG
    lon_sun = (280.4665 + 36000.7698 * t) * _DEG
    lon_moon = (218.3165 + 481267.8813 * t) * _DEG
    dpsi = (
        -17.2 * math.sin(omega)
        - 1.32 * math.sin(2 * lon_sun)
        - 0.23 * math.sin(2 * lon_moon)
        + 0.21 * math.sin(2 * omega)
    )
    deps = (
        9.2 * math.cos(omega)
        + 0.57 * math.cos(2 * lon_sun)
        + 0.1 * math.cos(2 * lon_moon)
        - 0.09 * math.cos(2 * omega)
    )
    return dpsi * _SEC, deps * _SEC


def mean_obliquity(jde: float) -> float:
    """Return mean obliquity of the ecliptic by the IAU 1980 polynomial (22.2)."""
    return horner(
        j2000_century(jde), _OBLIQUITY_J2000_SEC, -46.815, -0.00059, 0.001813
    ) * _SEC


def mean_obliquity_laskar(jde: float) -> float:
    """Return mean obliquity of the ecliptic by the Laskar 1986 polynomial (22.3)."""
    return horner(
        j2000_century(jde) * 0.01,
        _OBLIQUITY_J2000_SEC,
        -4680.93,
        -1.55,
        1999.25,
        -51.38,
        -249.67,
        -39.05,
        7.12,
        27.87,
        5.79,
        2.45,
    ) * _SEC


def nutation_in_ra(jde: float) -> float:
    """Return the nutation in right ascension (equation of the equinoxes)."""
    dpsi, deps = nutation(jde)
    eps0 = mean_obliquity(jde)
    return dpsi * math.cos(eps0 + deps)