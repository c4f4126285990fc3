"""Passages of bodies through the nodes of their orbits.

Arguments of perihelion are in radians; times are Julian days and
distances are in AU.
"""

from __future__ import annotations

import math

# Gaussian gravitational constant
_K = 0.01720209895


def _elliptic(nu: float, axis: float, ecc: float, time_p: float) -> tuple[float, float]:
    E = 2 * math.atan(math.sqrt((1 - ecc) / (1 + ecc)) * math.tan(nu * 0.5))
    M = E - ecc * math.sin(E)
    n = _K / axis / math.sqrt(axis)
    return time_p + M / n, axis * (1 - ecc * math.cos(E))


def elliptic_ascending(
    axis: float, ecc: float, arg_p: float, time_p: float
) -> tuple[float, float]:
    """Return (jde, distance) of passage through the ascending node of an elliptic orbit."""
    return _elliptic(-arg_p, axis, ecc, time_p)


def elliptic_descending(
    axis: float, ecc: float, arg_p: float, time_p: float
) -> tuple[float, float]:
    """Return (jde, distance) of passage through the descending node of an elliptic orbit."""
    return _elliptic(math.pi - arg_p, axis, ecc, time_p)


def _parabolic(nu: float, q: float, time_p: float) -> tuple[float, float]:
    s = math.tan(nu * 0.5)
    jde = time_p + 27.403895 * s * (s * s + 3) * q * math.sqrt(q)
    return jde, q * (1 + s * s)


def parabolic_ascending(q: float, arg_p: float, time_p: float) -> tuple[float, float]:
    """Return (jde, distance) of passage through the ascending node of a parabolic orbit."""
    return _parabolic(-arg_p, q, time_p)


def parabolic_descending(q: float, arg_p: float, time_p: float) -> tuple[float, float]:
    """Return (jde, distance) of passage through the descending node of a parabolic orbit."""
    return _parabolic(math.pi - arg_p, q, time_p)