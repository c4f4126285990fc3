"""Phase angle of the Moon, for the illuminated fraction of its disk.

All angles are in radians.  Distances need only be in the same unit as
each other.
"""

from __future__ import annotations

import math

from meeus.interp import horner
from meeus.julian import j2000_century

_TWO_PI = 2 * math.pi


def _cos_elongation_eq(
    alpha: float, alpha0: float, delta: float, delta0: float
) -> float:
    # (48.2) p. 345
    return math.sin(delta0) * math.sin(delta) + math.cos(delta0) * math.cos(
        delta
    ) * math.cos(alpha0 - alpha)


def _cos_elongation_ecl(lon: float, lat: float, lon0: float) -> float:
    # (48.2) p. 345
    return math.cos(lat) * math.cos(lon - lon0)


def _phase_angle(distance: float, sun_distance: float, cos_psi: float) -> float:
    # (48.3) p. 346
    sin_psi = math.sin(math.acos(cos_psi))
    return math.atan2(sun_distance * sin_psi, distance - sun_distance * cos_psi)


def phase_angle_eq(
    alpha: float,
    delta: float,
    distance: float,
    alpha0: float,
    delta0: float,
    sun_distance: float,
) -> float:
    """Return the Moon's phase angle from equatorial coordinates.

    alpha, delta, distance locate the Moon; alpha0, delta0, sun_distance
    locate the Sun.
    """
    return _phase_angle(
        distance, sun_distance, _cos_elongation_eq(alpha, alpha0, delta, delta0)
    )


def phase_angle_eq2(alpha: float, delta: float, alpha0: float, delta0: float) -> float:
    """Return the Moon's phase angle from equatorial coordinates, less accurately."""
    return math.acos(-_cos_elongation_eq(alpha, alpha0, delta, delta0))


def phase_angle_ecl(
    lon: float, lat: float, distance: float, lon0: float, sun_distance: float
) -> float:
    """Return the Moon's phase angle from ecliptic coordinates.

    lon, lat, distance locate the Moon; lon0, sun_distance locate the Sun.
    """
    return _phase_angle(distance, sun_distance, _cos_elongation_ecl(lon, lat, lon0))


def phase_angle_ecl2(lon: float, lat: float, lon0: float) -> float:
    """Return the Moon's phase angle from ecliptic coordinates, less accurately."""
    return math.acos(-_cos_elongation_ecl(lon, lat, lon0))


def phase_angle3(jde: float) -> float:
    """Return the Moon's phase angle at jde without needing coordinates."""
    t = j2000_century(jde)
    d = math.radians(
        horner(t, 297.8501921, 445267.1114034, -0.0018819, 1 / 545868, -1 / 113065000)
    ) % _TWO_PI
    m = math.radians(
        horner(t, 357.5291092, 35999.0502909, -0.0001535, 1 / 24490000)
    ) % _TWO_PI
    mp = math.radians(
        horner(t, 134.9633964, 477198.8675055, 0.0087414, 1 / 69699, -1 / 14712000)
    ) % _TWO_PI
    return math.pi - d + math.radians(
        -6.289 * math.sin(mp)
        + 2.1 * math.sin(m)
        - 1.274 * math.sin(2 * d - mp)
        - 0.658 * math.sin(2 * d)
        - 0.214 * math.sin(2 * mp)
        - 0.11 * math.sin(d)
    )