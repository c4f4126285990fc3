"""The parallactic angle and related angles of the ecliptic and diurnal path.

All angles, including hour angle and local sidereal time, are in radians.
"""

from __future__ import annotations

import math


def parallactic_angle(phi: float, delta: float, h: float) -> float:
    """Return the parallactic angle of an object, formula (14.1).

    phi is the observer's latitude, delta the object's declination and h
    its hour angle.
    """
    return math.atan2(
        math.sin(h), math.tan(phi) * math.cos(delta) - math.sin(delta) * math.cos(h)
    )


def parallactic_angle_on_horizon(phi: float, delta: float) -> float:
    """Return the parallactic angle of an object on the horizon."""
    return math.acos(math.sin(phi) / math.cos(delta))


def ecliptic_at_horizon(
    epsilon: float, phi: float, theta: float
) -> tuple[float, float, float]:
    """Return where and how the ecliptic meets the horizon.

    epsilon is the obliquity of the ecliptic, phi the observer's latitude and
    theta the local sidereal time as an angle.  Returns the two ecliptic
    longitudes on the horizon and the angle between ecliptic and horizon.
    """
    se, ce = math.sin(epsilon), math.cos(epsilon)
    sp, cp = math.sin(phi), math.cos(phi)
    st, ct = math.sin(theta), math.cos(theta)
    # (14.2) p. 99
    lon = math.atan2(-ct, se * (sp / cp) + ce * st)
    if lon < 0:
        lon += math.pi
    # (14.3) p. 99
    return lon, lon + math.pi, math.acos(ce * sp - se * cp * st)


def ecliptic_at_equator(lon: float, epsilon: float) -> float:
    """Return the angle between the ecliptic and parallels of latitude at longitude lon."""
    return math.atan(-math.cos(lon) * math.tan(epsilon))


def diurnal_path_at_horizon(delta: float, phi: float) -> float:
    """Return the angle of an object's diurnal path with the horizon at rising or setting."""
    tp = math.tan(phi)
    b = math.tan(delta) * tp
    c = math.sqrt(1 - b * b)
    return math.atan(c * math.cos(delta) / tp)