"""Astronomical algorithms: interpolation, calendars, lunar and Jovian ephemerides, orbits."""

__version__ = "0.1.0"