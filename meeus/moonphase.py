"""Phases of the Moon: mean and true times of New, First Quarter, Full and Last Quarter."""

from __future__ import annotations

import math
from dataclasses import dataclass

from meeus.interp import horner

_P = math.pi / 180
_CK = 1 / 1236.85


def _mean(t: float) -> float:
    """Mean phase jde for time t in centuries, (49.1) p. 349."""
    return horner(t, 2451550.09766, 29.530588861 / _CK,
                  0.00015437, -0.00000015, 0.00000000073)


def _snap(y: float, q: float) -> float:
    """Return k at quarter q nearest decimal year y."""
    k = (y - 2000) * 12.3685  # (49.2) p. 350
    return math.floor(k - q + 0.5) + q


def mean_new(year: float) -> float:
    """Return the jde of the mean New Moon nearest decimal year."""
    return _mean(_snap(year, 0.0) * _CK)


def mean_first(year: float) -> float:
    """Return the jde of the mean First Quarter Moon nearest decimal year."""
    return _mean(_snap(year, 0.25) * _CK)


def mean_full(year: float) -> float:
    """Return the jde of the mean Full Moon nearest decimal year."""
    return _mean(_snap(year, 0.5) * _CK)


def mean_last(year: float) -> float:
    """Return the jde of the mean Last Quarter Moon nearest decimal year."""
    return _mean(_snap(year, 0.75) * _CK)


def new(year: float) -> float:
    """Return the jde of the New Moon nearest decimal year."""
    ph = _Phase.at(year, 0.0)
    return _mean(ph.t) + ph.new_full_correction(_NEW_COEFF) + ph.additional()


def first(year: float) -> float:
    """Return the jde of the First Quarter Moon nearest decimal year."""
    ph = _Phase.at(year, 0.25)
    return _mean(ph.t) + ph.quarter_correction() + ph.w() + ph.additional()


def full(year: float) -> float:
    """Return the jde of the Full Moon nearest decimal year."""
    ph = _Phase.at(year, 0.5)
    return _mean(ph.t) + ph.new_full_correction(_FULL_COEFF) + ph.additional()


def last(year: float) -> float:
    """Return the jde of the Last Quarter Moon nearest decimal year."""
    ph = _Phase.at(year, 0.75)
    return _mean(ph.t) + ph.quarter_correction() - ph.w() + ph.additional()


@dataclass(frozen=True)
class _Phase:
    k: float
    t: float
    e: float
    m: float
    mp: float
    f: float
    omega: float
    a: tuple[float, ...]

    @classmethod
    def at(cls, y: float, q: float) -> "_Phase":
        k = _snap(y, q)
        t = k * _CK  # (49.3) p. 350
        e = horner(t, 1, -0.002516, -0.0000074)
        m = horner(t, 2.5534 * _P, 29.1053567 * _P / _CK,
                   -0.0000014 * _P, -0.00000011 * _P)
        mp = horner(t, 201.5643 * _P, 385.81693528 * _P / _CK,
                    0.0107582 * _P, 0.00001238 * _P, -0.000000058 * _P)
        f = horner(t, 160.7108 * _P, 390.67050284 * _P / _CK,
                   -0.0016118 * _P, -0.00000227 * _P, 0.000000011 * _P)
        omega = horner(t, 124.7746 * _P, -1.56375588 * _P / _CK,
                       0.0020672 * _P, 0.00000215 * _P)
        a = (
            299.7 * _P + 0.107408 * _P * k - 0.009173 * t * t,
            251.88 * _P + 0.016321 * _P * k,
            251.83 * _P + 26.651886 * _P * k,
            349.42 * _P + 36.412478 * _P * k,
            84.66 * _P + 18.206239 * _P * k,
            141.74 * _P + 53.303771 * _P * k,
            207.17 * _P + 2.453732 * _P * k,
            154.84 * _P + 7.30686 * _P * k,
            34.52 * _P + 27.261239 * _P * k,
            207.19 * _P + 0.121824 * _P * k,
            291.34 * _P + 1.844379 * _P * k,
            161.72 * _P + 24.198154 * _P * k,
            239.56 * _P + 25.513099 * _P * k,
            331.55 * _P + 3.592518 * _P * k,
        )
        return cls(k, t, e, m, mp, f, omega, a)

    def new_full_correction(self, coeff: tuple[float, ...]) -> float:
        e, m, mp, f = self.e, self.m, self.mp, self.f
        sin = math.sin
        terms = (
            sin(mp),
            sin(m) * e,
            sin(2 * mp),
            sin(2 * f),
            sin(mp - m) * e,
            sin(mp + m) * e,
            sin(2 * m) * e * e,
            sin(mp - 2 * f),
            sin(mp + 2 * f),
            sin(2 * mp + m) * e,
            sin(3 * mp),
            sin(m + 2 * f) * e,
            sin(m - 2 * f) * e,
            sin(2 * mp - m) * e,
            sin(self.omega),
            sin(mp + 2 * m),
            sin(2 * (mp - f)),
            sin(3 * m),
            sin(mp + m - 2 * f),
            sin(2 * (mp + f)),
            sin(mp + m + 2 * f),
            sin(mp - m + 2 * f),
            sin(mp - m - 2 * f),
            sin(3 * mp + m),
            sin(4 * mp),
        )
        return sum(c * s for c, s in zip(coeff, terms))

    def quarter_correction(self) -> float:
        e, m, mp, f = self.e, self.m, self.mp, self.f
        sin = math.sin
        return (
            -0.62801 * sin(mp)
            + 0.17172 * sin(m) * e
            - 0.01183 * sin(mp + m) * e
            + 0.00862 * sin(2 * mp)
            + 0.00804 * sin(2 * f)
            + 0.00454 * sin(mp - m) * e
            + 0.00204 * sin(2 * m) * e * e
            - 0.0018 * sin(mp - 2 * f)
            - 0.0007 * sin(mp + 2 * f)
            - 0.0004 * sin(3 * mp)
            - 0.00034 * sin(2 * mp - m)
            + 0.00032 * sin(m + 2 * f) * e
            + 0.00032 * sin(m - 2 * f) * e
            - 0.00028 * sin(mp + 2 * m) * e * e
            + 0.00027 * sin(2 * mp + m) * e
            - 0.00017 * sin(self.omega)
            - 0.00005 * sin(mp - m - 2 * f)
            + 0.00004 * sin(2 * mp + 2 * f)
            - 0.00004 * sin(mp + m + 2 * f)
            + 0.00004 * sin(mp - 2 * m)
            + 0.00003 * sin(mp + m - 2 * f)
            + 0.00003 * sin(3 * m)
            + 0.00002 * sin(2 * mp - 2 * f)
            + 0.00002 * sin(mp - m + 2 * f)
            - 0.00002 * sin(3 * mp + m)
        )

    def w(self) -> float:
        m, mp = self.m, self.mp
        return (
            0.00306
            - 0.00038 * self.e * math.cos(m)
            + 0.00026 * math.cos(mp)
            - 0.00002 * (math.cos(mp - m) - math.cos(mp + m) - math.cos(2 * self.f))
        )

    def additional(self) -> float:
        return sum(c * math.sin(a) for c, a in zip(_ADDITIONAL_COEFF, self.a))


_NEW_COEFF = (
    -0.4072, 0.17241, 0.01608, 0.01039, 0.00739, -0.00514, 0.00208,
    -0.00111, -0.00057, 0.00056, -0.00042, 0.00042, 0.00038, -0.00024,
    -0.00017, -0.00007, 0.00004, 0.00004, 0.00003, 0.00003, -0.00003,
    0.00003, -0.00002, -0.00002, 0.00002,
)

_FULL_COEFF = (
    -0.40614, 0.17302, 0.01614, 0.01043, 0.00734, -0.00515, 0.00209,
    -0.00111, -0.00057, 0.00056, -0.00042, 0.00042, 0.00038, -0.00024,
    -0.00017, -0.00007, 0.00004, 0.00004, 0.00003, 0.00003, -0.00003,
    0.00003, -0.00002, -0.00002, 0.00002,
)

_ADDITIONAL_COEFF = (
    0.000325, 0.000165, 0.000164, 0.000126, 0.00011, 0.000062, 0.00006,
    0.000056, 0.000047, 0.000042, 0.000040, 0.000037, 0.000035, 0.000023,
)