"""Position of the Moon.

Angles are in radians, distances in kilometres.
"""

from __future__ import annotations

import math

from meeus.interp import horner
from meeus.julian import j2000_century

_P = math.pi / 180
_TWO_PI = 2 * math.pi


def parallax(distance: float) -> float:
    """Return the equatorial horizontal parallax of the Moon.

    distance is between the centres of the Earth and Moon, in km.
    """
    return math.asin(6378.14 / distance)


def _dmf(t: float) -> tuple[float, float, float, float]:
    d = horner(t, 297.8501921 * _P, 445267.1114034 * _P,
               -0.0018819 * _P, _P / 545868, -_P / 113065000)
    m = horner(t, 357.5291092 * _P, 35999.0502909 * _P,
               -0.0001535 * _P, _P / 24490000)
    mp = horner(t, 134.9633964 * _P, 477198.8675055 * _P,
                0.0087414 * _P, _P / 69699, -_P / 14712000)
    f = horner(t, 93.272095 * _P, 483202.0175233 * _P,
               -0.0036539 * _P, -_P / 3526000, _P / 863310000)
    return d, m, mp, f


# Table 47.A: D, M, M′, F, Σl, Σr
_TABLE_A = (
    (0, 0, 1, 0, 6288774, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
    (0, 1, 2, 0, -2120, 5751),
    (0, 2, 0, 0, -2069, 0),
    (2, -2, -1, 0, 2048, -4950),
    (2, 0, 1, -2, -1773, 4130),
    (2, 0, 0, 2, -1595, 0),
    (4, -1, -1, 0, 1215, -3958),
    (0, 0, 2, 2, -1110, 0),
    (3, 0, -1, 0, -892, 3258),
    (2, 1, 1, 0, -810, 2616),
    (4, -1, -2, 0, 759, -1897),
    (0, 2, -1, 0, -713, -2117),
    (2, 2, -1, 0, -700, 2354),
    (2, 1, -2, 0, 691, 0),
    (2, -1, 0, -2, 596, 0),
    (4, 0, 1, 0, 549, -1423),
    (0, 0, 4, 0, 537, -1117),
    (4, -1, 0, 0, 520, -1571),
    (1, 0, -2, 0, -487, -1739),
    (2, 1, 0, -2, -399, 0),
    (0, 0, 2, -2, -381, -4421),
    (1, 1, 1, 0, 351, 0),
    (3, 0, -2, 0, -340, 0),
    (4, 0, -3, 0, 330, 0),
    (2, -1, 2, 0, 327, 0),
    (0, 2, 1, 0, -323, 1165),
    (1, 1, -1, 0, 299, 0),
    (2, 0, 3, 0, 294, 0),
    (2, 0, -1, -2, 0, 8752),
)

# Table 47.B: D, M, M′, F, Σb
_TABLE_B = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
    (0, 0, 0, 3, -1749),
    (0, 1, -1, 1, -1565),
    (1, 0, 0, 1, -1491),
    (0, 1, 1, 1, -1475),
    (0, 1, 1, -1, -1410),
    (0, 1, 0, -1, -1344),
    (1, 0, 0, -1, -1335),
    (0, 0, 3, 1, 1107),
    (4, 0, 0, -1, 1021),
    (4, 0, -1, 1, 833),
    (0, 0, 1, -3, 777),
    (4, 0, -2, 1, 671),
    (2, 0, 0, -3, 607),
    (2, 0, 2, -1, 596),
    (2, -1, 1, -1, 491),
    (2, 0, -2, 1, -451),
    (0, 0, 3, -1, 439),
    (2, 0, 2, 1, 422),
    (2, 0, -3, -1, 421),
    (2, 1, -1, 1, -366),
    (2, 1, 0, 1, -351),
    (4, 0, 0, 1, 331),
    (2, -1, 1, 1, 315),
    (2, -2, 0, -1, 302),
    (0, 0, 1, 3, -283),
    (2, 1, 1, -1, -229),
    (1, 1, 0, -1, 223),
    (1, 1, 0, 1, 223),
    (0, 1, -2, -1, -220),
    (2, 1, -1, -1, -220),
    (1, 0, 1, 1, -185),
    (2, -1, -2, -1, 181),
    (0, 1, 2, 1, -177),
    (4, 0, -2, -1, 176),
    (4, -1, -1, -1, 166),
    (1, 0, 1, -1, -164),
    (4, 0, 1, -1, 132),
    (1, 0, -1, -1, -119),
    (4, -1, 0, -1, 115),
    (2, -2, 0, 1, 107),
)


def position(jde: float) -> tuple[float, float, float]:
    """Return geocentric (longitude, latitude, distance in km) of the Moon.

    Referred to the mean equinox of date, without nutation.
    """
    t = j2000_century(jde)
    lp = horner(t, 218.3164477 * _P, 481267.88123421 * _P,
                -0.0015786 * _P, _P / 538841, -_P / 65194000)
    d, m, mp, f = _dmf(t)
    a1 = 119.75 * _P + 131.849 * _P * t
    a2 = 53.09 * _P + 479264.29 * _P * t
    a3 = 313.45 * _P + 481266.484 * _P * t
    e = horner(t, 1, -0.002516, -0.0000074)
    e_factor = (1.0, e, e * e)
    sum_l = 3958 * math.sin(a1) + 1962 * math.sin(lp - f) + 318 * math.sin(a2)
    sum_r = 0.0
    sum_b = (
        -2235 * math.sin(lp) + 382 * math.sin(a3) + 175 * math.sin(a1 - f)
        + 175 * math.sin(a1 + f) + 127 * math.sin(lp - mp) - 115 * math.sin(lp + mp)
    )
    for cd, cm, cmp, cf, coef_l, coef_r in _TABLE_A:
        arg = d * cd + m * cm + mp * cmp + f * cf
        scale = e_factor[abs(cm)]
        sum_l += coef_l * math.sin(arg) * scale
        sum_r += coef_r * math.cos(arg) * scale
    for cd, cm, cmp, cf, coef_b in _TABLE_B:
        arg = d * cd + m * cm + mp * cmp + f * cf
        sum_b += coef_b * math.sin(arg) * e_factor[abs(cm)]
    lon = lp % _TWO_PI + sum_l * 1e-6 * _P
    lat = sum_b * 1e-6 * _P
    dist = 385000.56 + sum_r * 1e-3
    return lon, lat, dist


def node(jde: float) -> float:
    """Return longitude of the mean ascending node of the lunar orbit."""
    deg = horner(j2000_century(jde),
                 125.0445479, -1934.1362891, 0.0020754, 1 / 467441, -1 / 60616000)
    return math.radians(deg) % _TWO_PI


def perigee(jde: float) -> float:
    """Return longitude of the perigee of the lunar orbit."""
    deg = horner(j2000_century(jde),
                 83.3532465, 4069.0137287, -0.01032, -1 / 80053, 1 / 18999000)
    return math.radians(deg) % _TWO_PI


def true_node(jde: float) -> float:
    """Return longitude of the true ascending node of the instantaneous orbit."""
    d, m, mp, f = _dmf(j2000_century(jde))
    return node(jde) + math.radians(
        -1.4979 * math.sin(2 * (d - f))
        - 0.15 * math.sin(m)
        - 0.1226 * math.sin(2 * d)
        + 0.1176 * math.sin(2 * f)
        - 0.0801 * math.sin(2 * (mp - f))
    )