"""Jewish and Moslem calendars, and direct Julian/Gregorian day conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from meeus.julian import leap_year_gregorian, leap_year_julian


def _rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


@dataclass(frozen=True)
class JewishYear:
    """Dates and facts about a year of the Jewish calendar."""

    year: int
    pesach_month: int
    pesach_day: int
    new_year_month: int
    new_year_day: int
    months: int
    days: int


def _big_d(y: int) -> int:
    c = y // 100
    s = (3 * c - 5) // 4 if y >= 1583 else 0
    a = _rem(12 * y + 12, 19)
    b = _rem(y, 4)
    q = (-1.904412361576 + 1.554241796621 * a + 0.25 * b
         - 0.003177794022 * y + s)
    fq = math.floor(q)
    iq = int(fq)
    j = _rem(iq + 3 * y + 5 * b + 2 - s, 7)
    r = q - fq
    if j in (2, 4, 6):
        return iq + 23
    if j == 1 and a > 6 and r >= 0.63287037:
        return iq + 24
    if j == 0 and a > 11 and r >= 0.897723765:
        return iq + 23
    return iq + 22


def jewish_calendar(y: int) -> JewishYear:
    """Return Jewish calendar facts for Julian or Gregorian year y."""
    year = y + 3760
    d = _big_d(y)
    mp, dp = 3, d
    if dp > 31:
        mp += 1
        dp -= 31
    mny, dny = 9, d - 21
    if dny > 30:
        mny += 1
        dny -= 30
    months = 13 if _rem(year, 19) in (0, 3, 6, 8, 11, 14, 17) else 12
    y1 = y + 1
    leap = leap_year_julian if y1 < 1583 else leap_year_gregorian
    days = (366 if leap(y1) else 365) + _big_d(y1) - d
    return JewishYear(year, mp, dp, mny, dny, months, days)


def moslem_to_julian(y: int, m: int, d: int) -> tuple[int, int]:
    """Convert a Moslem date to a Julian year and day number of that year."""
    n = d + (295001 * (m - 1) + 9900) // 10000
    q = y // 30
    r = _rem(y, 30)
    a = (11 * r + 3) // 30
    w = 404 * q + 354 * r + 208 + a
    q1 = w // 1461
    q2 = _rem(w, 1461)
    g = 621 + 28 * q + 4 * q1
    k = (q2 * 10000) // 3652422
    e = (3652422 * k) // 10000
    j = q2 - e + n - 1
    x = g + k
    if j > 366 and _rem(x, 4) == 0:
        j -= 366
        x += 1
    elif j > 365 and _rem(x, 4) > 0:
        j -= 365
        x += 1
    return x, j


def _ymd(b: int) -> tuple[int, int, int]:
    c = (b * 100 - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001
    day = b - d - (306001 * e) // 10000
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def julian_to_gregorian(y: int, dn: int) -> tuple[int, int, int]:
    """Convert a Julian year and day number to a Gregorian (year, month, day)."""
    jd = (36525 * (y - 1)) // 100 + 1721423 + dn
    alpha = (jd * 100 - 186721625) // 3652425
    beta = jd
    if jd >= 2299161:
        beta += 1 + alpha - alpha // 4
    return _ymd(beta + 1524)


def moslem_leap_year(y: int) -> bool:
    """Return True if year y of the Moslem calendar is a leap year."""
    r = _rem(y, 30)
    return _rem(11 * r + 3, 30) > 18


def gregorian_to_julian(y: int, m: int, d: int) -> tuple[int, int, int]:
    """Convert a Gregorian date to a Julian calendar (year, month, day)."""
    if m < 3:
        y -= 1
        m += 12
    alpha = y // 100
    beta = 2 - alpha + alpha // 4
    b = (36525 * y) // 100 + (306001 * (m + 1)) // 10000 + d + 1722519 + beta
    return _ymd(b)


def julian_to_moslem(y: int, m: int, d: int) -> tuple[int, int, int]:
    """Convert a Julian calendar date to a Moslem (year, month, day)."""
    w = 1 if _rem(y, 4) == 0 else 2
    n = (275 * m) // 9 - w * ((m + 9) // 12) + d - 30
    a = y - 623
    b = a // 4
    c1 = 365.25001 * _rem(a, 4)
    c2 = math.floor(c1)
    c = int(c2) + 1 if c1 - c2 > 0.5 else int(c2)
    dp = 1461 * b + 170 + c
    q = dp // 10631
    r = _rem(dp, 10631)
    j = r // 354
    k = _rem(r, 354)
    o = (11 * j + 14) // 30
    h = 30 * q + j + 1
    jj = k - o + n - 1
    days = 355 if moslem_leap_year(y) else 354
    if jj > days:
        jj -= days
        h += 1
    if jj == 355:
        return h, 12, 30
    s = ((jj - 1) * 10) // 295
    return h, 1 + s, (10 * jj - 295 * s) // 10


class MoslemMonth(IntEnum):
    """A month of the Moslem calendar, Muharram = 1."""

    MUHARRAM = 1
    SAFAR = 2
    RABI_I = 3
    RABI_II = 4
    JUMADA_I = 5
    JUMADA_II = 6
    RAJAB = 7
    SHABAN = 8
    RAMADAN = 9
    SHAWWAL = 10
    DHU_AL_QADA = 11
    DHU_AL_HIJJA = 12

    def __str__(self) -> str:
        return _MONTH_NAMES[self.value - 1]


_MONTH_NAMES = (
    "Muḥarram",
    "Ṣafar",
    "Rabīʿ I",
    "Rabīʿ II",
    "Jumādā I",
    "Jumādā II",
    "Rajab",
    "Shaʿbān",
    "Ramaḍān",
    "Shawwāl",
    "Dhū al-Qaʿda",
    "Dhū al-Ḥijja",
)