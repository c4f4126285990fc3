"""Julian day and conversions to and from the Julian and Gregorian calendars."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

J2000 = 2451545.0
JULIAN_CENTURY = 36525.0


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _tdiv(a, b)


def j2000_century(jde: float) -> float:
    """Return the number of Julian centuries since J2000."""
    return (jde - J2000) / JULIAN_CENTURY


def calendar_gregorian_to_jd(y: int, m: int, d: float) -> float:
    """Convert a Gregorian year, month and day of month to Julian day.

    Negative years are valid back to JD 0.
    """
    if m in (1, 2):
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    # (7.1) p. 61
    return float((36525 * (y + 4716)) // 100) + float((306 * (m + 1)) // 10 + b) + d - 1524.5


def calendar_julian_to_jd(y: int, m: int, d: float) -> float:
    """Convert a Julian year, month and day of month to Julian day.

    Negative years are valid back to JD 0.
    """
    if m in (1, 2):
        y -= 1
        m += 12
    return float((36525 * (y + 4716)) // 100) + float((306 * (m + 1)) // 10) + d - 1524.5


def leap_year_julian(y: int) -> bool:
    """Return True if year y of the Julian calendar is a leap year."""
    return y % 4 == 0


def leap_year_gregorian(y: int) -> bool:
    """Return True if year y of the Gregorian calendar is a leap year."""
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


def _jd_to_ymd(jd: float, gregorian_only: bool) -> tuple[int, int, float]:
    f, zf = math.modf(jd + 0.5)
    z = int(zf)
    a = z
    if gregorian_only or z >= 2299151:
        alpha = (z * 100 - 186721625) // 3652425
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = (b * 100 - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001
    day = float((b - d) - (306001 * e) // 10000) + f
    month = e - 13 if e in (14, 15) else e - 1
    year = c - 4715 if month in (1, 2) else c - 4716
    return year, month, day


def jd_to_calendar(jd: float) -> tuple[int, int, float]:
    """Return (year, month, day) for jd in the Julian or Gregorian calendar as appropriate."""
    return _jd_to_ymd(jd, gregorian_only=False)


def jd_to_datetime(jd: float) -> datetime:
    """Return a UTC datetime (always proleptic Gregorian) for a Julian day."""
    y, m, d = _jd_to_ymd(jd, gregorian_only=True)
    start = datetime(y, m, 1, tzinfo=timezone.utc) - timedelta(days=1)
    return start + timedelta(days=d)


def datetime_to_jd(t: datetime) -> float:
    """Return the Julian day of a datetime.

    Aware datetimes are converted to UTC; naive ones are taken as UTC.
    """
    if t.tzinfo is not None:
        t = t.astimezone(timezone.utc).replace(tzinfo=None)
    start = datetime(t.year, t.month, 1) - timedelta(days=1)
    days = (t - start) / timedelta(days=1)
    return calendar_gregorian_to_jd(t.year, t.month, days)


def day_of_week(jd: float) -> int:
    """Return the day of the week for jd, 0 for Sunday through 6 for Saturday."""
    return _tmod(int(jd + 1.5), 7)


def day_of_year_gregorian(y: int, m: int, d: int) -> int:
    """Return the day number within a year of the Gregorian calendar."""
    return day_of_year(y, m, d, leap_year_gregorian(y))


def day_of_year_julian(y: int, m: int, d: int) -> int:
    """Return the day number within a year of the Julian calendar."""
    return day_of_year(y, m, d, leap_year_julian(y))


def _whole_months(m: int, k: int) -> int:
    return _tdiv(275 * m, 9) - k * _tdiv(m + 9, 12) - 30


def day_of_year(y: int, m: int, d: int, leap: bool) -> int:
    """Return the day number within a year, given whether it is a leap year."""
    k = 1 if leap else 2
    return _whole_months(m, k) + d


def day_of_year_to_calendar(n: int, leap: bool) -> tuple[int, int]:
    """Return (month, day) for day of year n, given whether it is a leap year."""
    k = 1 if leap else 2
    if n < 32:
        m = 1
    else:
        m = _tdiv(900 * (k + n) + 98 * 275, 27500)
    return m, n - _whole_months(m, k)