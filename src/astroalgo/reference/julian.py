# reference/julian.py

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Tuple

from ..core.types import CalendarDate


# ============================================================
# Calendar date -> JD  (7.1) p. 61
# ============================================================

# Integer divisions below are floor divisions, so negative years are
# valid back to JD 0.

def calendar_gregorian_to_jd(y: int, m: int, d: float) -> float:
    """
    Gregorian year, month, day of month (with fraction) -> JD.
    """
    if m in (1, 2):
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    return float((36525 * (y + 4716)) // 100) + float((306 * (m + 1)) // 10 + b) + d - 1524.5


def calendar_julian_to_jd(y: int, m: int, d: float) -> float:
    """
    Julian calendar year, month, day of month (with fraction) -> JD.
    """
    if m in (1, 2):
        y -= 1
        m += 12
    return float((36525 * (y + 4716)) // 100) + float((306 * (m + 1)) // 10) + d - 1524.5


def leap_year_julian(y: int) -> bool:
    return y % 4 == 0


def leap_year_gregorian(y: int) -> bool:
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


# ============================================================
# JD -> calendar date  p. 63
# ============================================================

_GREGORIAN_START_Z = 2299161  # 1582 October 15


def _jd_to_calendar(jd: float, gregorian: bool) -> CalendarDate:
    f, zf = math.modf(jd + 0.5)
    z = int(zf)
    a = z
    if gregorian:
        alpha = (z * 100 - 186721625) // 3652425
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = (b * 100 - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001
    day = float(b - d - (306001 * e) // 10000) + f
    month = e - 13 if e in (14, 15) else e - 1
    year = c - 4715 if month in (1, 2) else c - 4716
    return CalendarDate(year, month, day)


def jd_to_calendar(jd: float) -> CalendarDate:
    """
    JD -> calendar date.

    The date is in the Julian calendar before 1582 October 15 and in the
    Gregorian calendar from then on. Not valid for negative JD.
    """
    z = int(math.modf(jd + 0.5)[1])
    return _jd_to_calendar(jd, z >= _GREGORIAN_START_Z)


def jd_to_calendar_gregorian(jd: float) -> CalendarDate:
    """JD -> proleptic Gregorian date, even before 1582."""
    return _jd_to_calendar(jd, True)


# ============================================================
# datetime (UTC) <-> JD
# ============================================================

def jd_to_datetime(jd: float) -> datetime:
    """
    JD -> timezone-aware UTC datetime (always proleptic Gregorian).
    """
    cd = jd_to_calendar_gregorian(jd)
    day0 = datetime(cd.year, cd.month, 1, tzinfo=timezone.utc)
    return day0 + timedelta(days=cd.day - 1.0)


def datetime_to_jd(dt: datetime) -> float:
    """
    datetime -> JD. Aware datetimes are converted to UTC; naive ones are
    taken to be UTC already.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    start = dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    frac = (dt - start) / timedelta(days=1)
    return calendar_gregorian_to_jd(dt.year, dt.month, 1.0 + frac)


# ============================================================
# Day of week / day of year  pp. 65-66
# ============================================================

def day_of_week(jd: float) -> int:
    """
    Day of the week for jd: 0 is Sunday, 6 is Saturday.
    """
    return int(math.floor(jd + 1.5)) % 7


def _whole_months(m: int, k: int) -> int:
    # days in the months before month m
    return 275 * m // 9 - k * ((m + 9) // 12) - 30


def day_of_year(y: int, m: int, d: int, leap: bool) -> int:
    """
    Day number within the year. y is unused by the formula but kept for
    symmetry with the calendar specific forms.
    """
    k = 1 if leap else 2
    return _whole_months(m, k) + d


def day_of_year_gregorian(y: int, m: int, d: int) -> int:
    return day_of_year(y, m, d, leap_year_gregorian(y))


def day_of_year_julian(y: int, m: int, d: int) -> int:
    return day_of_year(y, m, d, leap_year_julian(y))


def day_of_year_to_calendar(n: int, leap: bool) -> Tuple[int, int]:
    """
    (month, day) for day number n within a year.
    """
    k = 1 if leap else 2
    if n < 32:
        m = 1
    else:
        m = (900 * (k + n) + 98 * 275) // 27500
    return m, n - _whole_months(m, k)
