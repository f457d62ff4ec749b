from __future__ import annotations
import calendar
from datetime import date, timedelta

# JDN of date(1, 1, 1) minus its proleptic ordinal.
_JDN_ORDINAL_OFFSET = 1721425


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Gregorian date for a JDN. Raises ValueError outside date.min..date.max."""
    return date.fromordinal(jdn - _JDN_ORDINAL_OFFSET)

def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Julian calendar date to JDN."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083

def jdn_to_julian(jdn: int) -> tuple[int, int, int]:
    """Inverse of julian_to_jdn: (year, month, day) in the proleptic Julian calendar."""
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day

def julian_days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if year % 4 == 0 else 28
    return calendar.mdays[month]

def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date | None:
    """
    The n-th given weekday (0=Mon..6=Sun) of a Gregorian month.
    n = -1 selects the last one. Returns None when the month has no n-th occurrence.
    """
    if n == 0 or not (0 <= weekday <= 6):
        raise ValueError("n must be non-zero and weekday in 0..6")
    last = calendar.monthrange(year, month)[1]
    if n > 0:
        first = date(year, month, 1)
        d = first + timedelta(days=(weekday - first.weekday()) % 7 + 7 * (n - 1))
    else:
        end = date(year, month, last)
        d = end - timedelta(days=(end.weekday() - weekday) % 7 + 7 * (-n - 1))
    if d.month != month:
        return None
    return d

# Saturday and Sunday
WEEKEND = frozenset({5, 6})

def is_weekend(d: date, weekend: frozenset[int] = WEEKEND) -> bool:
    return d.weekday() in weekend

def next_weekday(d: date, weekend: frozenset[int] = WEEKEND) -> date:
    """First day strictly after `d` that is not a weekend day."""
    d += timedelta(days=1)
    while d.weekday() in weekend:
        d += timedelta(days=1)
    return d

def previous_weekday(d: date, weekend: frozenset[int] = WEEKEND) -> date:
    """Last day strictly before `d` that is not a weekend day."""
    d -= timedelta(days=1)
    while d.weekday() in weekend:
        d -= timedelta(days=1)
    return d
