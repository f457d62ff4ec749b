"""
notabledates.calculators.easter
-------------------------------
Easter Sunday via the Computus. Years from the cutover (1583, the first full
year of the Gregorian reform) onwards use the Meeus/Jones/Butcher Gregorian
algorithm; earlier years use the Julian algorithm. All divisions are floor
divisions on non-negative operands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Hashable, Optional, Tuple

from ..calendars.gregorian import GregorianCalendar
from ..calendars.interfaces import CalendarSystem, require_methods
from ..core.calculator import check_year
from ..core.errors import CalendarConversionError, NotSupportedError
from .cache import DateCache

logger = logging.getLogger(__name__)

GREGORIAN_CUTOVER_YEAR = 1583

_DEFAULT_CALENDAR = GregorianCalendar()


def gregorian_computus(year: int) -> Tuple[int, int]:
    """(month, day) of Easter Sunday in the Gregorian calendar."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    n = h + l - 7 * m + 114
    return n // 31, n % 31 + 1


def julian_computus(year: int) -> Tuple[int, int]:
    """(month, day) of Easter Sunday in the Julian calendar."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    f = d + e + 114
    return f // 31, f % 31 + 1


def computus(year: int, *, cutover_year: int = GREGORIAN_CUTOVER_YEAR) -> Tuple[int, int]:
    if year >= cutover_year:
        return gregorian_computus(year)
    return julian_computus(year)


@dataclass(frozen=True)
class EasterParams:
    cutover_year: int = GREGORIAN_CUTOVER_YEAR

    def __post_init__(self) -> None:
        if self.cutover_year < 1:
            raise ValueError("cutover_year must be >= 1")


class EasterSundayCalculator:
    """
    Memoizing Easter Sunday calculator.

    Results are cached per (year, params, calendar). The calendar part of the key
    is the calendar instance itself (structural equality), with no calendar
    normalised to `GregorianCalendar()`. Pass `cache=` to share a cache between
    instances; entries from differently configured instances never collide.
    """
    name = "easter-sunday"

    def __init__(self, params: Optional[EasterParams] = None, *, cache: Optional[DateCache] = None):
        self.params = params if params is not None else EasterParams()
        self._cache = cache if cache is not None else DateCache()

    @property
    def cache(self) -> DateCache:
        return self._cache

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "cutover_year": self.params.cutover_year, "cached": len(self._cache)}

    def cache_key(self, year: int, calendar: Optional[CalendarSystem] = None) -> Tuple[int, EasterParams, Hashable]:
        cal = calendar if calendar is not None else _DEFAULT_CALENDAR
        try:
            hash(cal)
        except TypeError as e:
            raise NotSupportedError(f"Calendar type '{type(cal).__name__}' is not hashable") from e
        return (year, self.params, cal)

    def get_date(self, year: int, calendar: Optional[CalendarSystem] = None) -> date:
        check_year(year)
        if calendar is not None:
            require_methods(calendar)
        key = self.cache_key(year, calendar)
        return self._cache.get_or_add(key, lambda: self._compute(year, calendar))

    def _compute(self, year: int, calendar: Optional[CalendarSystem]) -> date:
        month, day = computus(year, cutover_year=self.params.cutover_year)
        logger.debug("easter %d: month=%d day=%d (calendar=%s)", year, month, day,
                     type(calendar).__name__ if calendar is not None else None)
        if calendar is not None:
            return calendar.to_date(year, month, day)
        try:
            return date(year, month, day)
        except ValueError as e:
            raise CalendarConversionError(f"Easter {year}-{month:02d}-{day:02d} cannot be represented") from e
