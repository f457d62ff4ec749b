"""
notabledates.calendars.interfaces
---------------------------------
Defines the boundary between notable date calculators and the calendar
systems they express results in.

Reference Frame:
Every calendar maps its own (year, month, day) coordinates onto an absolute,
naive `datetime.date` (proleptic Gregorian, midnight, no tzinfo). Calculators
borrow a calendar per call and never own it.
"""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Protocol

from ..core.errors import CalendarConversionError, NotSupportedError


class CalendarSystem(Protocol):
    """
    Converts between calendar coordinates and absolute dates.

    Implementations are expected to be hashable and to compare equal when they
    would produce identical conversions; calculators use them as cache keys.
    """
    name: ClassVar[str]

    @property
    def min_supported_date(self) -> date:
        """Earliest absolute date this calendar can represent."""
        ...

    @property
    def max_supported_date(self) -> date:
        """Latest absolute date this calendar can represent."""
        ...

    def to_date(self, year: int, month: int, day: int) -> date:
        """
        Absolute date (at midnight) for calendar coordinates.
        Raises CalendarConversionError if the triple is not valid for this calendar.
        """
        ...

    def get_year(self, d: date) -> int:
        ...

    def get_month(self, d: date) -> int:
        ...

    def get_day_of_month(self, d: date) -> int:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        ...


_DECOMPOSE = ("get_year", "get_month", "get_day_of_month")


def require_methods(calendar: object, names=("to_date",)) -> None:
    """Raise NotSupportedError unless `calendar` exposes every method in `names`."""
    missing = [n for n in names if not callable(getattr(calendar, n, None))]
    if missing:
        raise NotSupportedError(
            f"Calendar type '{type(calendar).__name__}' is not supported (missing: {', '.join(missing)})"
        )


def require_decomposition(calendar: object) -> None:
    require_methods(calendar, _DECOMPOSE)


def check_supported(calendar: CalendarSystem, d: date) -> date:
    """Return `d` if it lies within the calendar's supported range."""
    lo, hi = calendar.min_supported_date, calendar.max_supported_date
    if not (lo <= d <= hi):
        raise CalendarConversionError(
            f"{d.isoformat()} is outside the range supported by {calendar.name} calendar "
            f"({lo.isoformat()}..{hi.isoformat()})"
        )
    return d


def check_month_day(calendar: CalendarSystem, year: int, month: int, day: int, months: int = 12) -> None:
    """Reject out-of-range month/day values instead of wrapping them."""
    if not (1 <= month <= months):
        raise CalendarConversionError(f"Month {month} is not valid in the {calendar.name} calendar")
    n = calendar.days_in_month(year, month)
    if not (1 <= day <= n):
        raise CalendarConversionError(
            f"Day {day} is not valid for {year}-{month:02d} in the {calendar.name} calendar (1..{n})"
        )
