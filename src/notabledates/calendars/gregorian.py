from __future__ import annotations

import calendar as _stdcal
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from ..core.errors import CalendarConversionError
from .interfaces import check_month_day


@dataclass(frozen=True)
class GregorianCalendar:
    """Proleptic Gregorian calendar over the full `datetime.date` range."""
    name: ClassVar[str] = "gregorian"

    @property
    def min_supported_date(self) -> date:
        return date.min

    @property
    def max_supported_date(self) -> date:
        return date.max

    def days_in_month(self, year: int, month: int) -> int:
        return _stdcal.monthrange(year, month)[1]

    def to_date(self, year: int, month: int, day: int) -> date:
        if not (date.min.year <= year <= date.max.year):
            raise CalendarConversionError(f"Year {year} is outside the range supported by the gregorian calendar")
        check_month_day(self, year, month, day)
        return date(year, month, day)

    def get_year(self, d: date) -> int:
        return d.year

    def get_month(self, d: date) -> int:
        return d.month

    def get_day_of_month(self, d: date) -> int:
        return d.day
