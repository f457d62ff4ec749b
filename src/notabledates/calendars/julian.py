from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Tuple

from ..core.errors import CalendarConversionError
from ..core.time import from_jdn, jdn_to_julian, julian_days_in_month, julian_to_jdn, to_jdn
from .interfaces import check_month_day


@dataclass(frozen=True)
class JulianCalendar:
    """
    Proleptic Julian calendar. Conversions go through Julian Day Numbers.

    The supported range is the part of the Julian calendar that maps into
    `date.min..date.max`: Julian 0001-01-03 onwards.
    """
    name: ClassVar[str] = "julian"

    @property
    def min_supported_date(self) -> date:
        return date.min

    @property
    def max_supported_date(self) -> date:
        return date.max

    def days_in_month(self, year: int, month: int) -> int:
        return julian_days_in_month(year, month)

    def to_date(self, year: int, month: int, day: int) -> date:
        check_month_day(self, year, month, day)
        jdn = julian_to_jdn(year, month, day)
        try:
            return from_jdn(jdn)
        except (ValueError, OverflowError) as e:
            raise CalendarConversionError(
                f"Julian date {year}-{month:02d}-{day:02d} is outside the supported range"
            ) from e

    def _fields(self, d: date) -> Tuple[int, int, int]:
        return jdn_to_julian(to_jdn(d))

    def get_year(self, d: date) -> int:
        return self._fields(d)[0]

    def get_month(self, d: date) -> int:
        return self._fields(d)[1]

    def get_day_of_month(self, d: date) -> int:
        return self._fields(d)[2]
