"""
notabledates.calendars.lunisolar
--------------------------------
Chinese lunisolar calendar backed by the `lunarcalendar` data tables.

Lunar years 1901..2100 are supported, i.e. absolute dates from the first day of
lunar 1901 (1901-02-19) to the last day of lunar 2100 (2101-01-28). Months are
numbered 1..12; an intercalary month carries the number of the month it
follows and is selected with `is_leap_month=True`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from lunarcalendar import Converter, DateNotExist, Lunar, Solar

from ..core.errors import CalendarConversionError
from .interfaces import check_supported

MIN_SUPPORTED_YEAR = 1901
MAX_SUPPORTED_YEAR = 2100


@dataclass(frozen=True)
class ChineseLunisolarCalendar:
    name: ClassVar[str] = "chinese-lunisolar"

    @property
    def min_supported_year(self) -> int:
        return MIN_SUPPORTED_YEAR

    @property
    def max_supported_year(self) -> int:
        return MAX_SUPPORTED_YEAR

    @property
    def min_supported_date(self) -> date:
        return date(1901, 2, 19)

    @property
    def max_supported_date(self) -> date:
        return date(2101, 1, 28)

    # ---------------------------------------------------------
    # Forward: lunar coordinates to absolute date
    # ---------------------------------------------------------

    def to_date(self, year: int, month: int, day: int, is_leap_month: bool = False) -> date:
        if not (MIN_SUPPORTED_YEAR <= year <= MAX_SUPPORTED_YEAR):
            raise CalendarConversionError(
                f"Lunar year {year} is outside {MIN_SUPPORTED_YEAR}..{MAX_SUPPORTED_YEAR}"
            )
        if not (1 <= month <= 12) or not (1 <= day <= 30):
            raise CalendarConversionError(f"Lunar month/day {month}/{day} is not valid")

        label = f"{year}-{month:02d}{'(leap)' if is_leap_month else ''}-{day:02d}"
        try:
            solar = Converter.Lunar2Solar(Lunar(year, month, day, isleap=is_leap_month))
            d = date(solar.year, solar.month, solar.day)
            back = Converter.Solar2Lunar(Solar(d.year, d.month, d.day))
        except (DateNotExist, ValueError, IndexError) as e:
            raise CalendarConversionError(f"Lunar date {label} does not exist") from e

        # The tables accept some impossible labels (e.g. day 30 of a short month)
        # and silently roll over; a round trip exposes them.
        if (back.year, back.month, back.day, bool(back.isleap)) != (year, month, day, is_leap_month):
            raise CalendarConversionError(f"Lunar date {label} does not exist")
        return check_supported(self, d)

    def days_in_month(self, year: int, month: int, is_leap_month: bool = False) -> int:
        try:
            self.to_date(year, month, 30, is_leap_month=is_leap_month)
            return 30
        except CalendarConversionError:
            self.to_date(year, month, 1, is_leap_month=is_leap_month)
            return 29

    # ---------------------------------------------------------
    # Inverse: absolute date to lunar coordinates
    # ---------------------------------------------------------

    def _lunar(self, d: date) -> Lunar:
        check_supported(self, d)
        try:
            return Converter.Solar2Lunar(Solar(d.year, d.month, d.day))
        except (DateNotExist, ValueError, IndexError) as e:
            raise CalendarConversionError(f"{d.isoformat()} cannot be expressed as a lunar date") from e

    def get_year(self, d: date) -> int:
        return self._lunar(d).year

    def get_month(self, d: date) -> int:
        return self._lunar(d).month

    def get_day_of_month(self, d: date) -> int:
        return self._lunar(d).day

    def is_leap_month(self, d: date) -> bool:
        return bool(self._lunar(d).isleap)
