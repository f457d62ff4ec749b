"""
notabledates.calculators.lunar_new_year
---------------------------------------
First day of the first month of the Chinese lunisolar year, expressed in a
target calendar. Years outside the lunisolar table yield None, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..calendars.gregorian import GregorianCalendar
from ..calendars.interfaces import CalendarSystem, require_decomposition, require_methods
from ..calendars.lunisolar import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR, ChineseLunisolarCalendar
from ..core.calculator import check_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LunarNewYearParams:
    """Optional narrowing of the lunisolar table range."""
    min_year: int = MIN_SUPPORTED_YEAR
    max_year: int = MAX_SUPPORTED_YEAR

    def __post_init__(self) -> None:
        if not (MIN_SUPPORTED_YEAR <= self.min_year <= self.max_year <= MAX_SUPPORTED_YEAR):
            raise ValueError(
                f"Require {MIN_SUPPORTED_YEAR} <= min_year <= max_year <= {MAX_SUPPORTED_YEAR}"
            )


class LunarNewYearCalculator:
    name = "lunar-new-year"

    def __init__(self, params: Optional[LunarNewYearParams] = None):
        self.params = params if params is not None else LunarNewYearParams()
        self.lunisolar = ChineseLunisolarCalendar()

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "min_year": self.params.min_year, "max_year": self.params.max_year}

    def get_date(self, year: int, calendar: Optional[CalendarSystem] = None) -> Optional[date]:
        check_year(year)
        if year < self.params.min_year or year > self.params.max_year:
            logger.debug("lunar new year %d outside %d..%d", year, self.params.min_year, self.params.max_year)
            return None

        target = calendar if calendar is not None else GregorianCalendar()
        new_year = self.lunisolar.to_date(year, 1, 1)

        if type(target) is GregorianCalendar:
            return new_year

        # Re-express in the target's own coordinates
        require_decomposition(target)
        require_methods(target)
        y = target.get_year(new_year)
        m = target.get_month(new_year)
        d = target.get_day_of_month(new_year)
        logger.debug("lunar new year %d -> %s %d-%02d-%02d", year, type(target).__name__, y, m, d)
        return target.to_date(y, m, d)
