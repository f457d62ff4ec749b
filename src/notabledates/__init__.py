"""notabledates public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calculators,
    calculator_info,
    get_calculator,
    register_calculator,
    notable_date,
    notable_dates,
    notable_dates_between,
    is_weekend,
    easter_sunday,
    lunar_new_year,
)
from .calendars import ChineseLunisolarCalendar, GregorianCalendar, JulianCalendar
from .calculators import DateCache, EasterSundayCalculator, LunarNewYearCalculator
from .core.errors import (
    CalendarConversionError,
    InvalidArgumentError,
    NotableDateError,
    NotSupportedError,
    ResolutionError,
)
from .definitions import AdjustmentRule, NotableDate, NotableDateDefinition
from .resolver import NotableDateResolver

__all__ = [
    "list_calculators",
    "calculator_info",
    "get_calculator",
    "register_calculator",
    "notable_date",
    "notable_dates",
    "notable_dates_between",
    "is_weekend",
    "easter_sunday",
    "lunar_new_year",
    "GregorianCalendar",
    "JulianCalendar",
    "ChineseLunisolarCalendar",
    "DateCache",
    "EasterSundayCalculator",
    "LunarNewYearCalculator",
    "AdjustmentRule",
    "NotableDate",
    "NotableDateDefinition",
    "NotableDateResolver",
    "NotableDateError",
    "InvalidArgumentError",
    "NotSupportedError",
    "CalendarConversionError",
    "ResolutionError",
]
