from .cache import DateCache
from .easter import EasterParams, EasterSundayCalculator
from .lunar_new_year import LunarNewYearCalculator, LunarNewYearParams

__all__ = [
    "DateCache",
    "EasterParams",
    "EasterSundayCalculator",
    "LunarNewYearCalculator",
    "LunarNewYearParams",
]
