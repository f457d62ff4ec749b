from .gregorian import GregorianCalendar
from .julian import JulianCalendar
from .lunisolar import ChineseLunisolarCalendar
from .interfaces import CalendarSystem

__all__ = [
    "CalendarSystem",
    "GregorianCalendar",
    "JulianCalendar",
    "ChineseLunisolarCalendar",
]
