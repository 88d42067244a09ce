from .difference import Delta, Mode, Rounding, difference
from .errors import ErrorKind, InvalidArgumentError, InvalidTimeFormat
from .instant import Instant
from .provider import CalendarProvider, SystemCalendar
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, UNITS, WEEK, YEAR, Unit

__all__ = [
    "Instant",
    "CalendarProvider",
    "SystemCalendar",
    "difference",
    "Delta",
    "Mode",
    "Rounding",
    "Unit",
    "UNITS",
    "ErrorKind",
    "InvalidArgumentError",
    "InvalidTimeFormat",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
