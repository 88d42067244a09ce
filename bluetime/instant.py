import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime

from bluetime.difference import Delta, Mode, Rounding, difference
from bluetime.errors import InvalidArgumentError, InvalidTimeFormat
from bluetime.provider import CalendarProvider, SystemCalendar
from bluetime.util import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Instant:
    """A single point in time, stored as Unix epoch seconds.

    Field accessors delegate to ``calendar``. Two instants are equal when
    their epoch seconds match, whatever calendar reads them.
    """

    epoch_seconds: int
    calendar: CalendarProvider = field(
        default_factory=SystemCalendar, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if isinstance(self.epoch_seconds, bool) or not isinstance(
            self.epoch_seconds, int
        ):
            raise TypeError(
                f"Instant epoch_seconds must be an int.\n"
                f"Got {type(self.epoch_seconds).__name__!r}: "
                f"{self.epoch_seconds!r}"
            )

    @classmethod
    def now(cls, calendar: CalendarProvider | None = None) -> "Instant":
        calendar = calendar or SystemCalendar()
        return cls(epoch_seconds=calendar.now(), calendar=calendar)

    @classmethod
    def from_epoch(
        cls, seconds: int, calendar: CalendarProvider | None = None
    ) -> "Instant":
        return cls(epoch_seconds=seconds, calendar=calendar or SystemCalendar())

    @classmethod
    def from_fields(
        cls,
        hour: int,
        minute: int,
        second: int,
        day: int,
        month: int,
        year: int,
        calendar: CalendarProvider | None = None,
    ) -> "Instant | InvalidTimeFormat":
        """Build an instant from wall-clock fields in the calendar's time rules.

        Returns an ``InvalidTimeFormat`` instead of raising when
        (year, month, day) is not a real date. Callers branch on
        ``is_valid()`` or ``isinstance``.

        Raises:
            InvalidArgumentError: If time fields roll the date past year 9999

        Example:
            >>> Instant.from_fields(15, 0, 0, 24, 9, 2011, SystemCalendar("UTC"))
            Instant(epoch_seconds=1316876400)
        """
        calendar = calendar or SystemCalendar()
        if not calendar.check_date(year, month, day):
            logger.debug(f"Rejected date fields {year}-{month}-{day}")
            return InvalidTimeFormat(
                hour=hour, minute=minute, second=second, day=day, month=month, year=year
            )
        epoch = calendar.to_epoch(hour, minute, second, day, month, year)
        return cls(epoch_seconds=epoch, calendar=calendar)

    @classmethod
    def from_tuple(
        cls, values: Sequence[int], calendar: CalendarProvider | None = None
    ) -> "Instant | InvalidTimeFormat":
        """Build from a (hour, minute, second, day, month, year) sequence."""
        if len(values) != 6:
            raise InvalidArgumentError(
                f"Time sequence must contain exactly six elements: "
                f"hour, minute, second, day, month, year.\n"
                f"Got {len(values)} element(s): {tuple(values)!r}"
            )
        return cls.from_fields(*values, calendar=calendar)

    def set_epoch(self, seconds: int) -> "Instant":
        """Return an instant at ``seconds`` read by the same calendar."""
        return replace(self, epoch_seconds=seconds)

    def is_valid(self) -> bool:
        return True

    def to_datetime(self) -> datetime:
        return self.calendar.to_datetime(self.epoch_seconds)

    def year(self) -> int:
        return self.calendar.year(self.epoch_seconds)

    def month(self) -> int:
        return self.calendar.month(self.epoch_seconds)

    def day(self) -> int:
        return self.calendar.day(self.epoch_seconds)

    def hour(self) -> int:
        return self.calendar.hour(self.epoch_seconds)

    def minute(self) -> int:
        return self.calendar.minute(self.epoch_seconds)

    def second(self) -> int:
        return self.calendar.second(self.epoch_seconds)

    def week_of_year(self) -> int:
        return self.calendar.week(self.epoch_seconds)

    def day_of_year(self) -> int:
        return self.calendar.day_of_year(self.epoch_seconds)

    def day_name(self, short: bool = False) -> str:
        return self.calendar.day_name(self.epoch_seconds, short)

    def month_name(self, short: bool = False) -> str:
        return self.calendar.month_name(self.epoch_seconds, short)

    def days_in_month(self) -> int:
        return self.calendar.days_in_month(self.epoch_seconds)

    def is_leap_year(self) -> bool:
        return self.calendar.is_leap_year(self.year())

    def months_in_year(self) -> dict[int, int]:
        """Day count of every month in this instant's year."""
        return self.calendar.months(self.year())

    def check_date(self) -> bool:
        return self.calendar.valid(self.epoch_seconds)

    def same_instant(self, other: "Instant") -> bool:
        return self.epoch_seconds == other.epoch_seconds

    def formatted_timestamp(self) -> str:
        """Render as ``YYYY-MM-DD - HH:MM:SS`` in the calendar's time rules."""
        return self.calendar.formatted_time(self.epoch_seconds)

    def date_string(self, year_last: bool = False) -> str:
        return self.calendar.date_string(self.epoch_seconds, year_last)

    def time_string(self) -> str:
        return self.calendar.time_string(self.epoch_seconds)

    def format(self, directives: str) -> str:
        return self.calendar.format(self.epoch_seconds, directives)

    def difference(
        self,
        other: "Instant",
        unit: Unit | None = None,
        mode: Mode = "absolute",
        rounding: Rounding = "rounded",
    ) -> Delta | dict[Unit, Delta]:
        """Delta from this instant to ``other``; see ``bluetime.difference``.

        Positive when this instant is the earlier one.
        """
        return difference(self, other, unit, mode, rounding)

    def __str__(self) -> str:
        return self.formatted_timestamp()
