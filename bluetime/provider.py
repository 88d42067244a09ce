"""Calendar Provider: Gregorian field extraction over epoch seconds.

Every query accepts a *stamp*, which is one of:
- int: Unix timestamp (seconds, may be negative)
- sequence of (year, month, day): midnight of that date
- None: the provider's current time
"""

import calendar
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import MAXYEAR, MINYEAR, datetime, timedelta
from typing import TypeAlias
from zoneinfo import ZoneInfo

from typing_extensions import override

from bluetime.errors import InvalidArgumentError

Stamp: TypeAlias = int | Sequence[int] | None

FORMATTED_TIME = "%Y-%m-%d - %H:%M:%S"
DATE = "%Y-%m-%d"
DATE_YEAR_LAST = "%d-%m-%Y"
TIME = "%H:%M:%S"


class CalendarProvider(ABC):

    @abstractmethod
    def to_datetime(self, epoch: int) -> datetime:
        """Return the wall-clock datetime for a Unix timestamp.

        Raises:
            InvalidArgumentError: If the timestamp falls outside years 1-9999
        """
        pass

    @abstractmethod
    def to_epoch(
        self, hour: int, minute: int, second: int, day: int, month: int, year: int
    ) -> int:
        """Convert wall-clock fields to a Unix timestamp.

        Out-of-range time fields roll over into the next unit (hour=25 is
        1am on the following day). The date part must be a valid date.

        Raises:
            InvalidArgumentError: If the result falls outside years 1-9999
        """
        pass

    @abstractmethod
    def now(self) -> int:
        """Current time as a Unix timestamp."""
        pass

    def resolve(self, stamp: Stamp = None) -> int:
        if stamp is None:
            return self.now()
        if isinstance(stamp, int):
            return stamp
        year, month, day = self._triple(stamp)
        if not self.check_date(year, month, day):
            raise InvalidArgumentError(
                f"Date sequence ({year}, {month}, {day}) is not a calendar date.\n"
                f"Hint: pass (year, month, day) with month 1-12 and a day "
                f"that exists in that month"
            )
        return self.to_epoch(0, 0, 0, day, month, year)

    def _triple(self, values: Sequence[int]) -> tuple[int, int, int]:
        if len(values) != 3:
            raise InvalidArgumentError(
                f"Date sequence must contain exactly three elements: "
                f"year, month, day.\n"
                f"Got {len(values)} element(s): {tuple(values)!r}"
            )
        year, month, day = values
        return year, month, day

    def _datetime(self, stamp: Stamp) -> datetime:
        return self.to_datetime(self.resolve(stamp))

    def year(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).year

    def month(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).month

    def day(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).day

    def hour(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).hour

    def minute(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).minute

    def second(self, stamp: Stamp = None) -> int:
        return self._datetime(stamp).second

    def week(self, stamp: Stamp = None) -> int:
        """ISO-8601 week number (weeks start on Monday)."""
        return self._datetime(stamp).isocalendar().week

    def day_of_year(self, stamp: Stamp = None) -> int:
        """Day number within the year, 1-based."""
        return self._datetime(stamp).timetuple().tm_yday

    def day_name(self, stamp: Stamp = None, short: bool = False) -> str:
        """Weekday name in the host locale ("Tuesday", or "Tue" if short)."""
        return self._datetime(stamp).strftime("%a" if short else "%A")

    def month_name(self, stamp: Stamp = None, short: bool = False) -> str:
        """Month name in the host locale ("February", or "Feb" if short)."""
        return self._datetime(stamp).strftime("%b" if short else "%B")

    def days_in_month(self, stamp: Stamp = None) -> int:
        """Number of days in the month of ``stamp``.

        Besides the usual stamp forms, accepts a (year, month) pair.
        """
        if stamp is not None and not isinstance(stamp, int) and len(stamp) == 2:
            year, month = stamp
            return calendar.monthrange(year, month)[1]
        dt = self._datetime(stamp)
        return calendar.monthrange(dt.year, dt.month)[1]

    def months(self, year: int | None = None) -> dict[int, int]:
        """Map each month number (1-12) of ``year`` to its day count."""
        if year is None:
            year = self.year()
        return {month: calendar.monthrange(year, month)[1] for month in range(1, 13)}

    def is_leap_year(self, year: int | None = None) -> bool:
        if year is None:
            year = self.year()
        return calendar.isleap(year)

    def check_date(self, year: int, month: int, day: int) -> bool:
        """True if (year, month, day) is a real proleptic Gregorian date."""
        if not (MINYEAR <= year <= MAXYEAR and 1 <= month <= 12):
            return False
        return 1 <= day <= calendar.monthrange(year, month)[1]

    def valid(self, stamp: Stamp = None) -> bool:
        """Check a (year, month, day) sequence, or the date a stamp falls on."""
        if stamp is not None and not isinstance(stamp, int):
            return self.check_date(*self._triple(stamp))
        dt = self._datetime(stamp)
        return self.check_date(dt.year, dt.month, dt.day)

    def format(self, stamp: Stamp, directives: str) -> str:
        """Render ``stamp`` with strftime directives (e.g. "%d/%m/%Y")."""
        return self._datetime(stamp).strftime(directives)

    def formatted_time(self, stamp: Stamp = None) -> str:
        return self.format(stamp, FORMATTED_TIME)

    def date_string(self, stamp: Stamp = None, year_last: bool = False) -> str:
        return self.format(stamp, DATE_YEAR_LAST if year_last else DATE)

    def time_string(self, stamp: Stamp = None) -> str:
        return self.format(stamp, TIME)


class SystemCalendar(CalendarProvider):
    """Calendar backed by the host clock and Python's datetime.

    With no ``tz`` the host's local time rules apply, including DST. Pass an
    IANA zone name (e.g. "UTC") to pin the rules, and ``frozen_now`` to pin
    the clock in tests.
    """

    def __init__(self, tz: str | None = None, frozen_now: int | None = None):
        self.zone: ZoneInfo | None = ZoneInfo(tz) if tz else None
        self.frozen_now: int | None = frozen_now

    @override
    def to_datetime(self, epoch: int) -> datetime:
        try:
            return datetime.fromtimestamp(epoch, tz=self.zone)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Timestamp {epoch} is outside the supported date range "
                f"(years {MINYEAR}-{MAXYEAR}): {exc}"
            ) from exc

    @override
    def to_epoch(
        self, hour: int, minute: int, second: int, day: int, month: int, year: int
    ) -> int:
        try:
            if self.zone is None:
                fields = (year, month, day, hour, minute, second, 0, 0, -1)
                return int(time.mktime(fields))
            # Aware datetime arithmetic is wall-clock, so rollover matches mktime
            midnight = datetime(year, month, day, tzinfo=self.zone)
            wall = midnight + timedelta(hours=hour, minutes=minute, seconds=second)
            return int(wall.timestamp())
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Time {year:04d}-{month:02d}-{day:02d} "
                f"{hour:02d}:{minute:02d}:{second:02d} is outside the supported "
                f"date range (years {MINYEAR}-{MAXYEAR}): {exc}"
            ) from exc

    @override
    def now(self) -> int:
        if self.frozen_now is not None:
            return self.frozen_now
        return int(time.time())

    @override
    def __repr__(self) -> str:
        zone = self.zone.key if self.zone else "local"
        return f"SystemCalendar(tz={zone!r})"
