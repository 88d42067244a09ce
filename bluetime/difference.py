"""Difference engine: signed deltas between two instants in seven units.

Sign convention, shared by every mode: the result is seen from ``left``
towards ``right``. A left instant that is earlier yields a positive
value, a later one a negative value, and equal instants yield exactly 0.

Modes:
- "absolute": elapsed seconds divided by a fixed ratio per unit. Months
  are 30 days and years 365 days; leap years and month lengths are
  ignored.
- "relative": same-named calendar fields subtracted independently
  (``left.minute() - right.minute()``), ignoring carry between fields.
  Both instants are read on the left instant's calendar.
  Only "seconds" is re-signed by the chronological order; every other unit
  keeps the sign of the raw subtraction.
- "calendar": like "absolute", except months and years count whole
  calendar months/years between the two wall-clock dates.

Rounding (absolute and calendar modes, fractional units only):
- "rounded": magnitude rounded to 5 decimal places
- "floor": magnitude truncated to whole units
"""

import logging
from typing import TYPE_CHECKING, Literal, TypeAlias

from dateutil.relativedelta import relativedelta

from bluetime.errors import InvalidArgumentError
from bluetime.util import SCALES, UNITS, Unit

if TYPE_CHECKING:
    from bluetime.instant import Instant

logger = logging.getLogger(__name__)

Mode: TypeAlias = Literal["absolute", "relative", "calendar"]
Rounding: TypeAlias = Literal["rounded", "floor"]
Delta: TypeAlias = int | float

MODES: tuple[Mode, ...] = ("absolute", "relative", "calendar")
ROUNDINGS: tuple[Rounding, ...] = ("rounded", "floor")
PRECISION = 5

# Calendar provider field compared by each unit in relative mode
_FIELDS: dict[Unit, str] = {
    "seconds": "second",
    "minutes": "minute",
    "hours": "hour",
    "days": "day",
    "weeks": "week",
    "months": "month",
    "years": "year",
}


def difference(
    left: "Instant",
    right: "Instant",
    unit: Unit | None = None,
    mode: Mode = "absolute",
    rounding: Rounding = "rounded",
) -> Delta | dict[Unit, Delta]:
    """Return the delta from ``left`` to ``right``.

    Args:
        left: Reference instant (the receiver)
        right: Instant compared against
        unit: One of the seven unit names, or None for all of them
        mode: "absolute", "relative" or "calendar"
        rounding: "rounded" or "floor"

    Returns:
        A single delta, or a dict keyed seconds, years, months, weeks, days,
        hours, minutes (in that order) when ``unit`` is None.

    Raises:
        InvalidArgumentError: If unit, mode or rounding is not recognised
    """
    _check_choice("unit", unit, tuple(SCALES), optional=True)
    _check_choice("mode", mode, MODES)
    _check_choice("rounding", rounding, ROUNDINGS)
    logger.debug(
        f"difference {left.epoch_seconds} -> {right.epoch_seconds} "
        f"unit={unit or 'all'} mode={mode} rounding={rounding}"
    )

    if unit is None:
        return {name: _delta(left, right, name, mode, rounding) for name in UNITS}
    return _delta(left, right, unit, mode, rounding)


def direction(left: "Instant", right: "Instant") -> int:
    """1 if left is earlier, -1 if left is later, 0 if they coincide."""
    if left.epoch_seconds < right.epoch_seconds:
        return 1
    if left.epoch_seconds > right.epoch_seconds:
        return -1
    return 0


def absolute(
    left: "Instant", right: "Instant", unit: Unit, rounding: Rounding = "rounded"
) -> Delta:
    elapsed = abs(left.epoch_seconds - right.epoch_seconds)
    if unit == "seconds":
        magnitude: Delta = elapsed
    elif rounding == "floor":
        magnitude = elapsed // SCALES[unit]
    else:
        magnitude = round(elapsed / SCALES[unit], PRECISION)
    return _signed(magnitude, direction(left, right))


def relative(left: "Instant", right: "Instant", unit: Unit) -> int:
    # Both sides are read on the left's calendar so wall clocks agree
    read = getattr(left.calendar, _FIELDS[unit])
    delta = read(left.epoch_seconds) - read(right.epoch_seconds)
    if unit == "seconds":
        return _signed(abs(delta), direction(left, right))
    return delta


def calendar(
    left: "Instant", right: "Instant", unit: Unit, rounding: Rounding = "rounded"
) -> Delta:
    if unit not in ("months", "years"):
        return absolute(left, right, unit, rounding)

    earlier, later = sorted((left, right), key=lambda i: i.epoch_seconds)
    # Both sides are read on the left's calendar so wall clocks agree
    span = relativedelta(
        left.calendar.to_datetime(later.epoch_seconds),
        left.calendar.to_datetime(earlier.epoch_seconds),
    )
    magnitude = span.years if unit == "years" else span.years * 12 + span.months
    return _signed(magnitude, direction(left, right))


def _delta(
    left: "Instant", right: "Instant", unit: Unit, mode: Mode, rounding: Rounding
) -> Delta:
    if mode == "relative":
        return relative(left, right, unit)
    if mode == "calendar":
        return calendar(left, right, unit, rounding)
    return absolute(left, right, unit, rounding)


def _signed(magnitude: Delta, sign: int) -> Delta:
    if sign == 0:
        return 0
    return magnitude if sign > 0 else -magnitude


def _check_choice(
    name: str, value: str | None, choices: tuple[str, ...], optional: bool = False
) -> None:
    if value is None and optional:
        return
    if value not in choices:
        valid = ", ".join(choices)
        raise InvalidArgumentError(
            f"Unknown difference {name} {value!r}.\n"
            f"Hint: valid {name}s are {valid}"
            + (" (or None for all)" if optional else "")
        )
