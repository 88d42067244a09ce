"""Tests for Instant construction and field accessors."""

from dataclasses import FrozenInstanceError

import pytest

from bluetime import (
    ErrorKind,
    Instant,
    InvalidArgumentError,
    InvalidTimeFormat,
    SystemCalendar,
)

UTC = SystemCalendar(tz="UTC")
STAMP = 1770126169


def test_from_epoch_keeps_value():
    """Test that any integer epoch is stored unchanged."""
    for epoch in (0, 1, -1, STAMP, -2_000_000_000, 253402300799):
        assert Instant.from_epoch(epoch, UTC).epoch_seconds == epoch


def test_from_epoch_rejects_non_integers():
    """Test that floats and bools are not epoch seconds."""
    with pytest.raises(TypeError, match="must be an int"):
        Instant(epoch_seconds=1.5)  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="must be an int"):
        Instant(epoch_seconds=True)


def test_now_reads_calendar_clock():
    """Test that now() uses the provider's current time."""
    frozen = SystemCalendar(tz="UTC", frozen_now=STAMP)

    assert Instant.now(frozen).epoch_seconds == STAMP


def test_now_without_calendar_uses_host_clock():
    """Test that now() works with the default provider."""
    before = SystemCalendar().now()
    instant = Instant.now()

    assert instant.epoch_seconds >= before


def test_from_fields_converts_to_epoch():
    """Test wall-clock fields in UTC."""
    instant = Instant.from_fields(15, 0, 0, 24, 9, 2011, calendar=UTC)

    assert isinstance(instant, Instant)
    assert instant.is_valid()
    assert instant.epoch_seconds == 1316876400


def test_from_fields_in_local_time_round_trips():
    """Test that local-time construction reads back the same fields."""
    instant = Instant.from_fields(15, 0, 0, 24, 9, 2011)

    assert isinstance(instant, Instant)
    assert (instant.hour(), instant.minute(), instant.second()) == (15, 0, 0)
    assert (instant.day(), instant.month(), instant.year()) == (24, 9, 2011)


def test_from_fields_rejects_february_31():
    """Test that an impossible date yields a tagged error."""
    result = Instant.from_fields(0, 0, 0, 31, 2, 2024, calendar=UTC)

    assert isinstance(result, InvalidTimeFormat)
    assert not result.is_valid()
    assert result.kind == ErrorKind.INVALID_TIME_FORMAT
    assert result.epoch_seconds == 0
    assert (result.day, result.month, result.year) == (31, 2, 2024)
    assert "INVALID_TIME_FORMAT" in str(result)


def test_from_fields_rejects_swapped_day_and_year():
    """Test a day/year mix-up is caught by calendar validity."""
    result = Instant.from_fields(15, 0, 0, 2011, 9, 1, calendar=UTC)

    assert isinstance(result, InvalidTimeFormat)
    assert result.epoch_seconds == 0


def test_from_fields_rejects_month_13():
    """Test month bounds."""
    assert isinstance(Instant.from_fields(0, 0, 0, 1, 13, 2024), InvalidTimeFormat)
    assert isinstance(Instant.from_fields(0, 0, 0, 1, 0, 2024), InvalidTimeFormat)


def test_from_fields_accepts_leap_day():
    """Test February 29 in a leap year."""
    instant = Instant.from_fields(0, 0, 0, 29, 2, 2024, calendar=UTC)

    assert isinstance(instant, Instant)
    assert instant.day_of_year() == 60


def test_from_fields_rolls_over_time_fields():
    """Test that hour 24 lands on the next day."""
    instant = Instant.from_fields(24, 0, 0, 31, 12, 2025, calendar=UTC)

    assert isinstance(instant, Instant)
    assert instant.formatted_timestamp() == "2026-01-01 - 00:00:00"


def test_from_tuple():
    """Test construction from a six element sequence."""
    instant = Instant.from_tuple([15, 0, 0, 24, 9, 2011], UTC)

    assert instant == Instant.from_epoch(1316876400)


def test_from_tuple_wrong_arity():
    """Test that a malformed sequence is a hard error."""
    with pytest.raises(InvalidArgumentError, match="exactly six elements") as info:
        Instant.from_tuple([15, 0, 0, 24, 9], UTC)

    assert info.value.kind == ErrorKind.INVALID_ARGUMENT


def test_set_epoch_returns_new_instant():
    """Test that set_epoch replaces the value without mutating."""
    original = Instant.from_epoch(0, UTC)
    updated = original.set_epoch(STAMP)

    assert updated.epoch_seconds == STAMP
    assert original.epoch_seconds == 0
    assert updated.calendar is UTC
    assert updated.set_epoch(5).set_epoch(6).epoch_seconds == 6


def test_instant_is_immutable():
    """Test that fields cannot be assigned."""
    instant = Instant.from_epoch(STAMP, UTC)

    with pytest.raises(FrozenInstanceError):
        instant.epoch_seconds = 0  # type: ignore[misc]


def test_equality_ignores_calendar():
    """Test that equality and hashing use only epoch seconds."""
    a = Instant.from_epoch(STAMP, UTC)
    b = Instant.from_epoch(STAMP, SystemCalendar(tz="Asia/Tokyo"))
    c = Instant.from_epoch(STAMP + 1000, UTC)

    assert a == b
    assert a.same_instant(b)
    assert not a.same_instant(c)
    assert len({a, b, c}) == 2


def test_field_accessors():
    """Test every accessor for 2026-02-03 13:42:49 UTC."""
    instant = Instant.from_epoch(STAMP, UTC)

    assert instant.year() == 2026
    assert instant.month() == 2
    assert instant.day() == 3
    assert instant.hour() == 13
    assert instant.minute() == 42
    assert instant.second() == 49
    assert instant.week_of_year() == 6
    assert instant.day_of_year() == 34
    assert instant.days_in_month() == 28
    assert instant.is_leap_year() is False
    assert instant.check_date() is True


def test_names():
    """Test day and month names."""
    instant = Instant.from_epoch(STAMP, UTC)

    assert instant.day_name() == "Tuesday"
    assert instant.day_name(short=True) == "Tue"
    assert instant.month_name() == "February"
    assert instant.month_name(short=True) == "Feb"


def test_months_in_year():
    """Test the month to day-count mapping for a non-leap year."""
    instant = Instant.from_epoch(STAMP, UTC)

    assert instant.months_in_year() == {
        1: 31,
        2: 28,
        3: 31,
        4: 30,
        5: 31,
        6: 30,
        7: 31,
        8: 31,
        9: 30,
        10: 31,
        11: 30,
        12: 31,
    }


def test_formatting():
    """Test canonical and custom renderings."""
    instant = Instant.from_epoch(STAMP, UTC)

    assert instant.formatted_timestamp() == "2026-02-03 - 13:42:49"
    assert str(instant) == "2026-02-03 - 13:42:49"
    assert instant.date_string() == "2026-02-03"
    assert instant.date_string(year_last=True) == "03-02-2026"
    assert instant.time_string() == "13:42:49"
    assert instant.format("%d/%m/%Y") == "03/02/2026"
    assert instant.format("%m-%d-%Y") == "02-03-2026"
    assert instant.format("%Y.%m.%d") == "2026.02.03"


def test_negative_epoch():
    """Test instants before 1970."""
    instant = Instant.from_epoch(-86400, UTC)

    assert instant.formatted_timestamp() == "1969-12-31 - 00:00:00"
    assert instant.day_name() == "Wednesday"


def test_calendar_zone_changes_fields():
    """Test that the provider's zone drives wall-clock fields."""
    tokyo = Instant.from_epoch(STAMP, SystemCalendar(tz="Asia/Tokyo"))

    assert tokyo.hour() == 22
    assert tokyo.to_datetime().utcoffset().total_seconds() == 9 * 3600
