"""Tests for calendar bucketing (week start and week window)."""

import datetime

import pytest

from app.core.exceptions import InvalidDateError
from app.training.calendar import WeekWindow, to_day, today, week_start_of, week_window

# 2023-01-29 is a Sunday.
SUNDAY = datetime.date(2023, 1, 29)


class TestWeekStartOf:
    @pytest.mark.parametrize("offset", range(7))
    def test_every_day_of_the_week_maps_to_its_sunday(self, offset):
        day = SUNDAY + datetime.timedelta(days=offset)
        assert week_start_of(day) == SUNDAY

    def test_sunday_is_its_own_week_start(self):
        assert week_start_of(SUNDAY) == SUNDAY

    def test_next_sunday_starts_a_new_week(self):
        assert week_start_of(SUNDAY + datetime.timedelta(days=7)) == SUNDAY + datetime.timedelta(days=7)

    def test_monday_anchor(self):
        assert week_start_of(datetime.date(2023, 2, 1), week_start_weekday=0) == datetime.date(2023, 1, 30)

    def test_crosses_year_boundary(self):
        # 2022-12-31 is a Saturday.
        assert week_start_of(datetime.date(2022, 12, 31)) == datetime.date(2022, 12, 25)
        assert week_start_of(datetime.date(2023, 1, 1)) == datetime.date(2023, 1, 1)


class TestWeekWindow:
    def test_same_week_same_window(self):
        windows = {week_window(SUNDAY + datetime.timedelta(days=i)) for i in range(7)}
        assert len(windows) == 1

    def test_end_is_start_plus_seven_days(self):
        day = datetime.date(2020, 1, 1)
        for _ in range(400):
            window = week_window(day)
            assert window.end == window.start + datetime.timedelta(days=7)
            assert window.contains(day)
            day += datetime.timedelta(days=1)

    def test_adjacent_windows_do_not_overlap(self):
        window = week_window(SUNDAY)
        following = week_window(window.end)
        assert following.start == window.end
        assert not window.contains(window.end)

    def test_days_and_previous(self):
        window = WeekWindow(SUNDAY, SUNDAY + datetime.timedelta(days=7))
        assert window.days()[0] == SUNDAY
        assert len(window.days()) == 7
        assert window.previous() == WeekWindow(datetime.date(2023, 1, 22), SUNDAY)


class TestToDay:
    def test_iso_string(self):
        assert to_day("2023-02-01") == datetime.date(2023, 2, 1)

    def test_naive_datetime_keeps_its_calendar_day(self):
        assert to_day(datetime.datetime(2023, 2, 1, 23, 59)) == datetime.date(2023, 2, 1)

    def test_aware_datetime_is_converted_to_reference_zone(self):
        eastern = datetime.timezone(datetime.timedelta(hours=-5))
        # 22:00 Saturday at UTC-5 is 03:00 Sunday UTC.
        instant = datetime.datetime(2023, 1, 28, 22, 0, tzinfo=eastern)
        assert to_day(instant, "UTC") == SUNDAY
        assert week_start_of(instant) == SUNDAY

    def test_iso_datetime_string(self):
        assert to_day("2023-01-28T22:00:00-05:00") == SUNDAY

    @pytest.mark.parametrize("value", ["2023-02-30", "not a date", "", 20230201, None, 3.5])
    def test_invalid_inputs(self, value):
        with pytest.raises(InvalidDateError):
            to_day(value)

    def test_invalid_reference_timezone(self):
        instant = datetime.datetime(2023, 1, 28, 22, 0, tzinfo=datetime.timezone.utc)
        with pytest.raises(InvalidDateError):
            to_day(instant, "Not/AZone")

    def test_invalid_date_is_a_value_error(self):
        with pytest.raises(ValueError):
            week_window("2023-13-01")


class TestToday:
    def test_uses_reference_zone_not_the_callers_offset(self):
        eastern = datetime.timezone(datetime.timedelta(hours=-5))
        # Saturday evening at UTC-5 is already Sunday in UTC.
        now = datetime.datetime(2023, 1, 28, 22, 0, tzinfo=eastern)
        assert today("UTC", now=now) == SUNDAY

    def test_defaults_to_current_utc_day(self):
        before = datetime.datetime.now(datetime.timezone.utc).date()
        result = today()
        after = datetime.datetime.now(datetime.timezone.utc).date()
        assert result in (before, after)
