"""
Calendar bucketing.

Every date belongs to exactly one week window ``[start, start + 7 days)``
anchored on a fixed weekday (Sunday by default).  Datetimes are collapsed
to a calendar day in a single reference timezone, never the caller's
local zone, so the same instant always lands in the same week.
"""

from __future__ import annotations

import datetime
from typing import NamedTuple, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.exceptions import InvalidDateError
from app.training.config import SUNDAY

DateLike = Union[datetime.date, datetime.datetime, str]

WEEK_LENGTH = datetime.timedelta(days=7)


class WeekWindow(NamedTuple):
    """Half-open week interval; ``end`` is exclusive."""

    start: datetime.date
    end: datetime.date

    def days(self) -> list[datetime.date]:
        return [self.start + datetime.timedelta(days=offset) for offset in range(7)]

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day < self.end

    def previous(self) -> WeekWindow:
        return WeekWindow(self.start - WEEK_LENGTH, self.start)


def _reference_zone(name: str) -> datetime.tzinfo:
    if name.upper() == "UTC":
        return datetime.timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidDateError(f"Unknown reference timezone: {name!r}") from exc


def to_day(value: DateLike, reference_timezone: str = "UTC") -> datetime.date:
    """Normalize a date, datetime or ISO string to a calendar day.

    Naive datetimes are read as wall-clock time in the reference zone;
    aware ones are converted to it first.

    Raises:
        InvalidDateError: on anything that is not a valid calendar date.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(_reference_zone(reference_timezone))
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return datetime.date.fromisoformat(text)
            return to_day(datetime.datetime.fromisoformat(text), reference_timezone)
        except ValueError as exc:
            raise InvalidDateError(f"Invalid calendar date: {value!r}") from exc
    raise InvalidDateError(f"Invalid calendar date: {value!r}")


def week_start_of(value: DateLike, week_start_weekday: int = SUNDAY,
                  reference_timezone: str = "UTC") -> datetime.date:
    """The anchor weekday on or before ``value``."""
    day = to_day(value, reference_timezone)
    offset = (day.weekday() - week_start_weekday) % 7
    return day - datetime.timedelta(days=offset)


def week_window(value: DateLike, week_start_weekday: int = SUNDAY,
                reference_timezone: str = "UTC") -> WeekWindow:
    """The week window owning ``value``."""
    start = week_start_of(value, week_start_weekday, reference_timezone)
    return WeekWindow(start, start + WEEK_LENGTH)


def today(reference_timezone: str = "UTC", now: Optional[datetime.datetime] = None) -> datetime.date:
    """Current calendar day in the reference zone, not the server's local one."""
    instant = now or datetime.datetime.now(datetime.timezone.utc)
    return to_day(instant, reference_timezone)
