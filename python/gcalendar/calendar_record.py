"""Broken-down Gregorian calendar records derived from epoch milliseconds."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import (
    DAYS_BEFORE_MONTH,
    DAYS_PER_LEAP_YEAR,
    DAYS_PER_NORMAL_YEAR,
    DAYS_PER_WEEK,
    EPOCH_WEEKDAY,
    EPOCH_YEAR,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_length(year: int) -> int:
    """Number of days in ``year``: 366 for leap years, 365 otherwise."""
    return DAYS_PER_LEAP_YEAR if is_leap_year(year) else DAYS_PER_NORMAL_YEAR


@dataclass(frozen=True)
class CalendarRecord:
    """Immutable calendar view of a single instant, always in UTC.

    ``month`` and ``day_of_month`` are 1-indexed, ``day_of_year`` is
    0-indexed and ``day_of_week`` counts from Sunday = 0. Records built by
    hand are not range checked.
    """

    second: int
    minute: int
    hour: int
    day_of_month: int
    month: int
    year: int
    day_of_week: int
    day_of_year: int

    @classmethod
    def at_epoch(cls) -> "CalendarRecord":
        return cls(
            second=0,
            minute=0,
            hour=0,
            day_of_month=1,
            month=1,
            year=EPOCH_YEAR,
            day_of_week=EPOCH_WEEKDAY,
            day_of_year=0,
        )

    @classmethod
    def from_epoch(cls, epoch_millis: int) -> "CalendarRecord":
        """Decompose milliseconds since 1970-01-01T00:00:00Z.

        Sub-second precision is dropped, not rounded.
        """
        if epoch_millis < 0:
            raise ValueError(f"epoch milliseconds must be non-negative, got {epoch_millis}")

        day_count, day_clock = divmod(epoch_millis, MILLIS_PER_DAY)

        hour = day_clock // MILLIS_PER_HOUR
        day_clock -= hour * MILLIS_PER_HOUR
        minute = day_clock // MILLIS_PER_MINUTE
        day_clock -= minute * MILLIS_PER_MINUTE
        second = day_clock // MILLIS_PER_SECOND

        day_of_week = (day_count + EPOCH_WEEKDAY) % DAYS_PER_WEEK

        year = EPOCH_YEAR
        while day_count >= year_length(year):
            day_count -= year_length(year)
            year += 1
        day_of_year = day_count

        days_before = DAYS_BEFORE_MONTH[1 if is_leap_year(year) else 0]
        month = 11
        while day_of_year < days_before[month]:
            month -= 1

        return cls(
            second=second,
            minute=minute,
            hour=hour,
            day_of_month=day_of_year - days_before[month] + 1,
            month=month + 1,
            year=year,
            day_of_week=day_of_week,
            day_of_year=day_of_year,
        )


def decompose(epoch_millis: int) -> CalendarRecord:
    return CalendarRecord.from_epoch(epoch_millis)


__all__ = ["CalendarRecord", "decompose", "is_leap_year", "year_length"]
