"""Constants shared by the calendar decomposition and formatting code."""

from __future__ import annotations

from typing import Tuple

NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 3_600_000
MILLIS_PER_DAY = 86_400_000

EPOCH_YEAR = 1970
# 1970-01-01 was a Thursday.
EPOCH_WEEKDAY = 4
DAYS_PER_WEEK = 7
DAYS_PER_LEAP_YEAR = 366
DAYS_PER_NORMAL_YEAR = 365

DAYS_BEFORE_MONTH: Tuple[Tuple[int, ...], Tuple[int, ...]] = (
    # Normal years
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    # Leap years
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)

WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

UTC_NAME = "UTC"
UTC_OFFSET = "-0000"

ISO8601_FORMAT = "%Y-%m-%d %H:%M:%S"
RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
CTIME_FORMAT = "%c"
RFC822_FORMAT = "%a, %d %b %Y %T UTC"
RFC822Z_FORMAT = "%a, %d %b %Y %T %z"


__all__ = [
    "NANOS_PER_MILLI",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "EPOCH_YEAR",
    "EPOCH_WEEKDAY",
    "DAYS_PER_WEEK",
    "DAYS_PER_LEAP_YEAR",
    "DAYS_PER_NORMAL_YEAR",
    "DAYS_BEFORE_MONTH",
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "UTC_NAME",
    "UTC_OFFSET",
    "ISO8601_FORMAT",
    "RFC3339_FORMAT",
    "CTIME_FORMAT",
    "RFC822_FORMAT",
    "RFC822Z_FORMAT",
]
