"""Epoch-millisecond to Gregorian calendar conversion with strftime-style output."""

from .calendar_record import CalendarRecord, decompose, is_leap_year, year_length
from .clock import FixedClock, NowSource, now, system_millis
from .date_formatter import (
    MalformedTemplate,
    format_millis,
    parse_template,
    render,
    to_ctime,
    to_iso8601,
    to_rfc3339,
    to_rfc822,
    to_rfc822z,
)
from .directives import (
    Directive,
    FieldOutOfRange,
    FormatError,
    UnsupportedDirective,
    format_directive,
    iso_week,
    iso_week_days,
    mktime,
    render_pieces,
    to_epoch_millis,
    ydhms_diff,
)

__all__ = [
    "CalendarRecord",
    "decompose",
    "is_leap_year",
    "year_length",
    "FixedClock",
    "NowSource",
    "now",
    "system_millis",
    "MalformedTemplate",
    "format_millis",
    "parse_template",
    "render",
    "to_ctime",
    "to_iso8601",
    "to_rfc3339",
    "to_rfc822",
    "to_rfc822z",
    "Directive",
    "FieldOutOfRange",
    "FormatError",
    "UnsupportedDirective",
    "format_directive",
    "iso_week",
    "iso_week_days",
    "mktime",
    "render_pieces",
    "to_epoch_millis",
    "ydhms_diff",
]
