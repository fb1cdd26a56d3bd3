"""strftime-style directive codes and their rendering against a CalendarRecord."""

from __future__ import annotations

import logging
from enum import Enum, unique
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from .calendar_record import CalendarRecord, year_length
from .utils import (
    DAYS_PER_LEAP_YEAR,
    DAYS_PER_NORMAL_YEAR,
    DAYS_PER_WEEK,
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    UTC_NAME,
    UTC_OFFSET,
    WEEKDAY_ABBREVIATIONS,
    WEEKDAY_NAMES,
)

logger = logging.getLogger(__name__)

# ISO weeks start on Monday; week 1 holds the first Thursday of the year.
ISO_WEEK_START_WEEKDAY = 1
ISO_WEEK1_WEEKDAY = 4
# Keeps the modulus operand non-negative for any yday in [-366, 365].
_BIG_ENOUGH_MULTIPLE_OF_7 = (DAYS_PER_LEAP_YEAR // DAYS_PER_WEEK + 2) * DAYS_PER_WEEK


class FormatError(ValueError):
    """Base class for template and directive failures."""


class UnsupportedDirective(FormatError):
    """Raised when a format code is not part of the directive table."""

    def __init__(self, directive: str, message: Optional[str] = None) -> None:
        self.directive = directive
        super().__init__(message or f"Unsupported format directive: %{directive}")


class FieldOutOfRange(UnsupportedDirective):
    """Raised when a name lookup receives an index outside its table."""

    def __init__(self, directive: str, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(
            directive,
            f"Cannot render %{directive}: {field}={value} is out of range",
        )


@unique
class Directive(Enum):
    WEEKDAY_NAME = "A"
    WEEKDAY_ABBR = "a"
    MONTH_NAME = "B"
    MONTH_ABBR = "b"
    MONTH_ABBR_ALT = "h"
    CENTURY = "C"
    DATE_TIME = "c"
    SHORT_DATE = "D"
    LOCALE_DATE = "x"
    DAY_OF_MONTH = "d"
    DAY_OF_MONTH_SPACE = "e"
    SUBSECOND = "f"
    ISO_DATE = "F"
    ISO_YEAR = "G"
    ISO_YEAR_SHORT = "g"
    HOUR_24 = "H"
    HOUR_12 = "I"
    DAY_OF_YEAR = "j"
    HOUR_24_SPACE = "k"
    HOUR_12_SPACE = "l"
    MINUTE = "M"
    MONTH = "m"
    NEWLINE = "n"
    TAB = "t"
    MERIDIEM_LOWER = "P"
    MERIDIEM_UPPER = "p"
    HOUR_MINUTE = "R"
    TIME_12 = "r"
    SECOND = "S"
    EPOCH_SECONDS = "s"
    TIME = "T"
    LOCALE_TIME = "X"
    WEEK_OF_YEAR_SUNDAY = "U"
    ISO_WEEKDAY = "u"
    ISO_WEEK = "V"
    DAY_MONTH_YEAR = "v"
    WEEK_OF_YEAR_MONDAY = "W"
    WEEKDAY = "w"
    YEAR = "Y"
    YEAR_SHORT = "y"
    ZONE_NAME = "Z"
    ZONE_OFFSET = "z"
    PERCENT = "%"

    @classmethod
    def parse(cls, code: str) -> "Directive":
        """Resolve a single format character, e.g. ``"Y"``."""
        try:
            return cls(code)
        except ValueError:
            logger.debug("Rejecting unsupported directive %r", code)
            raise UnsupportedDirective(code) from None


# Inverse conversion ---------------------------------------------------


def _leap_years_before(year: int) -> int:
    previous = year - 1
    return previous // 4 - previous // 100 + previous // 400


def ydhms_diff(later: CalendarRecord, earlier: CalendarRecord) -> int:
    """Seconds between two records using only year, yday and clock fields."""
    leap_days = _leap_years_before(later.year) - _leap_years_before(earlier.year)
    days = (
        DAYS_PER_NORMAL_YEAR * (later.year - earlier.year)
        + later.day_of_year
        - earlier.day_of_year
        + leap_days
    )
    hours = days * 24 + later.hour - earlier.hour
    minutes = hours * 60 + later.minute - earlier.minute
    return minutes * 60 + later.second - earlier.second


def mktime(record: CalendarRecord) -> int:
    """Whole seconds since the epoch for ``record``, which is taken as UTC."""
    return ydhms_diff(record, CalendarRecord.at_epoch())


def to_epoch_millis(record: CalendarRecord) -> int:
    return mktime(record) * 1000


# ISO-8601 week numbering ----------------------------------------------


def iso_week_days(yday: int, wday: int) -> int:
    """Days since the Monday starting ISO week 1; negative before week 1."""
    return (
        yday
        - (yday - wday + ISO_WEEK1_WEEKDAY + _BIG_ENOUGH_MULTIPLE_OF_7) % DAYS_PER_WEEK
        + ISO_WEEK1_WEEKDAY
        - ISO_WEEK_START_WEEKDAY
    )


def iso_week(record: CalendarRecord) -> Tuple[int, int]:
    """Return ``(iso_year, iso_week_number)`` for ``record``."""
    year = record.year
    days = iso_week_days(record.day_of_year, record.day_of_week)
    if days < 0:
        year -= 1
        days = iso_week_days(record.day_of_year + year_length(year), record.day_of_week)
    else:
        following = iso_week_days(
            record.day_of_year - year_length(year), record.day_of_week
        )
        if following >= 0:
            year += 1
            days = following
    return year, days // DAYS_PER_WEEK + 1


# Rendering ------------------------------------------------------------


def _lookup(names: Sequence[str], index: int, directive: Directive, field: str) -> str:
    if not 0 <= index < len(names):
        logger.debug("Rejecting %%%s lookup: %s=%d", directive.value, field, index)
        raise FieldOutOfRange(directive.value, field, index)
    return names[index]


def _weekday(names: Sequence[str], directive: Directive) -> Callable[[CalendarRecord], str]:
    return lambda record: _lookup(names, record.day_of_week, directive, "day_of_week")


def _month(names: Sequence[str], directive: Directive) -> Callable[[CalendarRecord], str]:
    return lambda record: _lookup(names, record.month - 1, directive, "month")


def _hour_12(record: CalendarRecord) -> int:
    return record.hour - 12 if record.hour > 12 else record.hour


def _hour_12_clock(record: CalendarRecord) -> int:
    if record.hour == 0:
        return 12
    return _hour_12(record)


def _week_of_year_monday(record: CalendarRecord) -> str:
    monday_based = (record.day_of_week - 1 + DAYS_PER_WEEK) % DAYS_PER_WEEK
    return f"{(record.day_of_year - monday_based + DAYS_PER_WEEK) // DAYS_PER_WEEK:02d}"


def _iso_year_short(record: CalendarRecord) -> str:
    year, _ = iso_week(record)
    return f"{(year % 100 + 100) % 100:02d}"


_Piece = Union[str, Directive]

# Directives that are spelled as a sequence of other directives.
_COMPOSITES: Dict[Directive, Tuple[_Piece, ...]] = {
    Directive.DATE_TIME: (
        Directive.WEEKDAY_ABBR,
        " ",
        Directive.MONTH_ABBR,
        " ",
        Directive.DAY_OF_MONTH_SPACE,
        " ",
        Directive.TIME,
        " ",
        Directive.YEAR,
    ),
    Directive.SHORT_DATE: (
        Directive.MONTH,
        "/",
        Directive.DAY_OF_MONTH,
        "/",
        Directive.YEAR_SHORT,
    ),
    Directive.ISO_DATE: (
        Directive.YEAR,
        "-",
        Directive.MONTH,
        "-",
        Directive.DAY_OF_MONTH,
    ),
    Directive.HOUR_MINUTE: (Directive.HOUR_24, ":", Directive.MINUTE),
    Directive.TIME_12: (
        Directive.HOUR_12,
        ":",
        Directive.MINUTE,
        ":",
        Directive.SECOND,
        " ",
        Directive.MERIDIEM_UPPER,
    ),
    Directive.TIME: (
        Directive.HOUR_24,
        ":",
        Directive.MINUTE,
        ":",
        Directive.SECOND,
    ),
    Directive.DAY_MONTH_YEAR: (
        Directive.DAY_OF_MONTH_SPACE,
        "-",
        Directive.MONTH_ABBR,
        "-",
        Directive.YEAR,
    ),
}
_COMPOSITES[Directive.LOCALE_DATE] = _COMPOSITES[Directive.SHORT_DATE]
_COMPOSITES[Directive.LOCALE_TIME] = _COMPOSITES[Directive.TIME]


_RENDERERS: Dict[Directive, Callable[[CalendarRecord], str]] = {
    Directive.WEEKDAY_NAME: _weekday(WEEKDAY_NAMES, Directive.WEEKDAY_NAME),
    Directive.WEEKDAY_ABBR: _weekday(WEEKDAY_ABBREVIATIONS, Directive.WEEKDAY_ABBR),
    Directive.MONTH_NAME: _month(MONTH_NAMES, Directive.MONTH_NAME),
    Directive.MONTH_ABBR: _month(MONTH_ABBREVIATIONS, Directive.MONTH_ABBR),
    Directive.MONTH_ABBR_ALT: _month(MONTH_ABBREVIATIONS, Directive.MONTH_ABBR_ALT),
    Directive.CENTURY: lambda r: f"{r.year // 100:02d}",
    Directive.DAY_OF_MONTH: lambda r: f"{r.day_of_month:02d}",
    Directive.DAY_OF_MONTH_SPACE: lambda r: f"{r.day_of_month:2d}",
    # Whole seconds stand in for the missing sub-second field.
    Directive.SUBSECOND: lambda r: f"{r.second:09d}",
    Directive.ISO_YEAR: lambda r: str(iso_week(r)[0]),
    Directive.ISO_YEAR_SHORT: _iso_year_short,
    Directive.HOUR_24: lambda r: f"{r.hour:02d}",
    Directive.HOUR_12: lambda r: f"{_hour_12(r):02d}",
    Directive.DAY_OF_YEAR: lambda r: f"{r.day_of_year + 1:03d}",
    Directive.HOUR_24_SPACE: lambda r: f"{r.hour:2d}",
    Directive.HOUR_12_SPACE: lambda r: f"{_hour_12_clock(r):2d}",
    Directive.MINUTE: lambda r: f"{r.minute:02d}",
    Directive.MONTH: lambda r: f"{r.month:02d}",
    Directive.NEWLINE: lambda r: "\n",
    Directive.TAB: lambda r: "\t",
    Directive.MERIDIEM_LOWER: lambda r: "am" if r.hour < 12 else "pm",
    Directive.MERIDIEM_UPPER: lambda r: "AM" if r.hour < 12 else "PM",
    Directive.SECOND: lambda r: f"{r.second:02d}",
    Directive.EPOCH_SECONDS: lambda r: str(mktime(r)),
    Directive.WEEK_OF_YEAR_SUNDAY: lambda r: (
        f"{(r.day_of_year - r.day_of_week + DAYS_PER_WEEK) // DAYS_PER_WEEK:02d}"
    ),
    Directive.ISO_WEEKDAY: lambda r: str(7 if r.day_of_week == 0 else r.day_of_week),
    Directive.ISO_WEEK: lambda r: f"{iso_week(r)[1]:02d}",
    Directive.WEEK_OF_YEAR_MONDAY: _week_of_year_monday,
    Directive.WEEKDAY: lambda r: str(r.day_of_week),
    Directive.YEAR: lambda r: str(r.year),
    Directive.YEAR_SHORT: lambda r: f"{r.year % 100:02d}",
    Directive.ZONE_NAME: lambda r: UTC_NAME,
    Directive.ZONE_OFFSET: lambda r: UTC_OFFSET,
    Directive.PERCENT: lambda r: "%",
}


def render_pieces(record: CalendarRecord, pieces: Sequence[_Piece]) -> str:
    """Join literal strings and rendered directives in order."""
    return "".join(
        piece if isinstance(piece, str) else format_directive(record, piece)
        for piece in pieces
    )


def format_directive(record: CalendarRecord, directive: Union[str, Directive]) -> str:
    """Render one directive, given as a ``Directive`` or its format character.

    Raises ``UnsupportedDirective`` for unknown characters and
    ``FieldOutOfRange`` when a weekday or month name cannot be looked up.
    """
    if not isinstance(directive, Directive):
        directive = Directive.parse(directive)
    composite = _COMPOSITES.get(directive)
    if composite is not None:
        return render_pieces(record, composite)
    return _RENDERERS[directive](record)


__all__ = [
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
