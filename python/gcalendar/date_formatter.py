"""Template rendering for calendar records and epoch millisecond timestamps."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .calendar_record import CalendarRecord, decompose
from .directives import Directive, FormatError, render_pieces
from .utils import (
    CTIME_FORMAT,
    ISO8601_FORMAT,
    RFC3339_FORMAT,
    RFC822_FORMAT,
    RFC822Z_FORMAT,
)

logger = logging.getLogger(__name__)

_ESCAPE = "%"
_DEFAULT_FORMAT = ISO8601_FORMAT


class MalformedTemplate(FormatError):
    """Raised when a template ends with an unescaped ``%``."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(f"Format template ends with a dangling '%': {template!r}")


def parse_template(template: str) -> List[Union[str, Directive]]:
    """Split ``template`` into literal runs and directives, left to right."""
    pieces: List[Union[str, Directive]] = []
    literal: List[str] = []
    chars = iter(template)
    for char in chars:
        if char != _ESCAPE:
            literal.append(char)
            continue
        code = next(chars, None)
        if code is None:
            logger.debug("Rejecting template with trailing escape: %r", template)
            raise MalformedTemplate(template)
        if literal:
            pieces.append("".join(literal))
            literal = []
        pieces.append(Directive.parse(code))
    if literal:
        pieces.append("".join(literal))
    return pieces


def render(record: CalendarRecord, template: str) -> str:
    """Expand every ``%`` directive in ``template`` against ``record``."""
    return render_pieces(record, parse_template(template))


def to_iso8601(record: CalendarRecord) -> str:
    return render(record, ISO8601_FORMAT)


def to_rfc3339(record: CalendarRecord) -> str:
    return render(record, RFC3339_FORMAT)


def to_ctime(record: CalendarRecord) -> str:
    return render(record, CTIME_FORMAT)


def to_rfc822(record: CalendarRecord) -> str:
    return render(record, RFC822_FORMAT)


def to_rfc822z(record: CalendarRecord) -> str:
    return render(record, RFC822Z_FORMAT)


def format_millis(epoch_millis: int, template: Optional[str] = None) -> str:
    """Render epoch milliseconds, defaulting to ``YYYY-mm-dd HH:MM:SS``."""
    pattern = _DEFAULT_FORMAT if template is None else template
    return render(decompose(epoch_millis), pattern)


__all__ = [
    "MalformedTemplate",
    "format_millis",
    "parse_template",
    "render",
    "to_ctime",
    "to_iso8601",
    "to_rfc3339",
    "to_rfc822",
    "to_rfc822z",
]
