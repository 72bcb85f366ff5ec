"""Date conversion between the UI display format and the store's wire format.

The UI always shows and edits DD/MM/YYYY. The remote store expects either
MM/DD/YYYY or ISO YYYY-MM-DD, depending on deployment. Both slash formats
look alike, so a slash value is only treated as already being in wire form
when reading it as DD/MM would give a month above 12. Dates whose day and
month are both <= 12 cannot be told apart; they are always read as DD/MM
and logged as ambiguous.
"""

import logging
import re
from datetime import date

from user_directory.domain.dates import DisplayDate, WireDate
from user_directory.domain.exceptions import FormatError

logger = logging.getLogger(__name__)

DISPLAY_FORMAT = "DD/MM/YYYY"
WIRE_FORMAT_MDY = "MM/DD/YYYY"
WIRE_FORMAT_ISO = "YYYY-MM-DD"

_DISPLAY_RE = re.compile(r"^(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/(\d{4})\Z")
_SLASH_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})\Z")
# Date part of an ISO date or date-time ("1990-06-15T00:00:00.000Z").
_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ][0-9:.]*(?:Z|[+-]\d{2}:?\d{2})?)?\Z")

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _calendar_date(year: int, month: int, day: int) -> date | None:
    """Return the date if the components name a real calendar day."""
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _format_display(value: date) -> DisplayDate:
    return DisplayDate(f"{value.day:02d}/{value.month:02d}/{value.year:04d}")


def parse_display_date(value: str) -> date:
    """Parse a DD/MM/YYYY string, rejecting impossible dates like 31/02."""
    match = _DISPLAY_RE.match(value)
    if match is None:
        raise FormatError(value, DISPLAY_FORMAT)
    day, month, year = (int(part) for part in match.groups())
    parsed = _calendar_date(year, month, day)
    if parsed is None:
        raise FormatError(value, "a real calendar date")
    return parsed


def is_ambiguous(value: str) -> bool:
    """True when a slash date reads validly both as DD/MM and as MM/DD."""
    match = _SLASH_RE.match(value)
    if match is None:
        return False
    first, second, _ = (int(part) for part in match.groups())
    return 1 <= first <= 12 and 1 <= second <= 12 and first != second


class DateFormatter:
    """Converts dates of birth between display and wire form.

    ``to_display(to_wire(d)) == d`` for every valid DD/MM/YYYY date ``d``.
    """

    def __init__(self, wire_format: str = WIRE_FORMAT_MDY):
        if wire_format not in (WIRE_FORMAT_MDY, WIRE_FORMAT_ISO):
            raise ValueError(f"Unsupported wire date format: {wire_format}")
        self.wire_format = wire_format

    def _format_wire(self, value: date) -> WireDate:
        if self.wire_format == WIRE_FORMAT_ISO:
            return WireDate(value.isoformat())
        return WireDate(f"{value.month:02d}/{value.day:02d}/{value.year:04d}")

    def to_wire(self, display: str) -> WireDate:
        """Convert a DD/MM/YYYY date to the store's format.

        A slash value that is not a valid display date but is a valid
        MM/DD/YYYY date (second part above 12) is taken as already
        converted. With an ISO wire format a valid ISO date passes through.
        """
        if _DISPLAY_RE.match(display):
            parsed = parse_display_date(display)
            if is_ambiguous(display):
                logger.debug("Ambiguous date %s read as %s", display, DISPLAY_FORMAT)
            return self._format_wire(parsed)

        match = _SLASH_RE.match(display)
        if match is not None:
            month, day, year = (int(part) for part in match.groups())
            parsed = _calendar_date(year, month, day) if day > 12 else None
            if parsed is not None:
                logger.debug("Date %s is already %s", display, WIRE_FORMAT_MDY)
                return self._format_wire(parsed)
            raise FormatError(display, DISPLAY_FORMAT)

        if self.wire_format == WIRE_FORMAT_ISO:
            match = _ISO_RE.match(display)
            if match is not None:
                year, month, day = (int(part) for part in match.groups())
                parsed = _calendar_date(year, month, day)
                if parsed is not None:
                    return self._format_wire(parsed)

        raise FormatError(display, DISPLAY_FORMAT)

    def to_display(self, wire: str) -> DisplayDate:
        """Convert an MM/DD/YYYY or ISO date (or date-time) to DD/MM/YYYY."""
        match = _ISO_RE.match(wire)
        if match is not None:
            year, month, day = (int(part) for part in match.groups())
            parsed = _calendar_date(year, month, day)
            if parsed is None:
                raise FormatError(wire, WIRE_FORMAT_ISO)
            return _format_display(parsed)

        match = _SLASH_RE.match(wire)
        if match is None:
            raise FormatError(wire, f"{WIRE_FORMAT_MDY} or {WIRE_FORMAT_ISO}")

        first, second, year = (int(part) for part in match.groups())
        parsed = _calendar_date(year, first, second)
        if parsed is not None:
            return _format_display(parsed)

        # Already DD/MM (first part above 12)
        parsed = _calendar_date(year, second, first)
        if parsed is not None and first > 12:
            return _format_display(parsed)

        raise FormatError(wire, WIRE_FORMAT_MDY)


def mask_date_input(raw: str) -> str:
    """Keystroke mask for the date field: digits only, shaped as DD/MM/YYYY."""
    digits = re.sub(r"\D", "", raw)
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:8]}"


def format_date_label(display: str) -> str:
    """Human label for the list view, e.g. ``Jun 15, 1990``."""
    try:
        parsed = parse_display_date(display)
    except FormatError:
        return display
    return f"{_MONTH_ABBR[parsed.month - 1]} {parsed.day}, {parsed.year}"
