"""Loose date parsing for spreadsheet input.

Spreadsheets exported from different HR and brokerage tools disagree on date
formats. Parsing tries, in order:

  1. ISO-8601 and a few unambiguous textual layouts.
  2. Slash-separated month/day/year (``03/15/2024``).
  3. Dash-separated day-month-year (``15-03-2024``).

The first layout that yields a real calendar date wins. Anything else
returns None; this module never raises.
"""

import logging
from datetime import datetime

logger = logging.getLogger(__name__)

# Layouts accepted before falling back to positional splitting
_NATIVE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: object) -> datetime | None:
    """Parse a free-form date string into a datetime, or None if unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        logger.debug("Empty date string provided")
        return None

    parsed = _parse_native(text)
    if parsed is not None:
        logger.debug("Parsed %r as native date %s", text, parsed.isoformat())
        return parsed

    parts = text.split("/")
    if len(parts) == 3:
        parsed = _from_parts(year=parts[2], month=parts[0], day=parts[1])
        if parsed is not None:
            logger.debug("Parsed %r as MM/DD/YYYY: %s", text, parsed.isoformat())
            return parsed
    else:
        parts = text.split("-")
        if len(parts) == 3:
            parsed = _from_parts(year=parts[2], month=parts[1], day=parts[0])
            if parsed is not None:
                logger.debug("Parsed %r as DD-MM-YYYY: %s", text, parsed.isoformat())
                return parsed

    logger.warning("Failed to parse date string: %r", text)
    return None


def _parse_native(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except (ValueError, OverflowError):
        pass
    for fmt in _NATIVE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except (ValueError, OverflowError):
            continue
    return None


def _from_parts(year: str, month: str, day: str) -> datetime | None:
    """Build a datetime from string components; None if any is invalid."""
    try:
        y, m, d = int(year.strip()), int(month.strip()), int(day.strip())
    except (ValueError, OverflowError):
        return None
    # Two-digit years are read as 19xx
    if 0 <= y < 100 and len(year.strip()) <= 2:
        y += 1900
    try:
        return datetime(y, m, d)
    except (ValueError, OverflowError):
        return None
