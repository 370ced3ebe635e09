# src/core/commands/datetime_parser.py
"""Date/time parser for user-entered timestamps.

Converts the date and date-time layouts a user types after ``/by``,
``/from`` and ``/to`` into naive datetime objects. Formats are tried in a
fixed order and the first one that matches wins; date-only input lands
on midnight.
"""

from collections.abc import Sequence
from datetime import datetime

from src.config import settings
from src.core.commands.errors import DateTimeParseError

# Human-readable layouts shown in the error message
_EXAMPLES = "yyyy-mm-dd [HHMM], d/m/yyyy [HHMM], e.g. 2024-03-01 1800 or 1/3/2024"


def parse_datetime(text: str, formats: Sequence[str] | None = None) -> datetime:
    """Parse a date or date-time string.

    Supports:
    - ISO-like: "2024-03-01 1800", "2024-03-01 18:00", "2024-03-01"
    - Day first: "1/3/2024 1800", "1/3/2024 18:00", "1/3/2024"
    - Month name: "Mar 1 2024 18:00", "Mar 1 2024"

    Args:
        text: Date/time text as typed by the user.
        formats: strptime formats to try in order. Defaults to the
            configured ``settings.datetime_formats``.

    Returns:
        Parsed naive datetime. Date-only input is set to midnight.

    Raises:
        DateTimeParseError: If no format matches.

    Examples:
        >>> parse_datetime("2024-03-01 1800")
        datetime.datetime(2024, 3, 1, 18, 0)
        >>> parse_datetime("1/3/2024")
        datetime.datetime(2024, 3, 1, 0, 0)
    """
    if formats is None:
        formats = settings.datetime_formats

    candidate = text.strip()
    if candidate:
        for fmt in formats:
            try:
                return datetime.strptime(candidate, fmt)
            except ValueError:
                continue

    raise DateTimeParseError(
        f"invalid date/time '{candidate}': expected {_EXAMPLES}", text
    )


def format_datetime(value: datetime) -> str:
    """Format a datetime for display.

    Args:
        value: Datetime to format.

    Returns:
        Formatted string like "Mar 01 2024, 6:00 PM". The open-ended list
        bounds render as "the beginning of time" / "the end of time".
    """
    if value == datetime.min:
        return "the beginning of time"
    if value == datetime.max:
        return "the end of time"

    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{value.strftime('%b %d %Y')}, {hour}:{value.strftime('%M')} {period}"
