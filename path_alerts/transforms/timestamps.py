"""
Station Timestamp Parsing

Turns the date and time labels posted on a station block into Unix seconds.
"""

import calendar
from datetime import datetime

# Format: 11/25/2025 11:21 PM
POSTED_FORMATS = (
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%y %I:%M %p",
    "%m/%d/%Y %I:%M%p",
    "%m/%d/%y %I:%M%p",
)


def resolve_timestamp(date_str: str, time_str: str, fallback: int) -> int:
    """Parse a posted date/time pair into a Unix timestamp.

    The wall-clock value is read as UTC; the publisher's local timezone
    is not applied.

    Args:
        date_str: Date label, e.g. "11/25/2025" (may be empty)
        time_str: Time label, e.g. "11:21 PM" (may be empty)
        fallback: Value returned when the pair does not parse

    Returns:
        Unix timestamp in seconds
    """
    full_date_str = f"{date_str} {time_str}"
    for fmt in POSTED_FORMATS:
        try:
            parsed = datetime.strptime(full_date_str, fmt)
        except ValueError:
            continue
        return calendar.timegm(parsed.timetuple())
    return fallback
