"""
Time handling utilities for revenue record timestamps.

Spreadsheet sources deliver dates as datetime objects, ISO-8601 strings or
serial day numbers. These helpers turn all of them into UTC datetimes.
"""

from datetime import UTC, date, datetime, timedelta
from typing import Optional

# Day zero of the spreadsheet serial date system (accounts for the 1900 leap bug)
SPREADSHEET_EPOCH = datetime(1899, 12, 30, tzinfo=UTC)

# Serial numbers outside this range are not plausible business dates
MIN_SERIAL_DAY = 1
MAX_SERIAL_DAY = 2958465  # 9999-12-31


def ensure_utc(value: datetime) -> datetime:
    """
    Return a timezone-aware UTC datetime.

    Args:
        value: Naive or aware datetime; naive values are taken as UTC

    Returns:
        UTC datetime
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def from_spreadsheet_serial(serial: float) -> Optional[datetime]:
    """
    Convert a spreadsheet serial day number to a UTC datetime.

    Args:
        serial: Days since 1899-12-30, fractional part is time of day

    Returns:
        UTC datetime, or None if the serial is out of range
    """
    if serial != serial or serial < MIN_SERIAL_DAY or serial > MAX_SERIAL_DAY:
        return None
    return SPREADSHEET_EPOCH + timedelta(days=serial)


def parse_iso_timestamp(text: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time string.

    Args:
        text: Date text such as "2024-03-01" or "2024-03-01T10:00:00Z"

    Returns:
        UTC datetime, or None if the text is not ISO-8601
    """
    candidate = text.strip()
    if not candidate:
        return None

    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(candidate))
    except ValueError:
        return None


def parse_day_first_date(text: str) -> Optional[datetime]:
    """
    Parse a day-first date such as "31/12/2023" or "31-12-2023".

    Args:
        text: Date text

    Returns:
        UTC datetime at midnight, or None if the text does not match
    """
    for fmt in ("%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y"):
        try:
            return datetime.strptime(text.strip(), fmt).replace(tzinfo=UTC)
        except ValueError:
            continue
    return None


def date_to_utc(value: date) -> datetime:
    """Midnight UTC of a calendar date."""
    return datetime(value.year, value.month, value.day, tzinfo=UTC)


def format_timestamp(value: datetime) -> str:
    """
    Format a record timestamp for logging and serialization.

    Args:
        value: Timestamp to format

    Returns:
        ISO8601 formatted string
    """
    return ensure_utc(value).isoformat()
