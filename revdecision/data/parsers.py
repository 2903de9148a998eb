"""
Row-level parsers for mapping decoded spreadsheet rows to revenue records.

Spreadsheet headers vary between exports, so each field is looked up through
a prioritized list of candidate header names matched against a
case-normalized view of the row.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence

from ..errors import MalformedDataError, MissingDataError
from ..utils.time import (
    date_to_utc,
    ensure_utc,
    from_spreadsheet_serial,
    parse_day_first_date,
    parse_iso_timestamp,
)
from .models import RevenueRecord

_AMOUNT_NOISE = re.compile(r"[^\d.,-]")


def normalize_header(header: Any) -> str:
    """Lower-case and collapse whitespace/underscores in a header name."""
    text = str(header).strip().lower()
    return " ".join(text.replace("_", " ").split())


def normalize_row(row: Mapping[Any, Any]) -> dict[str, Any]:
    """
    Build a header-normalized view of a row.

    The first occurrence wins when two headers normalize to the same key.
    """
    normalized: dict[str, Any] = {}
    for header, value in row.items():
        if header is None:
            continue
        normalized.setdefault(normalize_header(header), value)
    return normalized


def pick_field(row: Mapping[str, Any], candidates: Sequence[str]) -> Optional[Any]:
    """
    Return the first non-empty value among candidate headers.

    Args:
        row: Header-normalized row (see normalize_row)
        candidates: Header names in priority order

    Returns:
        Cell value, or None when no candidate has a value
    """
    for candidate in candidates:
        value = row.get(normalize_header(candidate))
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def parse_amount(value: Any) -> float:
    """
    Parse a revenue cell into a float.

    Accepts numbers and strings with currency symbols, thousands separators
    and either '.' or ',' as the decimal mark.

    Raises:
        MalformedDataError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise MalformedDataError("Boolean is not an amount", raw_data=str(value))

    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        text = _AMOUNT_NOISE.sub("", str(value))
        if not text or text in {"-", ".", ","}:
            raise MalformedDataError(
                "Amount has no digits", raw_data=str(value), expected_format="number"
            )

        has_comma = "," in text
        has_dot = "." in text
        if has_comma and has_dot:
            # The right-most separator is the decimal mark
            if text.rfind(",") > text.rfind("."):
                text = text.replace(".", "").replace(",", ".")
            else:
                text = text.replace(",", "")
        elif has_comma:
            text = text.replace(",", ".") if text.count(",") == 1 else text.replace(",", "")
        elif has_dot and text.count(".") > 1:
            text = text.replace(".", "")

        try:
            amount = float(text)
        except ValueError:
            raise MalformedDataError(
                f"Unparseable amount: {value!r}", raw_data=str(value), expected_format="number"
            )

    if math.isnan(amount) or math.isinf(amount):
        raise MalformedDataError(f"Non-finite amount: {value!r}", raw_data=str(value))

    return amount


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a date cell into a UTC datetime.

    Supports datetime/date objects, ISO-8601 text, day-first text and
    spreadsheet serial day numbers (as numbers or numeric text).

    Raises:
        MalformedDataError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, date):
        return date_to_utc(value)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = from_spreadsheet_serial(float(value))
        if parsed is None:
            raise MalformedDataError(f"Serial date out of range: {value!r}", raw_data=str(value))
        return parsed

    text = str(value).strip()
    parsed = parse_iso_timestamp(text) or parse_day_first_date(text)
    if parsed is not None:
        return parsed

    try:
        serial = float(text)
    except ValueError:
        raise MalformedDataError(
            f"Unparseable date: {value!r}", raw_data=text, expected_format="ISO-8601"
        )

    parsed = from_spreadsheet_serial(serial)
    if parsed is None:
        raise MalformedDataError(f"Serial date out of range: {value!r}", raw_data=text)
    return parsed


def parse_revenue_row(
    row: Mapping[Any, Any],
    date_keys: Sequence[str],
    revenue_keys: Sequence[str],
) -> RevenueRecord:
    """
    Map one decoded row to a RevenueRecord.

    Args:
        row: Raw row keyed by header
        date_keys: Candidate date headers in priority order
        revenue_keys: Candidate revenue headers in priority order

    Returns:
        RevenueRecord with strictly positive revenue

    Raises:
        MissingDataError: If no candidate header has a value
        MalformedDataError: If a value cannot be parsed or revenue is not positive
    """
    normalized = normalize_row(row)

    raw_date = pick_field(normalized, date_keys)
    if raw_date is None:
        raise MissingDataError("No date column found", data_type="date", candidates=tuple(date_keys))

    raw_revenue = pick_field(normalized, revenue_keys)
    if raw_revenue is None:
        raise MissingDataError(
            "No revenue column found", data_type="revenue", candidates=tuple(revenue_keys)
        )

    timestamp = parse_timestamp(raw_date)
    revenue = parse_amount(raw_revenue)

    if revenue <= 0:
        raise MalformedDataError(
            f"Revenue must be positive, got {revenue}", raw_data=str(raw_revenue)
        )

    return RevenueRecord.from_timestamp(timestamp, revenue)
