"""
File: dates.py
Purpose: ISO-8601 parsing and calendar-date formatting for reservation dates.
"""
from datetime import date, datetime, timezone


def _utc_date(value):
    """Calendar date of an aware datetime in UTC, or None if UTC falls outside year 1..9999."""
    try:
        return value.astimezone(timezone.utc).date()
    except OverflowError:
        return None


def parse_iso_date(value):
    """
    Parses an ISO-8601 date or date-time string into a calendar date.
    Date-times with an offset are converted to UTC first; naive ones are taken as UTC.
    Returns None when the value is not a valid ISO-8601 string or its UTC date is out of range.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        return _utc_date(parsed)
    return parsed.date()


def to_calendar_date(value):
    """Renders a DATE/DATETIME column value as 'YYYY-MM-DD' (no time, no offset)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            utc = _utc_date(value)
            return (utc or value.date()).isoformat()
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    parsed = parse_iso_date(str(value))
    return parsed.isoformat() if parsed else str(value)
