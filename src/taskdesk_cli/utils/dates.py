"""Date parsing and normalisation helpers."""

from __future__ import annotations

from datetime import date, datetime

from taskdesk_cli.models.outcome import Invalid, Ok

DATE_FORMAT = "%Y-%m-%d"


def parse_deadline(value: str | date | None) -> Ok[date] | Invalid:
    """Parse a deadline given as ``YYYY-MM-DD`` text.

    Args:
        value: Raw text, an existing date, or None

    Returns:
        Ok with the parsed date, or Invalid describing the problem
    """
    if isinstance(value, datetime):
        return Ok(value.date())
    if isinstance(value, date):
        return Ok(value)
    if value is None or not value.strip():
        return Invalid("Deadline is required (YYYY-MM-DD)")
    try:
        return Ok(datetime.strptime(value.strip(), DATE_FORMAT).date())
    except ValueError:
        return Invalid(f"Invalid date '{value.strip()}', expected YYYY-MM-DD")


def as_date(value: date | datetime | None) -> date:
    """Reduce a datetime to its calendar date; None means today."""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    return value
