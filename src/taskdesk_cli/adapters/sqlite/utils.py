"""Value conversions for the SQLite adapter."""

from __future__ import annotations

from datetime import date


def parse_date(value: str | date) -> date:
    """Parse a stored ``YYYY-MM-DD`` value.

    Older rows may carry a time part (``YYYY-MM-DDTHH:MM:SS``); only the
    date is kept.
    """
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])
