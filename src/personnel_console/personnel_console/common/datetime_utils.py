from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value, field_name: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value or "").strip())
    except ValueError:
        raise ValidationError("Invalid date", {field_name: ["Expected a date in YYYY-MM-DD format."]})


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)
