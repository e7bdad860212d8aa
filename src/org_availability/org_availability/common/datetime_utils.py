from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def date_key(value) -> str | None:
    """Normalize a date-ish value to its ``YYYY-MM-DD`` key.

    Timestamps like ``2026-01-10T00:00:00+01:00`` keep only the calendar part so
    comparisons never depend on the embedded offset. Anything that is not a
    valid calendar date (``10.01.2026``, ``2026-13-01``) gives ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip().split("T")[0].split(" ")[0]
    try:
        return datetime.strptime(text, "%Y-%m-%d").date().isoformat()
    except ValueError:
        return None


def day_month(key: str) -> str:
    """``2026-01-10`` -> ``10.01.``"""
    _, month, day = key.split("-")
    return f"{day}.{month}."


def month_bounds(on: date) -> tuple[date, date]:
    """First and last day of the month containing ``on``."""
    first = on.replace(day=1)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    return first, date.fromordinal(next_first.toordinal() - 1)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()
