"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC (timezone-aware)."""
    return datetime.now(tz=timezone.utc).date()


def ensure_tz_aware(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC if naive)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def as_date(value: date | datetime) -> date:
    """Drop the time part of a datetime, leave plain dates untouched."""
    if isinstance(value, datetime):
        return ensure_tz_aware(value).astimezone(timezone.utc).date()
    return value


def years_before(reference: date, years: int) -> date:
    """Return the same calendar day ``years`` years before ``reference``.

    February 29th falls back to February 28th in non-leap target years.
    """
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)
