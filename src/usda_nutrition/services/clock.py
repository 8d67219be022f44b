"""Calendar helpers for date-keyed stores."""

from datetime import UTC, date, datetime, timedelta


def utc_today() -> date:
    """Return the UTC calendar date of the current instant."""
    return datetime.now(tz=UTC).date()


def days_ago(today: date, days: int) -> date:
    """Return the date ``days`` calendar days before ``today``."""
    return today - timedelta(days=days)
