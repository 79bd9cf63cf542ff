from datetime import datetime, UTC


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare against the clock."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
