"""Timezone helpers.

Every timestamp that leaves this service (search result created_at, audit
event timestamps) is timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime. Default search clock."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a datetime read from the database to aware UTC.

    SQLite hands back naive values for DateTime(timezone=True) columns; those
    are taken to already be UTC. Aware values are converted. None passes through.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_isoformat(dt: datetime) -> str:
    """ISO-8601 string of dt in UTC (naive values are taken as UTC)."""
    aware = ensure_utc(dt)
    assert aware is not None
    return aware.isoformat()
