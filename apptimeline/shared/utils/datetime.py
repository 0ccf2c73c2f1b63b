"""Epoch-millisecond helpers. Timeline timestamps travel as integer millis."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC"""
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def to_timestamp_ms(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds"""
    return (ensure_utc(value) - EPOCH) // timedelta(milliseconds=1)


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime"""
    return EPOCH + timedelta(milliseconds=timestamp_ms)
