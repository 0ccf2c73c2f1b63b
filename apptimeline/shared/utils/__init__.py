from apptimeline.shared.utils.datetime import (
    ensure_utc,
    from_timestamp_ms_utc,
    to_timestamp_ms,
)

__all__ = [
    "ensure_utc",
    "to_timestamp_ms",
    "from_timestamp_ms_utc",
]
