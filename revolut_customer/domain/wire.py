"""
Wire helpers - conversions between API JSON values and Python types.
"""

from datetime import datetime, timezone
from typing import Any, Optional


def from_millis(value: Any) -> datetime:
    """
    Epoch milliseconds -> aware UTC datetime.

    Raises:
        ValueError: If value is not a timestamp datetime can hold
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected epoch milliseconds, got {value!r}")
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp {value} out of range") from exc


def to_millis(value: datetime) -> int:
    """Aware datetime -> epoch milliseconds."""
    return int(value.timestamp() * 1000)


def optional_millis(value: Any) -> Optional[datetime]:
    """Like from_millis, but None stays None."""
    return from_millis(value) if value is not None else None
