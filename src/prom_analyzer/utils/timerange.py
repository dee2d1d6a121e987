"""Query window helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from prom_analyzer.errors import InputError
from prom_analyzer.models import TimeRange


def get_range_date(lookback_days: int, now: datetime | None = None) -> TimeRange:
    """Compute a [start, end] window ending now and spanning lookback_days.

    Args:
        lookback_days: Window length in whole days. Callers clamp to a sane bound.
        now: Capture time, defaults to the current UTC time.

    Returns:
        TimeRange with end = now and start = now - lookback_days.

    Raises:
        InputError: If lookback_days is not positive.
    """
    if lookback_days < 1:
        raise InputError(f"Lookback must be at least 1 day, got {lookback_days}")

    now = now or datetime.now(timezone.utc)
    start = now - timedelta(days=lookback_days)
    return TimeRange(start=int(start.timestamp()), end=int(now.timestamp()))


__all__ = ["get_range_date"]
