"""Tests for query window computation."""

from __future__ import annotations

import time
from datetime import datetime, timezone

import pytest

from prom_analyzer.errors import InputError
from prom_analyzer.utils import get_range_date


@pytest.mark.parametrize("days", [1, 7, 8, 30, 90, 364, 365])
def test_window_length(days: int) -> None:
    time_range = get_range_date(days)
    assert time_range.end - time_range.start == days * 86400
    assert time_range.days == days


def test_all_supported_lookbacks() -> None:
    for days in range(1, 366):
        time_range = get_range_date(days)
        assert time_range.end - time_range.start == days * 86400


def test_end_is_now() -> None:
    before = int(time.time())
    time_range = get_range_date(8)
    after = int(time.time())
    assert before <= time_range.end <= after


def test_explicit_now() -> None:
    now = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    time_range = get_range_date(1, now=now)
    assert time_range.end == 1700000000
    assert time_range.start == 1700000000 - 86400


@pytest.mark.parametrize("days", [0, -1])
def test_rejects_non_positive_lookback(days: int) -> None:
    with pytest.raises(InputError):
        get_range_date(days)
