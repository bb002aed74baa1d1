"""Tests for timestamp rendering."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from syslogfmt.timestamps import (
    LAYOUT_BSD,
    LAYOUT_RFC3339,
    TimestampPrecision,
    coerce_precision,
    render_timestamp,
)

PLUS_TWO = timezone(timedelta(hours=2))
MINUS_FIVE_THIRTY = timezone(-timedelta(hours=5, minutes=30))


class TestRFC3339:
    @pytest.mark.parametrize("precision,expected", [
        (TimestampPrecision.NONE, "2025-08-01T10:00:05Z"),
        (TimestampPrecision.MILLI, "2025-08-01T10:00:05.123Z"),
        (TimestampPrecision.MICRO, "2025-08-01T10:00:05.123456Z"),
        ("milli", "2025-08-01T10:00:05.123Z"),
        ("bogus", "2025-08-01T10:00:05Z"),
        (None, "2025-08-01T10:00:05Z"),
    ])
    def test_precision(self, fixed_now: datetime, precision, expected: str) -> None:
        assert render_timestamp(fixed_now, utc=True, precision=precision) == expected

    def test_local_offset_kept(self, fixed_now: datetime) -> None:
        local = fixed_now.astimezone(PLUS_TWO)
        assert render_timestamp(local, layout=LAYOUT_RFC3339) == "2025-08-01T12:00:05+02:00"

    def test_negative_offset(self, fixed_now: datetime) -> None:
        local = fixed_now.astimezone(MINUS_FIVE_THIRTY)
        assert render_timestamp(local) == "2025-08-01T04:30:05-05:30"

    def test_utc_conversion(self, fixed_now: datetime) -> None:
        local = fixed_now.astimezone(PLUS_TWO)
        assert render_timestamp(local, utc=True) == "2025-08-01T10:00:05Z"

    def test_naive_treated_as_local(self) -> None:
        naive = datetime(2025, 8, 1, 10, 0, 5)
        out = render_timestamp(naive)
        assert out.startswith("2025-08-01T10:00:05")
        assert out.endswith("Z") or out[-6] in "+-"

    def test_zero_milliseconds_padded(self) -> None:
        dt = datetime(2025, 1, 2, 3, 4, 5, 7000, tzinfo=timezone.utc)
        assert render_timestamp(dt, precision="milli") == "2025-01-02T03:04:05.007Z"


class TestBSD:
    def test_day_space_padded(self, fixed_now: datetime) -> None:
        assert render_timestamp(fixed_now, layout=LAYOUT_BSD) == "Aug  1 10:00:05"

    def test_two_digit_day(self) -> None:
        dt = datetime(2025, 12, 15, 23, 59, 59, tzinfo=timezone.utc)
        assert render_timestamp(dt, layout=LAYOUT_BSD) == "Dec 15 23:59:59"

    def test_fractions(self, fixed_now: datetime) -> None:
        assert render_timestamp(fixed_now, layout=LAYOUT_BSD, precision="milli") == "Aug  1 10:00:05.123"
        assert render_timestamp(fixed_now, layout=LAYOUT_BSD, precision="micro") == "Aug  1 10:00:05.123456"

    def test_utc_conversion(self, fixed_now: datetime) -> None:
        local = fixed_now.astimezone(PLUS_TWO)
        assert render_timestamp(local, layout=LAYOUT_BSD) == "Aug  1 12:00:05"
        assert render_timestamp(local, utc=True, layout=LAYOUT_BSD) == "Aug  1 10:00:05"


@pytest.mark.parametrize("raw,expected", [
    ("none", TimestampPrecision.NONE),
    ("MILLI", TimestampPrecision.MILLI),
    (" micro ", TimestampPrecision.MICRO),
    (TimestampPrecision.MICRO, TimestampPrecision.MICRO),
    ("nano", TimestampPrecision.NONE),
    ("", TimestampPrecision.NONE),
])
def test_coerce_precision(raw, expected: TimestampPrecision) -> None:
    assert coerce_precision(raw) is expected
