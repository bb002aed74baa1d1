"""Tests for facility/severity packing."""
from __future__ import annotations

import pytest

from syslogfmt.priority import (
    HEADER_PRIORITY_MAX,
    HEADER_PRIORITY_MIN,
    Facility,
    Severity,
    build_priority,
    clamp_priority,
)


class TestBuildPriority:
    def test_lowest_pair_is_min(self) -> None:
        assert build_priority(Facility.KERN, Severity.EMERG) == HEADER_PRIORITY_MIN

    def test_highest_pair_is_max(self) -> None:
        assert build_priority(Facility.LOCAL7, Severity.DEBUG) == HEADER_PRIORITY_MAX == 191

    def test_daemon_err(self) -> None:
        assert build_priority(Facility.DAEMON, Severity.ERR) == 27

    def test_severity_bits_masked(self) -> None:
        # facility bits carried in the severity argument are dropped
        assert build_priority(Facility.USER, Facility.MAIL | Severity.INFO) == 14

    @pytest.mark.parametrize("facility", list(Facility) + [255, 1024, -8])
    @pytest.mark.parametrize("severity", list(Severity) + [9, -1])
    def test_always_in_range(self, facility: int, severity: int) -> None:
        assert HEADER_PRIORITY_MIN <= build_priority(facility, severity) <= HEADER_PRIORITY_MAX

    def test_unmasked_overflow_saturates(self) -> None:
        assert build_priority(0xF8, Severity.DEBUG) == HEADER_PRIORITY_MAX


class TestClampPriority:
    @pytest.mark.parametrize("value,expected", [
        (HEADER_PRIORITY_MIN - 1, HEADER_PRIORITY_MIN),
        (-1000, HEADER_PRIORITY_MIN),
        (HEADER_PRIORITY_MAX + 1, HEADER_PRIORITY_MAX),
        (10_000, HEADER_PRIORITY_MAX),
        (27, 27),
    ])
    def test_saturates(self, value: int, expected: int) -> None:
        assert clamp_priority(value) == expected

    @pytest.mark.parametrize("value", [-50, 0, 100, 191, 500])
    def test_idempotent(self, value: int) -> None:
        assert clamp_priority(clamp_priority(value)) == clamp_priority(value)


class TestParse:
    @pytest.mark.parametrize("raw,expected", [
        ("err", Severity.ERR),
        ("ERROR", Severity.ERR),
        ("warn", Severity.WARNING),
        ("Debug", Severity.DEBUG),
        ("0", Severity.EMERG),
        (6, Severity.INFO),
        (Severity.ALERT, Severity.ALERT),
    ])
    def test_severity(self, raw, expected: Severity) -> None:
        assert Severity.parse(raw) is expected

    @pytest.mark.parametrize("raw,expected", [
        ("daemon", Facility.DAEMON),
        ("local3", Facility.LOCAL3),
        ("LOCAL7", Facility.LOCAL7),
        ("solaris-cron", Facility.SOLARIS_CRON),
        ("kernel", Facility.KERN),
        (Facility.AUTH, Facility.AUTH),
    ])
    def test_facility(self, raw, expected: Facility) -> None:
        assert Facility.parse(raw) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown severity"):
            Severity.parse("loud")

    def test_unshifted_facility_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            Facility.parse(3)

    def test_facility_code(self) -> None:
        assert Facility.LOCAL0.code == 16
        assert len(Facility) == 24
