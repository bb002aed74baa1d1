"""Shared pytest fixtures for syslogfmt tests."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from syslogfmt.fields import ProcessInfo

FIXED_NOW = datetime(2025, 8, 1, 10, 0, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def clock():
    """Return a clock callable pinned to FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture()
def process() -> ProcessInfo:
    return ProcessInfo(hostname="testhost", program="/usr/local/bin/testprog", pid=4242)


@pytest.fixture()
def no_hostname(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the local host-name lookup fail."""

    def _fail() -> str:
        raise OSError("name lookup failed")

    monkeypatch.setattr("socket.gethostname", _fail)
