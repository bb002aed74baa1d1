"""Syslog facility / severity codes and the packed PRI value.

PRI = (facility & FACILITY_MASK) | (severity & SEVERITY_MASK)

Facilities are stored pre-shifted (``code << 3``) so the two halves can be
OR-ed together directly. The packed value is always saturated into
[HEADER_PRIORITY_MIN, HEADER_PRIORITY_MAX]; nothing here rejects an integer.
"""
from __future__ import annotations

from enum import IntEnum

FACILITY_MASK = 0xF8
SEVERITY_MASK = 0x07


class Severity(IntEnum):
    """Syslog severity levels (RFC 5424 §6.2.1, table 2)."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Resolve a member, integer level or case-insensitive name."""
        return _parse(cls, value, _SEVERITY_ALIASES)


class Facility(IntEnum):
    """Syslog facilities, pre-shifted into the upper five bits of PRI."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    NTP = 12 << 3
    SECURITY = 13 << 3
    CONSOLE = 14 << 3
    SOLARIS_CRON = 15 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @property
    def code(self) -> int:
        """Unshifted facility number (0-23)."""
        return self.value >> 3

    @classmethod
    def parse(cls, value: "Facility | int | str") -> "Facility":
        """Resolve a member, pre-shifted integer or case-insensitive name."""
        return _parse(cls, value, _FACILITY_ALIASES)


_SEVERITY_ALIASES: dict[str, str] = {
    "emergency": "EMERG",
    "panic": "EMERG",
    "critical": "CRIT",
    "error": "ERR",
    "warn": "WARNING",
    "informational": "INFO",
}

_FACILITY_ALIASES: dict[str, str] = {
    "kernel": "KERN",
    "solaris-cron": "SOLARIS_CRON",
    "solcron": "SOLARIS_CRON",
}

HEADER_PRIORITY_MIN = 0
HEADER_PRIORITY_MAX = (Facility.LOCAL7 & FACILITY_MASK) | (Severity.DEBUG & SEVERITY_MASK)


def _parse(enum_cls, value, aliases: dict[str, str]):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, int):
        return enum_cls(value)
    key = str(value).strip()
    if key.isdigit():
        return enum_cls(int(key))
    name = aliases.get(key.lower(), key.upper().replace("-", "_"))
    try:
        return enum_cls[name]
    except KeyError:
        known = ", ".join(m.name.lower() for m in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__.lower()} {value!r} (expected one of: {known})") from None


def clamp_priority(value: int) -> int:
    """Saturate *value* into the legal PRI range."""
    if value < HEADER_PRIORITY_MIN:
        return HEADER_PRIORITY_MIN
    if value > HEADER_PRIORITY_MAX:
        return HEADER_PRIORITY_MAX
    return int(value)


def build_priority(facility: int, severity: int) -> int:
    """Pack *facility* and *severity* into a clamped PRI value."""
    return clamp_priority((int(facility) & FACILITY_MASK) | (int(severity) & SEVERITY_MASK))
