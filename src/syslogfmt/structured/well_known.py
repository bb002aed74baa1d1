"""The three IANA-registered SD-IDs of RFC 5424 §7.

    [timeQuality tzKnown="1" isSynced="1" syncAccuracy="60000"]
    [origin ip="192.0.2.1" enterpriseId="32473" software="app" swVersion="1.0"]
    [meta sequenceId="42" sysUpTime="3" language="en"]

Out-of-range numbers are saturated rather than rejected. The clamp happens
during ``serialize()`` and is written back to the record, so a second call
sees the clamped value.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .element import SD_BEGIN, SD_END, format_param

TIME_QUALITY = "timeQuality"
ORIGIN = "origin"
META = "meta"

INT32_MAX = 2147483647

SEQUENCE_ID_MIN = 0
SEQUENCE_ID_MAX = INT32_MAX
SYS_UP_TIME_MIN = 0
SYS_UP_TIME_MAX = 9


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(int(value), high))


@dataclass
class TimeQuality:
    tz_known: bool = False
    is_synced: bool = False
    sync_accuracy: int = 0

    def serialize(self) -> str:
        if self.sync_accuracy > INT32_MAX:
            self.sync_accuracy = INT32_MAX
        out = (
            SD_BEGIN + TIME_QUALITY
            + format_param("tzKnown", int(bool(self.tz_known)))
            + format_param("isSynced", int(bool(self.is_synced)))
        )
        if self.is_synced and self.sync_accuracy > 0:
            out += format_param("syncAccuracy", self.sync_accuracy)
        return out + SD_END


@dataclass
class Origin:
    ip: list[str] = field(default_factory=list)
    enterprise_id: str = ""
    software: str = ""
    sw_version: str = ""

    def serialize(self) -> str:
        ips = "".join(format_param("ip", addr) for addr in self.ip)
        return (
            SD_BEGIN + ORIGIN + ips
            + format_param("enterpriseId", self.enterprise_id)
            + format_param("software", self.software)
            + format_param("swVersion", self.sw_version)
            + SD_END
        )


@dataclass
class Meta:
    sequence_id: int = 0
    sys_up_time: int = 0
    language: str = ""

    def serialize(self) -> str:
        self.sequence_id = _clamp(self.sequence_id, SEQUENCE_ID_MIN, SEQUENCE_ID_MAX)
        self.sys_up_time = _clamp(self.sys_up_time, SYS_UP_TIME_MIN, SYS_UP_TIME_MAX)
        return (
            SD_BEGIN + META
            + format_param("sequenceId", self.sequence_id)
            + format_param("sysUpTime", self.sys_up_time)
            + format_param("language", self.language)
            + SD_END
        )


@dataclass
class WellKnownSDIDs:
    """Optional timeQuality / origin / meta records attached to one message."""

    time_quality: TimeQuality | None = None
    origin: Origin | None = None
    meta: Meta | None = None

    def serialize(self) -> str:
        """Non-empty result carries one leading space."""
        parts = [r.serialize() for r in (self.time_quality, self.origin, self.meta) if r is not None]
        out = "".join(parts)
        return " " + out if out else ""

    def __str__(self) -> str:
        return self.serialize()
