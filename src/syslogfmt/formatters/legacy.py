"""Permissive pre-RFC layouts kept for compatibility with older collectors.

    default  <PRI> TIMESTAMP HOSTNAME TAG[PID]: CONTENT   (RFC 3339, local time)
    unix     <PRI>TIMESTAMP TAG[PID]: CONTENT             (BSD stamp, no host)

Fields are passed through as given: no defaults, no truncation.
"""
from __future__ import annotations

from ..fields import ProcessInfo, current_pid
from ..priority import Facility
from ..timestamps import LAYOUT_BSD, LAYOUT_RFC3339, TimestampPrecision, render_timestamp
from .base import Clock, HeaderBuilder

DEFAULT_LINE_FORMAT = "<{pri}> {timestamp} {hostname} {tag}[{pid}]: {content}"
UNIX_LINE_FORMAT = "<{pri}>{timestamp} {tag}[{pid}]: {content}"


class DefaultFormatter(HeaderBuilder):
    """Non-compliant blend of 3164 and 5424 aimed at maximum compatibility."""

    name = "default"
    line_format = DEFAULT_LINE_FORMAT
    layout = LAYOUT_RFC3339

    def __init__(
        self,
        facility: Facility | int = Facility.DAEMON,
        hostname: str = "",
        tag: str = "",
        timestamp_is_utc: bool = False,
        timestamp_level: TimestampPrecision | str = TimestampPrecision.NONE,
        process: ProcessInfo | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(facility, timestamp_is_utc, timestamp_level, process, clock)
        self.hostname = hostname
        self.tag = tag

    def set_hostname(self, hostname: str) -> None:
        self._check_open()
        self.hostname = hostname

    def set_tag(self, tag: str) -> None:
        self._check_open()
        self.tag = tag

    def render(self, severity: int, message: str) -> str:
        self._check_open()
        timestamp = render_timestamp(
            self.now(), utc=self.timestamp_is_utc, precision=self.timestamp_level, layout=self.layout,
        )
        return self.line_format.format(
            pri=self.priority(severity),
            timestamp=timestamp,
            hostname=self.hostname,
            tag=self.tag,
            pid=current_pid(self.process),
            content=message,
        )


class UnixFormatter(DefaultFormatter):
    """Local-socket layout; the host name is left out."""

    name = "unix"
    line_format = UNIX_LINE_FORMAT
    layout = LAYOUT_BSD


def default_formatter(
    severity: int,
    hostname: str,
    app_name: str,
    tag: str,
    content: str,
    *,
    facility: Facility | int = Facility.DAEMON,
) -> str:
    with DefaultFormatter(facility=facility, hostname=hostname, tag=tag) as fmt:
        return fmt.render(severity, content)


def unix_formatter(
    severity: int,
    hostname: str,
    app_name: str,
    tag: str,
    content: str,
    *,
    facility: Facility | int = Facility.DAEMON,
) -> str:
    with UnixFormatter(facility=facility, hostname=hostname, tag=tag) as fmt:
        return fmt.render(severity, content)
