"""BSD syslog (RFC 3164) lines.

    <PRI>TIMESTAMP HOSTNAME TAG[PID]: MESSAGE

e.g. ``<27>Aug  1 10:00:00 webserver sshd[1234]: Accepted publickey``
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..fields import ProcessInfo, current_pid, normalize_hostname, normalize_tag
from ..priority import Facility
from ..timestamps import LAYOUT_BSD, TimestampPrecision, render_timestamp
from .base import Clock, HeaderBuilder

RFC3164_HEADER_FORMAT = "<{pri}>{timestamp} {hostname} {tag}[{pid}]:"


@dataclass
class RFC3164Header:
    hostname: str = ""
    tag: str = ""

    def normalized(self, process: ProcessInfo | None = None) -> "RFC3164Header":
        """Copy with defaults applied and lengths capped."""
        return RFC3164Header(
            hostname=normalize_hostname(self.hostname, process=process),
            tag=normalize_tag(self.tag, process),
        )


class RFC3164Formatter(HeaderBuilder):
    """Builder for RFC 3164 messages.

    Usage::

        with RFC3164Formatter(hostname="web01", tag="sshd") as fmt:
            line = fmt.render(Severity.ERR, "Accepted publickey")
    """

    name = "rfc3164"

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
        self.header: RFC3164Header | None = RFC3164Header(hostname=hostname, tag=tag)

    def set_hostname(self, hostname: str) -> None:
        self._check_open()
        self.header.hostname = hostname

    def set_tag(self, tag: str) -> None:
        self._check_open()
        self.header.tag = tag

    def timestamp(self, when: datetime) -> str:
        return render_timestamp(
            when, utc=self.timestamp_is_utc, precision=self.timestamp_level, layout=LAYOUT_BSD,
        )

    def header_string(self, severity: int) -> str:
        self._check_open()
        header = self.header.normalized(self.process)
        return RFC3164_HEADER_FORMAT.format(
            pri=self.priority(severity),
            timestamp=self.timestamp(self.now()),
            hostname=header.hostname,
            tag=header.tag,
            pid=current_pid(self.process),
        )

    def render(self, severity: int, message: str) -> str:
        header = self.header_string(severity)
        if not message:
            return header
        return f"{header} {message}"

    def close(self) -> None:
        self.header = None
        super().close()


def rfc3164_formatter(
    severity: int,
    hostname: str,
    app_name: str,
    tag: str,
    content: str,
    *,
    facility: Facility | int = Facility.DAEMON,
) -> str:
    """One-shot RFC 3164 line in local time; *app_name* is unused by this layout."""
    with RFC3164Formatter(facility=facility, hostname=hostname, tag=tag) as fmt:
        return fmt.render(severity, content)
