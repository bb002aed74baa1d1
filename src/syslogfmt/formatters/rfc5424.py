"""IETF syslog protocol (RFC 5424) lines.

    <PRI>1 TIMESTAMP HOSTNAME APP-NAME PROCID MSGID STRUCTURED-DATA [MSG]

e.g.::

    <27>1 2025-08-01T10:00:00.123Z web01 api 4242 login - user signed in
    <27>1 2025-08-01T10:00:00.123Z web01 api 4242 login [req id="7"] [meta sequenceId="1" ...]

The well-known SD-IDs (timeQuality, origin, meta) follow the custom
structured data, separated by a single space.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..fields import (
    ProcessInfo,
    current_pid,
    normalize_app_name,
    normalize_hostname,
    normalize_message_id,
)
from ..priority import Facility
from ..structured.element import StructuredDataSet, StructuredElement
from ..structured.well_known import Meta, Origin, TimeQuality, WellKnownSDIDs
from ..timestamps import LAYOUT_RFC3339, TimestampPrecision, render_timestamp
from .base import Clock, HeaderBuilder

RFC5424_VERSION = 1
RFC5424_HEADER_FORMAT = "<{pri}>{version} {timestamp} {hostname} {app_name} {pid} {message_id}"


@dataclass
class RFC5424Header:
    hostname: str = ""
    app_name: str = ""
    message_id: str = ""

    def normalized(self, process: ProcessInfo | None = None) -> "RFC5424Header":
        return RFC5424Header(
            hostname=normalize_hostname(self.hostname, nil_on_failure=True, process=process),
            app_name=normalize_app_name(self.app_name, process),
            message_id=normalize_message_id(self.message_id),
        )


class RFC5424Formatter(HeaderBuilder):
    """Builder for RFC 5424 messages with optional structured data.

    Usage::

        fmt = RFC5424Formatter(hostname="web01", app_name="api", message_id="login")
        fmt.add_structured_data(StructuredElement("req@32473", {"id": 7}))
        fmt.set_meta(Meta(sequence_id=1))
        line = fmt.render(Severity.INFO, "user signed in")
        fmt.close()
    """

    name = "rfc5424"

    def __init__(
        self,
        facility: Facility | int = Facility.DAEMON,
        hostname: str = "",
        app_name: str = "",
        message_id: str = "",
        timestamp_is_utc: bool = True,
        timestamp_level: TimestampPrecision | str = TimestampPrecision.MILLI,
        structured_data: StructuredDataSet | None = None,
        well_known: WellKnownSDIDs | None = None,
        process: ProcessInfo | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(facility, timestamp_is_utc, timestamp_level, process, clock)
        self.header: RFC5424Header | None = RFC5424Header(
            hostname=hostname, app_name=app_name, message_id=message_id,
        )
        self.structured_data: StructuredDataSet | None = (
            structured_data if structured_data is not None else StructuredDataSet()
        )
        self.well_known: WellKnownSDIDs | None = (
            well_known if well_known is not None else WellKnownSDIDs()
        )

    # ------------------------------------------------------------------
    # Header fields
    # ------------------------------------------------------------------

    def set_hostname(self, hostname: str) -> None:
        self._check_open()
        self.header.hostname = hostname

    def set_app_name(self, app_name: str) -> None:
        self._check_open()
        self.header.app_name = app_name

    def set_tag(self, tag: str) -> None:
        """The tag is carried as the MSGID field."""
        self._check_open()
        self.header.message_id = tag

    # ------------------------------------------------------------------
    # Structured data
    # ------------------------------------------------------------------

    def add_structured_data(self, element: StructuredElement) -> None:
        self._check_open()
        self.structured_data.add(element)

    def set_structured_data(self, element: StructuredElement) -> None:
        """Replace all custom elements with *element*."""
        self._check_open()
        self.structured_data.clear()
        self.structured_data.add(element)

    def set_structured_data_ids(self, ids: WellKnownSDIDs) -> None:
        self._check_open()
        self.well_known = ids

    def set_time_quality(self, record: TimeQuality | None) -> None:
        self._check_open()
        self.well_known.time_quality = record

    def set_origin(self, record: Origin | None) -> None:
        self._check_open()
        self.well_known.origin = record

    def set_meta(self, record: Meta | None) -> None:
        self._check_open()
        self.well_known.meta = record

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def timestamp(self, when: datetime) -> str:
        return render_timestamp(
            when, utc=self.timestamp_is_utc, precision=self.timestamp_level, layout=LAYOUT_RFC3339,
        )

    def header_string(self, severity: int) -> str:
        self._check_open()
        header = self.header.normalized(self.process)
        return RFC5424_HEADER_FORMAT.format(
            pri=self.priority(severity),
            version=RFC5424_VERSION,
            timestamp=self.timestamp(self.now()),
            hostname=header.hostname,
            app_name=header.app_name,
            pid=current_pid(self.process),
            message_id=header.message_id,
        )

    def render(self, severity: int, message: str) -> str:
        line = (
            self.header_string(severity)
            + " "
            + self.structured_data.serialize()
            + self.well_known.serialize()
        )
        if not message:
            return line
        return f"{line} {message}"

    def close(self) -> None:
        self.header = None
        self.structured_data = None
        self.well_known = None
        super().close()


def rfc5424_formatter(
    severity: int,
    hostname: str,
    app_name: str,
    tag: str,
    content: str,
    *,
    facility: Facility | int = Facility.DAEMON,
) -> str:
    """One-shot RFC 5424 line: UTC, millisecond precision, *tag* as MSGID."""
    with RFC5424Formatter(
        facility=facility,
        hostname=hostname,
        app_name=app_name,
        message_id=tag,
        timestamp_is_utc=True,
        timestamp_level=TimestampPrecision.MILLI,
    ) as fmt:
        return fmt.render(severity, content)
