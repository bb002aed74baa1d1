"""Formatter Protocol and the lifecycle shared by the header builders."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Protocol, runtime_checkable

from ..fields import ProcessInfo
from ..priority import Facility, build_priority
from ..timestamps import TimestampPrecision, coerce_precision, local_now

Clock = Callable[[], datetime]


@runtime_checkable
class MessageFormatter(Protocol):
    """Anything that turns a severity and a message into one syslog line."""

    @property
    def name(self) -> str:
        """Variant name, e.g. 'rfc5424'."""
        ...

    def render(self, severity: int, message: str) -> str:
        """Return the complete line, without a trailing newline."""
        ...


class FormatterClosedError(RuntimeError):
    """Raised when a builder is used after ``close()``."""


class HeaderBuilder(ABC):
    """Facility, timestamp options and the open/closed state of a builder.

    A builder belongs to one message stream and is not safe to share between
    threads. ``close()`` releases its header data; the builder can not be
    used afterwards. It also works as a context manager.
    """

    name: str

    def __init__(
        self,
        facility: Facility | int = Facility.DAEMON,
        timestamp_is_utc: bool = False,
        timestamp_level: TimestampPrecision | str = TimestampPrecision.NONE,
        process: ProcessInfo | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.facility = facility
        self.timestamp_is_utc = timestamp_is_utc
        self.timestamp_level = coerce_precision(timestamp_level)
        self.process = process
        self._clock = clock or local_now
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise FormatterClosedError(f"{type(self).__name__} has been closed")

    def priority(self, severity: int) -> int:
        return build_priority(self.facility, severity)

    def now(self) -> datetime:
        return self._clock()

    def set_facility(self, facility: Facility | int) -> None:
        self._check_open()
        self.facility = facility

    def set_timestamp_is_utc(self, utc: bool) -> None:
        self._check_open()
        self.timestamp_is_utc = utc

    def set_timestamp_level(self, level: TimestampPrecision | str) -> None:
        self._check_open()
        self.timestamp_level = coerce_precision(level)

    @abstractmethod
    def render(self, severity: int, message: str) -> str:
        """Build the line for *severity* and *message*."""

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "HeaderBuilder":
        self._check_open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
