"""Header field normalization — defaults and suffix-keeping truncation.

Every field follows the same two steps:

1. Empty input is replaced by a default (local host name, program name or
   the RFC 5424 nil-marker ``-``).
2. Overlength input is cut from the *start*, so the trailing, most specific
   part of a long host name or program path survives.

Nothing in this module raises; failures degrade to a default and are logged.
"""
from __future__ import annotations

import logging
import os
import socket
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

NIL_VALUE = "-"

HEADER_HOSTNAME_LENGTH = 255
HEADER_TAG_LENGTH = 32
HEADER_APP_NAME_LENGTH = 48
HEADER_MESSAGE_ID_LENGTH = 32


def local_hostname() -> str | None:
    """Return the OS host name, or None when the lookup fails."""
    try:
        return socket.gethostname()
    except OSError as exc:
        logger.warning("Host name lookup failed: %s", exc)
        return None


def program_name() -> str:
    return sys.argv[0] if sys.argv else ""


@dataclass(frozen=True)
class ProcessInfo:
    """Snapshot of the process-wide values a syslog header needs.

    Pass one to a formatter to make its output deterministic; leave it unset
    and the formatter reads the live values on every render.
    """

    hostname: str | None
    program: str
    pid: int

    @classmethod
    def current(cls) -> "ProcessInfo":
        return cls(hostname=local_hostname(), program=program_name(), pid=os.getpid())


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def truncate_start(value: str, limit: int) -> str:
    """Keep the last *limit* UTF-8 bytes of *value*.

    A multi-byte character split by the cut is dropped whole, so the result
    may be a few bytes shorter than *limit* but always decodes.
    """
    raw = value.encode("utf-8", "surrogateescape")
    if len(raw) <= limit:
        return value
    tail = raw[len(raw) - limit:]
    start = 0
    while start < len(tail) and _is_continuation(tail[start]):
        start += 1
    return tail[start:].decode("utf-8", "surrogateescape")


def _truncate(field: str, value: str, limit: int) -> str:
    size = len(value.encode("utf-8", "surrogateescape"))
    if size > limit:
        logger.debug("Truncating %s from %d to %d bytes", field, size, limit)
        return truncate_start(value, limit)
    return value


def normalize_hostname(
    raw: str,
    *,
    nil_on_failure: bool = False,
    process: ProcessInfo | None = None,
) -> str:
    """Default an empty host name to the local one, then cap at 255 bytes.

    When the lookup fails the RFC 5424 variant (``nil_on_failure=True``) gets
    the nil-marker; the RFC 3164 variant is left empty.
    """
    hostname = raw
    if not hostname:
        hostname = process.hostname if process is not None else local_hostname()
        if not hostname:
            hostname = NIL_VALUE if nil_on_failure else ""
    return _truncate("hostname", hostname, HEADER_HOSTNAME_LENGTH)


def _program(process: ProcessInfo | None) -> str:
    return process.program if process is not None else program_name()


def normalize_tag(raw: str, process: ProcessInfo | None = None) -> str:
    return _truncate("tag", raw or _program(process), HEADER_TAG_LENGTH)


def normalize_app_name(raw: str, process: ProcessInfo | None = None) -> str:
    return _truncate("app-name", raw or _program(process), HEADER_APP_NAME_LENGTH)


def normalize_message_id(raw: str) -> str:
    """Nil-marker for empty input; otherwise cap at 32 bytes."""
    if not raw:
        return NIL_VALUE
    if raw == NIL_VALUE:
        return raw
    return _truncate("message-id", raw, HEADER_MESSAGE_ID_LENGTH)


def current_pid(process: ProcessInfo | None = None) -> int:
    return process.pid if process is not None else os.getpid()
