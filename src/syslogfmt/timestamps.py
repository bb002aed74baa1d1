"""Timestamp rendering for syslog headers.

Two layouts are supported:

    bsd      Jan  2 15:04:05[.000|.000000]        (RFC 3164 ``Stamp``)
    rfc3339  2006-01-02T15:04:05[.000|.000000]Z07:00  (RFC 5424 §6.2.3)

Month names are fixed English abbreviations, independent of the locale.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum

logger = logging.getLogger(__name__)

LAYOUT_BSD = "bsd"
LAYOUT_RFC3339 = "rfc3339"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TimestampPrecision(str, Enum):
    NONE = "none"
    MILLI = "milli"
    MICRO = "micro"


def coerce_precision(value: TimestampPrecision | str | None) -> TimestampPrecision:
    """Map *value* onto a precision; anything unrecognised means NONE."""
    if isinstance(value, TimestampPrecision):
        return value
    try:
        return TimestampPrecision(str(value).strip().lower())
    except ValueError:
        logger.debug("Unknown timestamp precision %r, using 'none'", value)
        return TimestampPrecision.NONE


def _fraction(dt: datetime, precision: TimestampPrecision) -> str:
    if precision is TimestampPrecision.MILLI:
        return f".{dt.microsecond // 1000:03d}"
    if precision is TimestampPrecision.MICRO:
        return f".{dt.microsecond:06d}"
    return ""


def _offset(dt: datetime) -> str:
    delta = dt.utcoffset() or timedelta(0)
    if delta == timedelta(0):
        return "Z"
    sign = "+" if delta > timedelta(0) else "-"
    minutes = abs(int(delta.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_bsd(dt: datetime, precision: TimestampPrecision = TimestampPrecision.NONE) -> str:
    return f"{_MONTHS[dt.month - 1]} {dt.day:>2} {dt:%H:%M:%S}{_fraction(dt, precision)}"


def format_rfc3339(dt: datetime, precision: TimestampPrecision = TimestampPrecision.NONE) -> str:
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return f"{dt:%Y-%m-%dT%H:%M:%S}{_fraction(dt, precision)}{_offset(dt)}"


def render_timestamp(
    when: datetime,
    *,
    utc: bool = False,
    precision: TimestampPrecision | str | None = TimestampPrecision.NONE,
    layout: str = LAYOUT_RFC3339,
) -> str:
    """Render *when* for a syslog header.

    Args:
        when:       Point in time. Naive values are taken as local time.
        utc:        Convert to UTC before formatting.
        precision:  ``none``, ``milli`` or ``micro``; unknown values act as
                    ``none``.
        layout:     ``bsd`` or ``rfc3339``.
    """
    if utc:
        when = when.astimezone(timezone.utc)
    level = coerce_precision(precision)
    if layout == LAYOUT_BSD:
        return format_bsd(when, level)
    return format_rfc3339(when, level)


def local_now() -> datetime:
    return datetime.now().astimezone()
