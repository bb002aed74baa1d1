"""syslogfmt CLI — entry point.

Commands:
    syslogfmt format  <message>   Render one syslog line to stdout
    syslogfmt formats             List the available formatter variants
"""
from __future__ import annotations

import logging
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from .config import settings
from .formatters.base import HeaderBuilder, MessageFormatter
from .formatters.registry import build_formatter, default_registry
from .formatters.rfc5424 import RFC5424Formatter
from .priority import Facility, Severity, build_priority
from .structured.element import StructuredElement
from .structured.well_known import Meta, Origin, TimeQuality
from .visualization.tables import print_formats_table, print_message_table

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("syslogfmt")

# ── Option parsing ───────────────────────────────────────────────────────────


def _severity(ctx: click.Context, param: click.Parameter, value: str) -> Severity:
    try:
        return Severity.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _facility(ctx: click.Context, param: click.Parameter, value: str | None) -> Facility | None:
    if value is None:
        return None
    try:
        return Facility.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _structured_elements(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[StructuredElement]:
    """Parse ``ID:key=value,key=value`` option values into elements."""
    elements: list[StructuredElement] = []
    for raw in values:
        sd_id, sep, body = raw.partition(":")
        if not sep or not sd_id:
            raise click.BadParameter(f"Expected ID:key=value[,key=value...], got {raw!r}")
        element = StructuredElement(sd_id)
        for pair in filter(None, body.split(",")):
            key, eq, value = pair.partition("=")
            if not eq or not key:
                raise click.BadParameter(f"Bad parameter {pair!r} in {raw!r}")
            element.set(key, value)
        elements.append(element)
    return elements


def _time_quality(ctx: click.Context, param: click.Parameter, value: str | None) -> TimeQuality | None:
    """Parse ``tzKnown,isSynced[,syncAccuracy]`` (0/1 flags)."""
    if value is None:
        return None
    parts = [p.strip() for p in value.split(",")]
    try:
        if len(parts) not in (2, 3):
            raise ValueError
        flags = [int(p) for p in parts]
    except ValueError:
        raise click.BadParameter(f"Expected tzKnown,isSynced[,syncAccuracy], got {value!r}") from None
    return TimeQuality(
        tz_known=bool(flags[0]),
        is_synced=bool(flags[1]),
        sync_accuracy=flags[2] if len(flags) == 3 else 0,
    )


def _render(fmt: MessageFormatter, severity: Severity, message: str) -> str:
    if not isinstance(fmt, HeaderBuilder):
        return fmt.render(severity, message)
    with fmt:
        return fmt.render(severity, message)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


# ── CLI root ─────────────────────────────────────────────────────────────────


@click.group()
@click.version_option(version="1.0.0", prog_name="syslogfmt")
@click.option("--verbose", "-v", is_flag=True, help="Log normalization details to stderr.")
def main(verbose: bool) -> None:
    """syslogfmt — render log events as syslog lines."""
    _configure_logging(verbose)


# ── format ───────────────────────────────────────────────────────────────────


@main.command("format")
@click.argument("message", default="")
@click.option("--protocol", "-p", default=None, help=f"Formatter variant (default: {settings.protocol}).")
@click.option("--severity", "-s", default="info", callback=_severity, show_default=True, help="Severity name or 0-7.")
@click.option("--facility", "-f", default=None, callback=_facility, help=f"Facility name (default: {settings.facility}).")
@click.option("--hostname", default=None, help="HOSTNAME field (empty: local host name).")
@click.option("--app-name", default=None, help="APP-NAME field (RFC 5424).")
@click.option("--tag", "-t", default=None, help="TAG (RFC 3164) or MSGID (RFC 5424).")
@click.option("--utc/--local", "utc", default=None, help="Timestamp zone (default: per variant).")
@click.option(
    "--precision", default=None,
    type=click.Choice(["none", "milli", "micro"], case_sensitive=False),
    help="Fractional seconds in the timestamp (default: per variant).",
)
@click.option("--sd", "structured", multiple=True, callback=_structured_elements,
              help="Structured data element ID:key=value,... (repeatable, RFC 5424).")
@click.option("--time-quality", default=None, callback=_time_quality,
              help="timeQuality SD-ID as tzKnown,isSynced[,syncAccuracy].")
@click.option("--origin-ip", multiple=True, help="origin SD-ID ip parameter (repeatable).")
@click.option("--enterprise-id", default=None, help="origin SD-ID enterpriseId.")
@click.option("--software", default=None, help="origin SD-ID software.")
@click.option("--sw-version", default=None, help="origin SD-ID swVersion.")
@click.option("--sequence-id", default=None, type=int, help="meta SD-ID sequenceId.")
@click.option("--sys-up-time", default=None, type=int, help="meta SD-ID sysUpTime.")
@click.option("--language", default=None, help="meta SD-ID language.")
@click.option(
    "--output", "-o", "output_fmt", default="line",
    type=click.Choice(["line", "table"], case_sensitive=False),
    help="Output format.",
    show_default=True,
)
def format_command(
    message: str,
    protocol: str | None,
    severity: Severity,
    facility: Facility | None,
    hostname: str | None,
    app_name: str | None,
    tag: str | None,
    utc: bool | None,
    precision: str | None,
    structured: list[StructuredElement],
    time_quality: TimeQuality | None,
    origin_ip: tuple[str, ...],
    enterprise_id: str | None,
    software: str | None,
    sw_version: str | None,
    sequence_id: int | None,
    sys_up_time: int | None,
    language: str | None,
    output_fmt: str,
) -> None:
    """Render MESSAGE as a single syslog line.

    Unset options fall back to SYSLOGFMT_* environment settings.

    \b
    Examples:
      syslogfmt format "disk full" --severity err --tag backup
      syslogfmt format "user login" -p rfc3164 --hostname web01 -t sshd
      syslogfmt format "ok" --sd "req@32473:id=7,path=/api" --sequence-id 12
      syslogfmt format "ok" --time-quality 1,1,60000 --output table
    """
    overrides: dict[str, Any] = {
        "facility": facility,
        "hostname": hostname,
        "app_name": app_name,
        "tag": tag,
        "timestamp_is_utc": utc,
        "timestamp_level": precision,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    name = (protocol or settings.protocol).lower()
    if name not in default_registry:
        default_registry.discover()
    if name not in default_registry:
        known = ", ".join(default_registry.names())
        raise click.BadParameter(f"Unknown formatter {name!r} (known: {known})", param_hint="--protocol")
    fmt = build_formatter(settings, protocol=name, **overrides)

    origin = None
    if origin_ip or enterprise_id is not None or software is not None or sw_version is not None:
        origin = Origin(
            ip=list(origin_ip),
            enterprise_id=enterprise_id or "",
            software=software or "",
            sw_version=sw_version or "",
        )
    meta = None
    if sequence_id is not None or sys_up_time is not None or language is not None:
        meta = Meta(sequence_id=sequence_id or 0, sys_up_time=sys_up_time or 0, language=language or "")

    if isinstance(fmt, RFC5424Formatter):
        for element in structured:
            fmt.add_structured_data(element)
        fmt.set_time_quality(time_quality)
        fmt.set_origin(origin)
        fmt.set_meta(meta)
    elif structured or time_quality or origin or meta:
        err_console.print(f"[yellow]Structured data is ignored by the {name} formatter.[/yellow]")

    line = _render(fmt, severity, message)

    if output_fmt == "table":
        fac = facility if facility is not None else Facility.parse(settings.facility)
        print_message_table(
            line,
            {
                "protocol": name,
                "facility": fac.name.lower(),
                "severity": severity.name.lower(),
                "priority": str(build_priority(fac, severity)),
            },
            console=console,
        )
        return

    click.echo(line)


# ── formats ──────────────────────────────────────────────────────────────────


@main.command()
@click.option("--discover/--no-discover", default=True, help="Include entry-point plugins.")
def formats(discover: bool) -> None:
    """List the formatter variants that --protocol accepts."""
    if discover:
        loaded = default_registry.discover()
        if loaded:
            logger.debug("Loaded %d formatter plugin(s)", loaded)
    print_formats_table(default_registry.names(), console=console)


if __name__ == "__main__":
    main()
