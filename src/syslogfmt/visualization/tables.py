"""Rich-powered tables for the syslogfmt CLI."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

_console = Console()

# One sample layout per built-in variant, shown by `syslogfmt formats`.
LAYOUTS: dict[str, str] = {
    "default": "<PRI> TIMESTAMP HOSTNAME TAG[PID]: CONTENT",
    "unix": "<PRI>TIMESTAMP TAG[PID]: CONTENT",
    "rfc3164": "<PRI>TIMESTAMP HOSTNAME TAG[PID]: CONTENT",
    "rfc5424": "<PRI>1 TIMESTAMP HOSTNAME APPNAME PID MSGID STRUCTURED-DATA CONTENT",
}


def print_formats_table(names: list[str], title: str = "Formatters", console: Console | None = None) -> None:
    """List formatter names with their line layout (plugins show '-')."""
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="bold")
    table.add_column("Layout")

    for rank, name in enumerate(names, start=1):
        table.add_row(str(rank), name, LAYOUTS.get(name, "-"))

    (console or _console).print(table)


def print_message_table(
    line: str,
    details: dict[str, str],
    title: str = "Syslog message",
    console: Console | None = None,
) -> None:
    """Render a formatted line and the values that went into it.

    Args:
        line:     The complete syslog line.
        details:  Ordered field → value pairs (protocol, priority, ...).
        title:    Table title shown in the header.
    """
    table = Table(title=title, box=box.ROUNDED, show_lines=False)
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold", max_width=100, style="cyan")

    for key, value in details.items():
        table.add_row(key, value)
    table.add_row("line", line, style="green")

    (console or _console).print(table)
