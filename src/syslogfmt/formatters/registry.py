"""Formatter registry — pick a syslog variant by name.

Lookup order:
  1. Built-in variants registered at import (default, unix, rfc3164, rfc5424).
  2. Entry-points under the "syslogfmt.formatters" group (third-party packages).
  3. Factories registered at runtime via FormatterRegistry.register().

Third-party variants register a factory that returns a MessageFormatter::

    [project.entry-points."syslogfmt.formatters"]
    cef = "my_package.formatters:CEFFormatter"
"""
from __future__ import annotations

import importlib.metadata
import inspect
import logging
from typing import Any, Callable

from ..priority import Facility
from .base import MessageFormatter
from .legacy import DefaultFormatter, UnixFormatter
from .rfc3164 import RFC3164Formatter
from .rfc5424 import RFC5424Formatter

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "syslogfmt.formatters"

FormatterFactory = Callable[..., MessageFormatter]


def _accepted_options(factory: FormatterFactory) -> set[str] | None:
    """Keyword names *factory* takes, or None if it accepts **kwargs."""
    try:
        params = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):
        return None
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params):
        return None
    return {p.name for p in params}


class FormatterRegistry:
    """Name → factory map for syslog formatter variants.

    Usage::

        registry = FormatterRegistry()
        registry.register("rfc5424", RFC5424Formatter)

        fmt = registry.create("rfc5424", hostname="web01", tag="login")
        line = fmt.render(Severity.ERR, "denied")

    Options a factory does not accept are dropped, so one option set can
    feed every variant. ``tag`` is passed as ``message_id`` to factories that
    only know the latter.
    """

    def __init__(self) -> None:
        self._factories: dict[str, FormatterFactory] = {}

    def register(self, name: str, factory: FormatterFactory) -> None:
        if not callable(factory):
            raise TypeError(f"{factory!r} is not a formatter factory")
        self._factories[name] = factory
        logger.debug("Registered formatter: %s", name)

    def create(self, name: str, **options: Any) -> MessageFormatter:
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"Unknown formatter {name!r} (known: {', '.join(self.names())})") from None

        accepted = _accepted_options(factory)
        if accepted is not None:
            if "tag" in options and "tag" not in accepted and "message_id" in accepted:
                options.setdefault("message_id", options.pop("tag"))
            dropped = sorted(k for k in options if k not in accepted)
            for key in dropped:
                del options[key]
            if dropped:
                logger.debug("Formatter %s ignores options: %s", name, ", ".join(dropped))

        instance = factory(**options)
        if not isinstance(instance, MessageFormatter):
            raise TypeError(f"Factory for {name!r} returned {instance!r}, not a MessageFormatter")
        return instance

    def discover(self) -> int:
        """Load factories from the 'syslogfmt.formatters' entry-point group.

        Returns the number of factories successfully loaded.
        """
        loaded = 0
        for ep in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
            try:
                self.register(ep.name, ep.load())
            except (ImportError, AttributeError, TypeError) as exc:
                logger.warning("Failed to load formatter %r: %s", ep.name, exc)
                continue
            loaded += 1
        return loaded

    def get(self, name: str) -> FormatterFactory | None:
        return self._factories.get(name)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories


default_registry = FormatterRegistry()
for _cls in (DefaultFormatter, UnixFormatter, RFC3164Formatter, RFC5424Formatter):
    default_registry.register(_cls.name, _cls)


def build_formatter(
    settings: Any = None,
    registry: FormatterRegistry | None = None,
    protocol: str | None = None,
    **overrides: Any,
) -> MessageFormatter:
    """Create the formatter described by *settings*, with keyword overrides.

    *settings* defaults to the process-wide ``syslogfmt.config.settings``;
    *protocol* overrides ``settings.protocol``.
    """
    if settings is None:
        from ..config import settings

    options: dict[str, Any] = {
        "facility": Facility.parse(settings.facility),
        "hostname": settings.hostname,
        "app_name": settings.app_name,
        "tag": settings.tag,
    }
    # unset means "use the variant's own default"
    if settings.timestamp_utc is not None:
        options["timestamp_is_utc"] = settings.timestamp_utc
    if settings.timestamp_level is not None:
        options["timestamp_level"] = settings.timestamp_level
    options.update(overrides)
    return (registry or default_registry).create(protocol or settings.protocol, **options)
