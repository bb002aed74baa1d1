"""RFC 5424 STRUCTURED-DATA elements.

An element renders as::

    [exampleSDID@32473 iut="3" eventSource="Application"]

Parameters keep insertion order, so identical input always gives identical
output. Elements without an id or without parameters render as nothing, and
a set with nothing to render collapses to the nil-marker ``-``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from ..fields import NIL_VALUE

SD_BEGIN = "["
SD_END = "]"


def param_text(value: Any) -> str:
    """Text form of a PARAM-VALUE with ``\\``, ``"`` and ``]`` escaped (§6.3.3)."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")


def format_param(key: str, value: Any) -> str:
    return f' {key}="{param_text(value)}"'


@dataclass
class StructuredElement:
    """One SD-ID with its ordered key/value parameters."""

    id: str
    params: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> "StructuredElement":
        """Add or replace a parameter and return self for chaining."""
        self.params[key] = value
        return self

    def is_empty(self) -> bool:
        return not self.id or not self.params

    def serialize(self) -> str:
        if self.is_empty():
            return ""
        body = "".join(format_param(k, v) for k, v in self.params.items())
        return f"{SD_BEGIN}{self.id}{body}{SD_END}"

    def __str__(self) -> str:
        return self.serialize()


class StructuredDataSet:
    """Ordered collection of elements owned by a single RFC 5424 message."""

    def __init__(self, elements: list[StructuredElement] | None = None) -> None:
        self._elements: list[StructuredElement] = list(elements or [])

    def add(self, element: StructuredElement) -> "StructuredDataSet":
        self._elements.append(element)
        return self

    def clear(self) -> None:
        self._elements.clear()

    def serialize(self) -> str:
        """Concatenated elements, or ``-`` when nothing renders."""
        return "".join(e.serialize() for e in self._elements) or NIL_VALUE

    def __str__(self) -> str:
        return self.serialize()

    def __iter__(self) -> Iterator[StructuredElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"StructuredDataSet({len(self._elements)} elements)"
