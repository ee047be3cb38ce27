"""Source positions and values paired with a position."""

from __future__ import annotations

from dataclasses import dataclass

from limbo.values import Value, format_value

_INDENT_UNIT = "    "


def indent(level: int) -> str:
    """Return the indentation used in diagnostics for the given nesting level."""
    return _INDENT_UNIT * level


@dataclass(frozen=True)
class Location:
    """A position in a source file: path, line (1-based) and column offset."""

    path: str
    line: int
    offset: int

    def locate(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.offset}"


@dataclass(frozen=True)
class LocatableValue:
    """A runtime value together with the place it came from."""

    value: Value
    location: Location

    def locate(self) -> str:
        return str(self.location)

    def __str__(self) -> str:
        return format_value(self.value)