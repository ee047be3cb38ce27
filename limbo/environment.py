"""Nested scopes mapping names to values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from limbo.values import Value


@dataclass
class Environment:
    """A scope of names, with an optional enclosing scope."""

    prev: Optional["Environment"] = None
    table: Dict[str, Value] = field(default_factory=dict)

    def contains(self, name: str) -> bool:
        """Whether ``name`` is bound in this scope itself."""
        return name in self.table

    def insert(self, name: str, value: Value) -> None:
        """Bind ``name`` in this scope."""
        self.table[name] = value

    def overwrite(self, name: str, value: Value) -> bool:
        """Rebind ``name`` in the nearest scope that has it.

        Returns False, binding nothing, when no scope has it.
        """
        scope: Optional[Environment] = self
        while scope is not None:
            if scope.contains(name):
                scope.insert(name, value)
                return True
            scope = scope.prev
        return False

    def find(self, name: str) -> Optional[Value]:
        """Look ``name`` up from this scope outwards; None if unbound."""
        scope: Optional[Environment] = self
        while scope is not None:
            if name in scope.table:
                return scope.table[name]
            scope = scope.prev
        return None