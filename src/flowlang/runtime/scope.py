"""
Lexical scopes for the interpreter.
"""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from .objects import FlowObject


class Scope:
    """Variables of one block of code, chained to the enclosing scope."""

    def __init__(self, name: str, parent: Optional["Scope"] = None) -> None:
        self.name = name
        self.parent = parent
        self.values: Dict[str, FlowObject] = {}

    def _owner(self, name: str) -> Optional["Scope"]:
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.values:
                return scope
            scope = scope.parent
        return None

    def has(self, name: str) -> bool:
        return self._owner(name) is not None

    def declare(self, name: str, value: FlowObject) -> None:
        self.values[name] = value

    def assign(self, name: str, value: FlowObject) -> None:
        """Rebind the nearest existing variable, or create it here."""
        owner = self._owner(name) or self
        owner.values[name] = value

    def resolve(self, name: str) -> Optional[FlowObject]:
        owner = self._owner(name)
        return owner.values[name] if owner is not None else None

    def visible_names(self) -> Iterator[str]:
        seen: set[str] = set()
        scope: Optional[Scope] = self
        while scope is not None:
            for name in scope.values:
                if name not in seen:
                    seen.add(name)
                    yield name
            scope = scope.parent

    def child(self, name: str) -> "Scope":
        return Scope(name, parent=self)
