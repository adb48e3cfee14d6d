"""Dependency floors: components forced on by trigger characters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .component import canonical_name


class DependencyIndex:
    """Map component names to the characters that force them on.

    A component is forced when any of its trigger characters appears anywhere
    in the raw flag value. The check looks at the value before negation is
    applied, so a negative selector can never exclude a forced component.
    """

    def __init__(self, triggers: Mapping[Any, str] | None = None) -> None:
        self._triggers: dict[str, frozenset[str]] = {
            canonical_name(name): frozenset(chars or "")
            for name, chars in (triggers or {}).items()
        }

    @classmethod
    def from_config(cls, config) -> "DependencyIndex":
        return cls({name: dep.trigger for name, dep in config.deps.items()})

    def triggers(self, name: Any) -> frozenset[str]:
        return self._triggers.get(canonical_name(name), frozenset())

    def forces(self, name: Any, raw_value: str | None) -> bool:
        """Return ``True`` if ``raw_value`` contains a trigger of ``name``."""
        triggers = self.triggers(name)
        if not triggers or not raw_value:
            return False
        return not triggers.isdisjoint(raw_value)

    def __contains__(self, name: object) -> bool:
        return canonical_name(name) in self._triggers

    def __len__(self) -> int:
        return len(self._triggers)


__all__ = ["DependencyIndex"]
