"""Immutable value objects describing one activated component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

GROUP_SUFFIX = "_boot"


def canonical_name(name: Any) -> str:
    """Return the canonical string identifier for ``name``.

    Component names arrive as plain strings, YAML scalars or the symbol-like
    spelling ``:shared`` used by some configuration files. All of them map to
    the same bare string.
    """
    if isinstance(name, Component):
        return name.name
    text = str(name)
    if text.startswith(":") and len(text) > 1:
        text = text[1:]
    return text


@dataclass(frozen=True, eq=False)
class Component:
    """A named optional unit of functionality.

    Equality and hashing use the name only, so a component compares equal to
    another component of the same name and to its bare name as a string.
    The ``:name`` spelling is normalized by :func:`canonical_name` at the
    query entry points, not here.
    """

    name: str
    mountable: bool = False
    namespace: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", canonical_name(self.name))

    @classmethod
    def mountable_for(cls, name: Any, namespace: str | None = None) -> "Component":
        """Build a mountable component; the namespace defaults to its name."""
        name = canonical_name(name)
        return cls(name, mountable=True, namespace=namespace or name)

    @property
    def group(self) -> str:
        return f"{self.name}{GROUP_SUFFIX}"

    @property
    def module_name(self) -> str:
        """CamelCase form of the name, e.g. ``api_part`` -> ``ApiPart``."""
        return "".join(word.capitalize() for word in self.name.split("_"))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Component):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


__all__ = ["Component", "canonical_name", "GROUP_SUFFIX"]
