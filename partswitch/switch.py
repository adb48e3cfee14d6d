"""Per-component callback dispatch."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from .component import canonical_name


def _fire(callback: Callable[[], Any]) -> Any:
    return callback()


def _skip(callback: Callable[[], Any]) -> None:
    return None


_Branch = Callable[[Callable[[], Any]], Any]


class Switch:
    """Dispatch callbacks keyed by component name.

    Every declared component gets a pair of branches fixed at construction:
    ``switch["shared"](callback)`` runs ``callback`` only when ``shared`` is
    enabled and returns its result, ``switch.not_("shared", callback)`` only
    when it is disabled. Names outside the declared set fall back to
    ``is_enabled`` (so wildcards fire) and otherwise act as disabled; they
    never raise, so call sites need not know the declared component set.
    """

    def __init__(self, names: Iterable[Any], is_enabled: Callable[[Any], bool]) -> None:
        self._is_enabled = is_enabled
        self._branches: dict[str, tuple[_Branch, _Branch]] = {}
        for name in names:
            enabled = is_enabled(name)
            self._branches[canonical_name(name)] = (_fire, _skip) if enabled else (_skip, _fire)

    def _pair(self, name: Any) -> tuple[_Branch, _Branch]:
        pair = self._branches.get(canonical_name(name))
        if pair is not None:
            return pair
        return (_fire, _skip) if self._is_enabled(name) else (_skip, _fire)

    def __getitem__(self, name: Any) -> _Branch:
        return self._pair(name)[0]

    def __contains__(self, name: object) -> bool:
        return canonical_name(name) in self._branches

    def on(self, name: Any, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` if ``name`` is enabled."""
        return self._pair(name)[0](callback)

    def not_(self, name: Any, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` if ``name`` is not enabled."""
        return self._pair(name)[1](callback)

    def __repr__(self) -> str:
        return f"Switch({list(self._branches)})"


__all__ = ["Switch"]
