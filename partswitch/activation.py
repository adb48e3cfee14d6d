"""Read-only query surface over a resolved activation state."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Callable

from .component import Component, canonical_name
from .config import BootConfig, load_config, read_flag_value
from .errors import UsageError
from .paths import ComponentPath
from .resolver import ActivationState, resolve
from .switch import Switch

WILDCARDS = frozenset({"all", "*"})


def _run(matched: bool, callback: Callable[[], Any] | None) -> bool:
    if matched and callback is not None:
        callback()
    return matched


class Activation:
    """Answer questions about which components are active.

    Instances wrap an :class:`ActivationState` computed once and never
    changed, so every query is a pure read and safe to call from any thread.

    Examples
    --------
    >>> config = BootConfig.from_mapping({"parts": {"s": "shared"}, "mount": {"a": "api"}})
    >>> activation = Activation.from_config(config, environ={"BOOTINQ": "s"})
    >>> activation.enabled("shared"), activation.enabled("api")
    (True, False)
    """

    def __init__(self, state: ActivationState) -> None:
        self._state = state
        self._index = {component.name: component for component in state.components}

    @classmethod
    def from_config(cls, config: BootConfig, environ: Mapping[str, str] | None = None) -> "Activation":
        """Resolve ``config`` against the flag value found in ``environ``."""
        value = read_flag_value(config, environ)
        return cls(resolve(config, value))

    @classmethod
    def from_path(
        cls, path: str | Path | None = None, environ: Mapping[str, str] | None = None
    ) -> "Activation":
        """Load the YAML configuration at ``path`` and resolve it."""
        return cls.from_config(load_config(path, environ), environ)

    # -- accessors -----------------------------------------------------

    @property
    def state(self) -> ActivationState:
        return self._state

    @property
    def value(self) -> str:
        return self._state.raw_value

    @property
    def negated(self) -> bool:
        return self._state.negated

    @property
    def flags(self) -> tuple[str, ...]:
        return self._state.flags

    @property
    def components(self) -> tuple[Component, ...]:
        return self._state.components

    def component(self, name: Any) -> Component | None:
        """Return the active component called ``name``, or ``None``."""
        return self._index.get(canonical_name(name))

    __getitem__ = component

    def each_mountable(self) -> list[Component]:
        return [component for component in self.components if component.mountable]

    def groups(self, *extra: Any) -> list[str]:
        """Group names for the active components followed by ``extra``.

        This is the list handed to a group loader; duplicates are dropped and
        order is preserved.
        """
        names = [component.group for component in self.components]
        names.extend(str(group) for group in extra)
        return list(dict.fromkeys(names))

    def component_paths_for(self, path: str, path_for: ComponentPath | None = None) -> list[str]:
        path_for = path_for or ComponentPath()
        return [path_for(path, component) for component in self.components]

    def is_dependency(self, name: Any) -> bool:
        """Whether ``name`` is forced on by a trigger in the raw value."""
        return self._state.deps.forces(name, self._state.raw_value)

    # -- predicates ----------------------------------------------------

    def enabled(self, name: Any) -> bool:
        """``True`` for a wildcard (``"all"``/``"*"``) or an active component."""
        key = canonical_name(name)
        return key in WILDCARDS or key in self._index

    def disabled(self, name: Any) -> bool:
        """``True`` if ``name`` is not an active component.

        Wildcards are never disabled.
        """
        key = canonical_name(name)
        return key not in WILDCARDS and key not in self._index

    # -- conditional dispatch ------------------------------------------

    def on(
        self,
        name: Any = None,
        *,
        any: Iterable[Any] | None = None,
        all: Iterable[Any] | None = None,
        callback: Callable[[], Any] | None = None,
    ) -> bool:
        """Run ``callback`` if the target components are enabled.

        Exactly one of ``name``, ``any`` or ``all`` must be given. ``any`` and
        ``all`` take a list of names or a single name::

            activation.on("frontend", callback=build_assets)
            activation.on(any=["frontend", "backend"], callback=warm_cache)
            activation.on(all=["frontend", "backend"], callback=link_sessions)

        Returns whether the condition matched.
        """
        _check_single_target(name, any, all)
        if name is not None:
            return _run(self.enabled(name), callback)
        if any is not None:
            return self.on_any(*_as_names(any), callback=callback)
        return self.on_all(*_as_names(all), callback=callback)

    def not_(
        self,
        name: Any = None,
        *,
        any: Iterable[Any] | None = None,
        all: Iterable[Any] | None = None,
        callback: Callable[[], Any] | None = None,
    ) -> bool:
        """Mirror of :meth:`on` that matches disabled components."""
        _check_single_target(name, any, all)
        if name is not None:
            return _run(self.disabled(name), callback)
        if any is not None:
            return self.not_any(*_as_names(any), callback=callback)
        return self.not_all(*_as_names(all), callback=callback)

    def on_all(self, *names: Any, callback: Callable[[], Any] | None = None) -> bool:
        """Match if every name is enabled; an empty list matches."""
        return _run(all_(self.enabled(name) for name in names), callback)

    def on_any(self, *names: Any, callback: Callable[[], Any] | None = None) -> bool:
        """Match if at least one name is enabled; an empty list does not."""
        return _run(any_(self.enabled(name) for name in names), callback)

    def not_all(self, *names: Any, callback: Callable[[], Any] | None = None) -> bool:
        return _run(all_(self.disabled(name) for name in names), callback)

    def not_any(self, *names: Any, callback: Callable[[], Any] | None = None) -> bool:
        return _run(any_(self.disabled(name) for name in names), callback)

    def switch(self, callback: Callable[[Switch], Any] | None = None) -> Any:
        """Return a :class:`Switch`, or call ``callback`` with it and return the result."""
        switch = Switch(self._state.declared, self.enabled)
        if callback is None:
            return switch
        return callback(switch)

    def __repr__(self) -> str:
        names = ", ".join(component.name for component in self.components)
        return f"Activation(value={self.value!r}, components=[{names}])"


# ``on``/``not_`` take keyword arguments named ``any`` and ``all``.
any_ = any
all_ = all


def _check_single_target(name: Any, any_names: Any, all_names: Any) -> None:
    given = sum(arg is not None for arg in (name, any_names, all_names))
    if given == 0:
        raise UsageError("wrong arguments (given 0, expected 1)")
    if given > 1:
        raise UsageError("expected a single name or one of the keywords `all' or `any'")


def _as_names(names: Any) -> Iterable[Any]:
    # A lone name passed as ``any=``/``all=`` is a one-item list, not a string of characters.
    if isinstance(names, (str, Component)):
        return (names,)
    return names


__all__ = ["Activation", "WILDCARDS"]
