"""Resolution of the active component set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .component import Component
from .config import BootConfig
from .deps import DependencyIndex
from .flags import FlagSelector, parse_flags
from .utils.logging import get_logger, log_json

logger = get_logger(__name__)


@dataclass(frozen=True)
class ActivationState:
    """Frozen result of one resolution.

    ``flags`` and ``components`` are parallel tuples in declaration order:
    parts first, then mount. ``declared`` lists every configured component
    name, active or not, and ``deps`` is the trigger index the state was
    resolved with.
    """

    raw_value: str
    negated: bool
    selector: frozenset[str]
    flags: tuple[str, ...]
    components: tuple[Component, ...]
    declared: tuple[str, ...] = ()
    deps: DependencyIndex = field(default_factory=DependencyIndex, compare=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.flags) != len(self.components):
            raise ValueError("flags and components must have the same length")


def resolve(config: BootConfig, raw_value: str | None) -> ActivationState:
    """Compute which declared components are active for ``raw_value``.

    A component is active when the selector picks its flag character (after
    negation) or when one of its dependency triggers appears anywhere in the
    raw value. Dependency triggers ignore negation.
    """

    selector: FlagSelector = parse_flags(raw_value)
    deps = DependencyIndex.from_config(config)
    flags: list[str] = []
    components: list[Component] = []

    for flag, name, mountable in config.declared():
        if not (deps.forces(name, selector.raw) or selector.selects(flag)):
            continue
        flags.append(flag)
        components.append(Component.mountable_for(name) if mountable else Component(name))

    state = ActivationState(
        raw_value=selector.raw,
        negated=selector.negated,
        selector=selector.chars,
        flags=tuple(flags),
        components=tuple(components),
        declared=tuple(name for _, name, _ in config.declared()),
        deps=deps,
    )
    log_json(
        logger,
        "components_resolved",
        level=logging.DEBUG,
        value=state.raw_value,
        negated=state.negated,
        flags=list(state.flags),
        components=[c.name for c in state.components],
    )
    return state


__all__ = ["ActivationState", "resolve"]
