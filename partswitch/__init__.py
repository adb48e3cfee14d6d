"""Select optional application components from a flag string.

Lazy-loading package exports keep ``import partswitch`` free of side effects;
nothing is resolved until :func:`instance` is first called.
"""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    "Activation",
    "ActivationState",
    "BootConfig",
    "Component",
    "ComponentPath",
    "ConfigurationError",
    "Switch",
    "UsageError",
    "instance",
    "load_config",
    "require",
    "resolve",
    "setup",
]

_EXPORTS = {
    "Activation": "partswitch.activation",
    "ActivationState": "partswitch.resolver",
    "BootConfig": "partswitch.config",
    "Component": "partswitch.component",
    "ComponentPath": "partswitch.paths",
    "ConfigurationError": "partswitch.errors",
    "Switch": "partswitch.switch",
    "UsageError": "partswitch.errors",
    "instance": "partswitch.runtime",
    "load_config": "partswitch.config",
    "require": "partswitch.runtime",
    "resolve": "partswitch.resolver",
    "setup": "partswitch.runtime",
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin wrapper
    if name in _EXPORTS:
        return getattr(import_module(_EXPORTS[name]), name)
    raise AttributeError(name)
