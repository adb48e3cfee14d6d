"""Configuration loading for partswitch.

The activation configuration is a small YAML document::

    env_key: BOOTINQ
    default: "-f"

    parts:
      s: shared

    mount:
      a: api
      f: frontend

    deps:
      shared:
        in: af

``parts`` and ``mount`` map a single flag character to a component name,
``deps`` maps a component name to the characters that force it on. Missing or
null keys fall back to the defaults of :class:`BootConfig`.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .component import canonical_name
from .errors import ConfigurationError

DEFAULT_ENV_KEY = "BOOTINQ"
PATH_ENV_KEY = "PARTSWITCH_PATH"
DEFAULT_CONFIG_PATH = Path("config") / "partswitch.yaml"


def _component_name(name: Any, where: str) -> str:
    """Canonical component name; null or blank names are rejected."""
    if name is None:
        raise ValueError(f"{where}: component name must not be empty")
    text = canonical_name(name)
    if not text.strip() or text == ":":
        raise ValueError(f"{where}: component name must not be empty")
    return text


class Dependency(BaseModel):
    """Trigger characters forcing one component on."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    trigger: str = Field("", alias="in")

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_string(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, (str, int)):
            return {"in": str(data)}
        return data

    @field_validator("trigger", mode="before")
    @classmethod
    def _coerce_trigger(cls, value: Any) -> str:
        return "" if value is None else str(value)


class BootConfig(BaseModel):
    """Validated activation configuration."""

    model_config = ConfigDict(frozen=True)

    env_key: str = DEFAULT_ENV_KEY
    default: str = ""
    parts: dict[str, str] = Field(default_factory=dict)
    mount: dict[str, str] = Field(default_factory=dict)
    deps: dict[str, Dependency] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise ValueError(f"configuration must be a mapping, got {type(data).__name__}")
        return {str(key): value for key, value in data.items() if value is not None}

    @field_validator("env_key", "default", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return str(value)

    @field_validator("parts", "mount", mode="before")
    @classmethod
    def _normalize_section(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, Mapping):
            raise ValueError("expected a mapping of flag character to component name")
        return {str(flag): _component_name(name, f"flag {flag!r}") for flag, name in value.items()}

    @field_validator("deps", mode="before")
    @classmethod
    def _normalize_deps(cls, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise ValueError("expected a mapping of component name to trigger characters")
        return {_component_name(name, "deps"): dep for name, dep in value.items()}

    @model_validator(mode="after")
    def _check_declarations(self) -> "BootConfig":
        for flag in (*self.parts, *self.mount):
            if len(flag) != 1:
                raise ValueError(f"flag {flag!r} must be a single character")
        shared_flags = set(self.parts) & set(self.mount)
        if shared_flags:
            raise ValueError(f"flags declared in both parts and mount: {sorted(shared_flags)}")
        seen: set[str] = set()
        for _, name, _ in self.declared():
            if name in seen:
                raise ValueError(f"component {name!r} is declared more than once")
            seen.add(name)
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "BootConfig":
        """Validate ``data`` and raise :class:`ConfigurationError` on failure."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    def declared(self) -> Iterator[tuple[str, str, bool]]:
        """Yield ``(flag, name, mountable)`` for parts first, then mount."""
        for flag, name in self.parts.items():
            yield flag, name, False
        for flag, name in self.mount.items():
            yield flag, name, True


def config_path(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> Path:
    """Resolve the configuration file location.

    The explicit ``path`` wins, then the ``PARTSWITCH_PATH`` environment
    variable, then :data:`DEFAULT_CONFIG_PATH`.
    """
    env = os.environ if environ is None else environ
    if path:
        return Path(path)
    if env.get(PATH_ENV_KEY):
        return Path(env[PATH_ENV_KEY])
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> BootConfig:
    """Load the activation configuration from a YAML file.

    Parameters
    ----------
    path : str | Path | None
        Optional path to a YAML file. See :func:`config_path` for the lookup
        used when ``None``.
    environ : Mapping[str, str] | None
        Environment used for the path lookup, ``os.environ`` by default.

    Returns
    -------
    BootConfig
        Validated configuration.
    """

    cfg_path = config_path(path, environ)
    if not cfg_path.is_file():
        raise ConfigurationError(f"Config file not found: {cfg_path}")
    try:
        with cfg_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Unreadable config file {cfg_path}: {exc}") from exc
    return BootConfig.from_mapping(data)


def read_flag_value(config: BootConfig, environ: Mapping[str, str] | None = None) -> str:
    """Return the raw flag value from the environment or the config default."""
    env = os.environ if environ is None else environ
    return env.get(config.env_key, config.default)


__all__ = [
    "BootConfig",
    "Dependency",
    "config_path",
    "load_config",
    "read_flag_value",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ENV_KEY",
    "PATH_ENV_KEY",
]
