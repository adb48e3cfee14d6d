"""Exceptions raised by partswitch."""

from __future__ import annotations


class PartswitchError(Exception):
    """Base class for every partswitch error."""


class ConfigurationError(PartswitchError, ValueError):
    """The activation configuration is missing, unreadable or invalid.

    Raised before resolution starts. There is no recovery path: without a
    resolved activation set the rest of the process has nothing to run.
    """


class UsageError(PartswitchError, TypeError):
    """A query was called with an invalid combination of arguments."""


__all__ = ["PartswitchError", "ConfigurationError", "UsageError"]
