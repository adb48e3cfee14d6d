"""Shared helpers for partswitch."""

from .logging import get_logger, log_json

__all__ = ["get_logger", "log_json"]
