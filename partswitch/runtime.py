"""Process-wide activation handle.

Most applications resolve their components once at startup::

    import partswitch

    groups = partswitch.require("default", verbose=True)
    if partswitch.instance().enabled("api"):
        ...

The first call to :func:`instance` loads ``.env`` files, reads the YAML
configuration and resolves it. Later calls return the same object.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Callable

from dotenv import load_dotenv

from .activation import Activation
from .utils.logging import get_logger, log_json

logger = get_logger(__name__)

_instance: Activation | None = None
_lock = threading.Lock()


def instance() -> Activation:
    """Return the process-wide :class:`Activation`, resolving it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                load_dotenv()
                _instance = Activation.from_path(environ=os.environ)
    return _instance


def setup(verbose: bool = False, callback: Callable[[Activation], Any] | None = None) -> Activation:
    """Resolve the process-wide activation and optionally act on it.

    Parameters
    ----------
    verbose : bool
        Log the loaded components at ``INFO`` level.
    callback : callable | None
        Called once with the resolved :class:`Activation`.
    """
    activation = instance()
    log_json(
        logger,
        "components_loaded",
        level=logging.INFO if verbose else logging.DEBUG,
        components=[c.name for c in activation.components],
    )
    if callback is not None:
        callback(activation)
    return activation


def require(*groups: Any, verbose: bool = False, callback: Callable[[Activation], Any] | None = None) -> list[str]:
    """Set up and return the group names for the group loader.

    Component groups come first, followed by ``groups``.
    """
    return setup(verbose=verbose, callback=callback).groups(*groups)


__all__ = ["instance", "setup", "require"]
