"""Component-scoped path generation.

``ComponentPath`` turns a base path into its per-component variant::

    path_for = ComponentPath()
    path_for("config/routes.rb", "admin")   # "config/routes.admin.rb"
    path_for("config/locales", "admin")     # "config/locales.admin"

    subdir = ComponentPath(TEMPLATES["subdir"])
    subdir("config/routes.rb", "admin")     # "config/routes/admin.rb"
"""

from __future__ import annotations

import os
from typing import Any, Callable

from .component import canonical_name

TEMPLATES = {
    "default": "{base}.{component}{ext}",
    "subdir": "{base}/{component}{ext}",
}


class ComponentPath:
    """Callable path generator driven by a format template.

    The template may reference ``base`` (the path without its extension),
    ``ext`` (the extension including the dot, possibly empty) and
    ``component``.
    """

    def __init__(self, template: str = TEMPLATES["default"]) -> None:
        self.template = template

    def __call__(self, path: str, component: Any = None) -> str | Callable[[Any], str]:
        base, ext = os.path.splitext(str(path))
        if component is None:
            return lambda comp: self._apply(base, ext, comp)
        return self._apply(base, ext, component)

    def _apply(self, base: str, ext: str, component: Any) -> str:
        return self.template.format(base=base, ext=ext, component=canonical_name(component))

    def __repr__(self) -> str:
        return f"ComponentPath({self.template!r})"


__all__ = ["ComponentPath", "TEMPLATES"]
