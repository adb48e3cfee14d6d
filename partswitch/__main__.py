"""Print the resolved component set as JSON."""

from __future__ import annotations

import argparse
import json
import os
import sys

from .activation import Activation
from .config import load_config
from .errors import ConfigurationError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="partswitch", description="Show which components are active")
    parser.add_argument("--config", help="path to the YAML configuration")
    parser.add_argument("--value", help="flag value to resolve instead of the environment")
    parser.add_argument("--group", action="append", default=[], help="extra group to append")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as exc:
        print(f"partswitch: {exc}", file=sys.stderr)
        return 2

    environ = dict(os.environ)
    if args.value is not None:
        environ[config.env_key] = args.value
    activation = Activation.from_config(config, environ)

    print(
        json.dumps(
            {
                "value": activation.value,
                "negated": activation.negated,
                "flags": list(activation.flags),
                "components": [c.name for c in activation.components],
                "mountable": [c.name for c in activation.each_mountable()],
                "groups": activation.groups(*args.group),
            },
            indent=2,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
