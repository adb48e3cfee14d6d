from pathlib import Path

from partswitch.activation import Activation
from partswitch.config import load_config

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "partswitch.yaml"


def test_example_default_excludes_frontend():
    activation = Activation.from_path(EXAMPLE, environ={})
    assert [c.name for c in activation.components] == ["shared", "api_part", "api"]
    assert activation.disabled("frontend")


def test_example_api_pulls_in_api_part():
    config = load_config(EXAMPLE)
    activation = Activation.from_config(config, environ={"BOOTINQ": "a"})
    assert [c.name for c in activation.components] == ["api_part", "api"]
    assert activation.is_dependency("api_part")
