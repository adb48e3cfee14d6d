import dataclasses

import pytest

from partswitch.config import BootConfig
from partswitch.resolver import ActivationState, resolve

FULL = BootConfig.from_mapping(
    {
        "default": "s2",
        "parts": {"A": "api_part", "F": "frontend_part", "s": "shared"},
        "mount": {"a": "api", "2": "api2", "f": "frontend"},
        "deps": {"api_part": {"in": "a2"}, "frontend_part": {"in": "f"}},
    }
)
SIMPLE = BootConfig.from_mapping({"parts": {"s": "shared"}, "mount": {"a": "api"}})


def names(state):
    return [c.name for c in state.components]


def test_positive_value():
    state = resolve(SIMPLE, "sa")
    assert names(state) == ["shared", "api"]
    assert state.flags == ("s", "a")
    assert [c.mountable for c in state.components] == [False, True]
    assert state.negated is False


def test_negative_value_excludes_named():
    state = resolve(SIMPLE, "-a")
    assert names(state) == ["shared"]
    assert state.flags == ("s",)
    assert state.negated is True
    assert state.selector == frozenset("a")


def test_empty_value():
    assert resolve(SIMPLE, "").components == ()
    assert names(resolve(SIMPLE, "-")) == ["shared", "api"]
    assert names(resolve(SIMPLE, "^")) == ["shared", "api"]


def test_unknown_characters_are_ignored():
    assert names(resolve(SIMPLE, "xyz")) == []
    assert names(resolve(SIMPLE, "-xyz")) == ["shared", "api"]


def test_dependency_floor():
    config = BootConfig.from_mapping({"parts": {"a": "api_part"}, "deps": {"api_part": {"in": "f"}}})
    state = resolve(config, "-f")
    assert names(state) == ["api_part"]

    config = BootConfig.from_mapping(
        {
            "parts": {"s": "shared", "A": "api_part"},
            "mount": {"a": "api"},
            "deps": {"api_part": {"in": "a"}},
        }
    )
    state = resolve(config, "-a")
    assert "api_part" in names(state)
    assert "api" not in names(state)


def test_dependency_overrides_explicit_exclusion():
    state = resolve(FULL, "-A2")
    assert "api_part" in names(state)
    assert "api2" not in names(state)


def test_dependency_forced_under_positive_value():
    state = resolve(FULL, "s2")
    assert names(state) == ["api_part", "shared", "api2"]
    assert state.flags == ("A", "s", "2")


def test_no_duplicates_when_both_flagged_and_forced():
    state = resolve(FULL, "Aa")
    assert names(state).count("api_part") == 1
    assert names(state) == ["api_part", "api"]


@pytest.mark.parametrize("value", ["", "s", "-s", "sa2f", "-A", "^fF", "zz"])
def test_flags_match_components(value):
    state = resolve(FULL, value)
    assert len(state.flags) == len(state.components)


@pytest.mark.parametrize("value", ["s2", "-f", "Ff"])
def test_resolution_is_deterministic(value):
    first, second = resolve(FULL, value), resolve(FULL, value)
    assert names(first) == names(second)
    assert [c.mountable for c in first.components] == [c.mountable for c in second.components]
    assert first.flags == second.flags


@pytest.mark.parametrize("value", ["", "s", "sa", "a"])
def test_negation_is_pointwise_complement(value):
    positive = set(names(resolve(SIMPLE, value)))
    negative = set(names(resolve(SIMPLE, "-" + value)))
    declared = {"shared", "api"}
    for name in declared:
        assert (name in positive) != (name in negative)


def test_state_is_frozen():
    state = resolve(SIMPLE, "sa")
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.flags = ()
    assert isinstance(state.components, tuple)


def test_state_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        ActivationState(raw_value="s", negated=False, selector=frozenset("s"), flags=("s",), components=())


def test_state_keeps_declared_names_and_triggers():
    state = resolve(FULL, "-f")
    assert state.declared == ("api_part", "frontend_part", "shared", "api", "api2", "frontend")
    assert state.deps.forces("frontend_part", state.raw_value)
    assert resolve(FULL, "-f") == state
