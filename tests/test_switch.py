from partswitch.switch import Switch

NAMES = ["shared", "api"]


def make_switch():
    return Switch(NAMES, lambda name: str(name) in NAMES or name in ("all", "*"))


def test_yields_only_for_enabled_components():
    switch = make_switch()
    assert switch["shared"](lambda: "fired") == "fired"
    assert switch[":api"](lambda: "fired") == "fired"
    assert switch["engine"](lambda: "fired") is None


def test_unknown_component_is_a_no_op():
    calls = []
    switch = make_switch()
    assert switch["something"](lambda: calls.append(1)) is None
    assert calls == []
    assert "something" not in switch
    assert "shared" in switch


def test_wildcard_falls_back_to_predicate():
    assert make_switch()["all"](lambda: 1) == 1


def test_on_and_not_branches():
    switch = make_switch()
    assert switch.on("shared", lambda: "on") == "on"
    assert switch.on("engine", lambda: "on") is None
    assert switch.not_("engine", lambda: "off") == "off"
    assert switch.not_("shared", lambda: "off") is None


def test_branches_fixed_per_declared_name():
    calls = []

    def is_enabled(name):
        calls.append(name)
        return name == "shared"

    switch = Switch(["shared", "frontend"], is_enabled)
    assert calls == ["shared", "frontend"]
    assert "frontend" in switch
    assert switch["shared"](lambda: "fired") == "fired"
    assert switch["frontend"](lambda: "fired") is None
    assert switch.not_("frontend", lambda: "off") == "off"
    assert switch.not_("shared", lambda: "off") is None
    assert calls == ["shared", "frontend"]
    assert repr(switch) == "Switch(['shared', 'frontend'])"
