from partswitch.flags import parse_flags


def test_positive_selector():
    selector = parse_flags("sa2")
    assert selector.negated is False
    assert selector.chars == frozenset("sa2")
    assert selector.selects("s")
    assert not selector.selects("f")


def test_negative_selector_strips_marker():
    for raw in ("-f", "^f"):
        selector = parse_flags(raw)
        assert selector.negated is True
        assert selector.raw == raw
        assert selector.chars == frozenset("f")
        assert not selector.selects("f")
        assert selector.selects("s")


def test_empty_values():
    assert parse_flags("").chars == frozenset()
    assert not parse_flags("").selects("s")
    assert parse_flags(None).raw == ""
    assert parse_flags("-").selects("s")
    assert parse_flags("^").selects("anything")


def test_only_leading_marker_negates():
    selector = parse_flags("s-")
    assert selector.negated is False
    assert "-" in selector.chars
