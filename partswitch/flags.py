"""Parsing of the raw flag value into a signed selector."""

from __future__ import annotations

from dataclasses import dataclass

NEGATION_MARKERS = ("-", "^")


@dataclass(frozen=True)
class FlagSelector:
    """Normalized form of a raw flag value.

    ``negated`` is set when the value starts with ``-`` or ``^``. ``chars``
    holds the remaining flag characters with the marker removed. Characters
    are never checked against a configuration, unknown ones simply match no
    component.
    """

    raw: str
    negated: bool
    chars: frozenset[str]

    def contains(self, flag: str) -> bool:
        return flag in self.chars

    def selects(self, flag: str) -> bool:
        """Whether ``flag`` is selected once negation is applied."""
        return self.negated ^ self.contains(flag)


def parse_flags(value: str | None) -> FlagSelector:
    """Split ``value`` into its negation marker and flag characters.

    Examples
    --------
    >>> parse_flags("-f").negated
    True
    >>> sorted(parse_flags("sa2").chars)
    ['2', 'a', 's']
    """
    raw = value or ""
    negated = raw.startswith(NEGATION_MARKERS)
    body = raw[1:] if negated else raw
    return FlagSelector(raw=raw, negated=negated, chars=frozenset(body))


__all__ = ["FlagSelector", "parse_flags", "NEGATION_MARKERS"]
