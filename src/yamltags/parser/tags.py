"""Rule grammar for ``validate`` tags: ``name`` or ``name=param``, comma separated."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationRule:
    """A single named rule with at most one parameter."""

    name: str
    params: tuple[str, ...] = ()

    @property
    def param(self) -> str:
        """The first parameter, or ``""`` when the rule has none."""
        return self.params[0] if self.params else ""


def parse_tag(tag: str) -> list[ValidationRule]:
    """Parse a tag string into rules, in the order written.

    Parts are not stripped and there is no escaping: ``"a, b"`` yields a
    rule named ``" b"``, and a parameter can never contain a comma.
    """
    rules: list[ValidationRule] = []
    for part in tag.split(","):
        name, sep, param = part.partition("=")
        rules.append(ValidationRule(name=name, params=(param,) if sep else ()))
    return rules


def has_rule(tag: str, name: str) -> bool:
    return any(rule.name == name for rule in parse_tag(tag))
