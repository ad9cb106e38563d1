"""Assistant package — the unit a host loads, configures and runs.

A package is a stable name, its rule descriptors, and a default config
listing each rule's ``active`` flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dphtx.config.models import AssistantConfig
from dphtx.rules import ALL_RULES, PACKAGE_NAME
from dphtx.rules.base import RuleDefinition


@dataclass(frozen=True)
class AssistantPackage:
    """Named collection of rules plus their default configuration.

    Raises:
        ValueError: If two rules share a name.
    """

    name: str
    rules: tuple[RuleDefinition, ...] = ()
    config: AssistantConfig = field(default_factory=AssistantConfig)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for rule in self.rules:
            if rule.name in seen:
                msg = f"Duplicate rule name {rule.name!r} in package {self.name!r}"
                raise ValueError(msg)
            seen.add(rule.name)

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def get_rule(self, name: str) -> RuleDefinition | None:
        for rule in self.rules:
            if rule.name == name:
                return rule
        return None


def build_assistant() -> AssistantPackage:
    """Return the sketch-assistant-dp-htx package with every rule active."""
    return AssistantPackage(
        name=PACKAGE_NAME,
        rules=ALL_RULES,
        config=AssistantConfig.all_active(rule.name for rule in ALL_RULES),
    )
