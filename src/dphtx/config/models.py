"""Pydantic configuration models with code-baked defaults.

Sparse contract: the package ships a config with every rule active, and a
user config only lists the rules it changes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field


class RuleConfig(BaseModel):
    """Per-rule options (``[rules."<rule name>"]``)."""

    model_config = {"frozen": True}

    active: bool = True


class AssistantConfig(BaseModel):
    """Rule activation map for one assistant package."""

    model_config = {"frozen": True}

    rules: dict[str, RuleConfig] = Field(default_factory=dict)

    @classmethod
    def all_active(cls, rule_names: Iterable[str]) -> AssistantConfig:
        """Build a config that enables every rule in *rule_names*."""
        return cls(rules={name: RuleConfig(active=True) for name in rule_names})

    def is_active(self, rule_name: str) -> bool:
        """Rules missing from the config are inactive."""
        entry = self.rules.get(rule_name)
        return entry is not None and entry.active

    def with_overrides(self, overrides: Mapping[str, RuleConfig]) -> AssistantConfig:
        """Return a copy where each rule in *overrides* replaces its entry."""
        if not overrides:
            return self
        return AssistantConfig(rules={**self.rules, **overrides})
