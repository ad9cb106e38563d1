"""The four naming rules of the sketch-assistant-dp-htx package."""

from dphtx.rules.artboard import ARTBOARD_NAME_RULE
from dphtx.rules.base import (
    PACKAGE_NAME,
    RuleContext,
    RuleDefinition,
    Violation,
    ViolationCollector,
)
from dphtx.rules.group import GROUP_NAME_RULE
from dphtx.rules.page import PAGE_NAME_RULE
from dphtx.rules.symbol import SYMBOL_NAME_RULE

ALL_RULES: tuple[RuleDefinition, ...] = (
    ARTBOARD_NAME_RULE,
    PAGE_NAME_RULE,
    GROUP_NAME_RULE,
    SYMBOL_NAME_RULE,
)

__all__ = [
    "ALL_RULES",
    "ARTBOARD_NAME_RULE",
    "GROUP_NAME_RULE",
    "PACKAGE_NAME",
    "PAGE_NAME_RULE",
    "SYMBOL_NAME_RULE",
    "RuleContext",
    "RuleDefinition",
    "Violation",
    "ViolationCollector",
]
