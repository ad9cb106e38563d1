"""LintService: evaluate one assistant package against a document.

Rules run independently. Each gets its own collector, and results are
merged in package rule order, so the output is the same whether rules
run sequentially or on a thread pool.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from dphtx.domain.document import Document, Node, parse_document
from dphtx.rules.base import RuleDefinition, Violation, never_ignored
from dphtx.services.result import ServiceResult

if TYPE_CHECKING:
    from dphtx.assistant import AssistantPackage
    from dphtx.config.models import AssistantConfig
    from dphtx.config.settings import LintSettings

logger = logging.getLogger(__name__)


def ignore_object_ids(object_ids: list[str] | set[str]) -> Callable[[Node], bool]:
    """Build an ignore predicate matching nodes by ``do_objectID``."""
    ids = frozenset(object_ids)
    if not ids:
        return never_ignored

    def is_ignored(node: Node) -> bool:
        return node.object_id in ids

    return is_ignored


class LintService:
    """Runs the active rules of *package* and reports their violations.

    Parameters:
        package: The assistant package to evaluate.
        config: Effective rule config; defaults to the package's own.
        is_ignored: Host ignore predicate; None ignores nothing.
        max_workers: Thread pool size; 1 evaluates rules in the caller's thread.
    """

    def __init__(
        self,
        package: AssistantPackage,
        *,
        config: AssistantConfig | None = None,
        is_ignored: Callable[[Node], bool] | None = None,
        max_workers: int = 1,
    ) -> None:
        self._package = package
        self._config = config or package.config
        self._is_ignored = is_ignored or never_ignored
        self._max_workers = max(1, max_workers)

    @classmethod
    def from_settings(cls, package: AssistantPackage, settings: LintSettings) -> LintService:
        """Layer the settings' rule overrides and ignore list over *package*."""
        return cls(
            package,
            config=package.config.with_overrides(settings.rules),
            is_ignored=ignore_object_ids(settings.ignored_object_ids),
            max_workers=settings.max_workers,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def active_rules(self) -> list[RuleDefinition]:
        """Rules of the package switched on by the effective config."""
        return [rule for rule in self._package.rules if self._config.is_active(rule.name)]

    def collect(self, document: Document) -> tuple[list[Violation], list[str]]:
        """Run every active rule. Returns ``(violations, warnings)``."""
        rules = self.active_rules()
        if self._max_workers > 1 and len(rules) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                outcomes = list(pool.map(lambda rule: self._run_rule(rule, document), rules))
        else:
            outcomes = [self._run_rule(rule, document) for rule in rules]

        violations: list[Violation] = []
        warnings: list[str] = []
        for found, warning in outcomes:
            violations.extend(found)
            if warning is not None:
                warnings.append(warning)
        return violations, warnings

    def lint(self, document: Document | Mapping[str, Any]) -> ServiceResult:
        """Evaluate *document*, parsing it first when given raw JSON data."""
        if not isinstance(document, Document):
            try:
                document = parse_document(document)
            except TypeError as exc:
                return ServiceResult.failure(
                    "lint", "INVALID_DOCUMENT", str(exc), package=self._package.name
                )

        started = time.perf_counter()
        violations, warnings = self.collect(document)
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug(
            "Linted %d page(s) with %s: %d violation(s)",
            len(document.pages),
            self._package.name,
            len(violations),
        )

        return ServiceResult(
            ok=True,
            op="lint",
            data={
                "package": self._package.name,
                "rules_run": [rule.name for rule in self.active_rules()],
                "violations": [v.to_dict() for v in violations],
                "count": len(violations),
            },
            warnings=warnings,
            meta={"duration_ms": duration_ms},
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run_rule(
        self, rule: RuleDefinition, document: Document
    ) -> tuple[list[Violation], str | None]:
        """Evaluate one rule; a raising rule yields a warning instead of violations."""
        try:
            found = rule.evaluate(document, is_ignored=self._is_ignored)
        except Exception as exc:
            logger.warning("Rule %s failed", rule.name, exc_info=True)
            return [], f"Rule {rule.name} failed: {exc}"
        logger.debug("Rule %s reported %d violation(s)", rule.name, len(found))
        return found, None
