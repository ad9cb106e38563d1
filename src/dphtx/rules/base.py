"""Rule contract — definitions, evaluation context, and violations.

A rule is a plain function ``rule(context) -> None``. It reads
``context.document``, consults ``context.is_ignored`` and records findings
with ``context.report``. Rules never touch the document; the only side
effect is appending to the context's collector.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from dphtx.domain.document import Document, Node

PACKAGE_NAME = "sketch-assistant-dp-htx"


def never_ignored(node: Node) -> bool:
    """Default ignore predicate: nothing is ignored."""
    return False


@dataclass(frozen=True)
class Violation:
    """A naming-policy failure attributed to one node."""

    rule: str
    message: str
    subject: Node

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a ServiceResult payload."""
        return {
            "rule": self.rule,
            "message": self.message,
            "subject_class": str(self.subject.layer_class),
            "subject_name": self.subject.name,
            "object_id": self.subject.object_id,
        }


class ViolationCollector:
    """Append-only violation sink, safe to share between threads.

    Appends keep their order per writer; interleaving between concurrent
    writers is unspecified.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Violation] = []

    def append(self, violation: Violation) -> None:
        with self._lock:
            self._items.append(violation)

    @property
    def violations(self) -> list[Violation]:
        """Snapshot of everything collected so far."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)


@dataclass
class RuleContext:
    """Everything a rule may see or do during one evaluation."""

    document: Document
    rule_name: str = ""
    is_ignored: Callable[[Node], bool] = never_ignored
    collector: ViolationCollector = field(default_factory=ViolationCollector)

    def report(self, message: str, subject: Node) -> None:
        """Record a violation against *subject* for the running rule."""
        self.collector.append(Violation(rule=self.rule_name, message=message, subject=subject))


RuleFunction = Callable[[RuleContext], None]


@dataclass(frozen=True)
class RuleDefinition:
    """Descriptor the host uses to list, configure and run a rule."""

    name: str
    title: str
    description: str
    rule: RuleFunction

    def evaluate(
        self,
        document: Document,
        *,
        is_ignored: Callable[[Node], bool] = never_ignored,
        collector: ViolationCollector | None = None,
    ) -> list[Violation]:
        """Run the rule on *document* and return what it reported.

        When *collector* is given, violations are also appended to it and
        the returned list holds only the ones from this run.
        """
        own = ViolationCollector()
        context = RuleContext(
            document=document,
            rule_name=self.name,
            is_ignored=is_ignored,
            collector=own,
        )
        self.rule(context)
        found = own.violations
        if collector is not None:
            for violation in found:
                collector.append(violation)
        return found
