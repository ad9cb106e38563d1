"""Shared pytest fixtures and document builders for dphtx tests.

Builders return the raw JSON-like mappings a host hands over, so tests
exercise ``parse_document`` on the way in. ``do_objectID`` defaults to
``"<_class>:<name>"`` to keep ignore-list tests readable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from typing import Any

import pytest

from dphtx.assistant import AssistantPackage, build_assistant
from dphtx.domain.document import Document, parse_document
from dphtx.rules.base import RuleDefinition


def _node(
    layer_class: str,
    name: Any,
    layers: tuple[dict[str, Any], ...],
    object_id: str | None,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "_class": layer_class,
        "name": name,
        "do_objectID": object_id if object_id is not None else f"{layer_class}:{name}",
    }
    if layers:
        data["layers"] = list(layers)
    return data


def page(name: Any, *layers: dict[str, Any], object_id: str | None = None) -> dict[str, Any]:
    return _node("page", name, layers, object_id)


def artboard(name: Any, *layers: dict[str, Any], object_id: str | None = None) -> dict[str, Any]:
    return _node("artboard", name, layers, object_id)


def group(name: Any, *layers: dict[str, Any], object_id: str | None = None) -> dict[str, Any]:
    return _node("group", name, layers, object_id)


def symbol(name: Any, *, object_id: str | None = None) -> dict[str, Any]:
    return _node("symbolMaster", name, (), object_id)


def shape(name: Any, layer_class: str = "rectangle") -> dict[str, Any]:
    return _node(layer_class, name, (), None)


def document(*pages: dict[str, Any]) -> Document:
    """Parse *pages* into a typed document."""
    return parse_document({"pages": list(pages)})


def messages(rule: RuleDefinition, doc: Document, **kwargs: Any) -> list[str]:
    """Run *rule* on *doc* and return the reported messages in order."""
    return [v.message for v in rule.evaluate(doc, **kwargs)]


@pytest.fixture
def assistant() -> AssistantPackage:
    return build_assistant()


@pytest.fixture
def sample_document() -> Document:
    """A small but complete document touching every rule."""
    return document(
        page(
            "🎨 Onboarding",
            artboard("Onboarding - Step 1", group("Header"), group("Group 2")),
            artboard("Step 1", group("Header Copy")),
        ),
        page("Login", artboard("Login - Form")),
        page("Symbols", symbol("Icons/Arrow"), symbol("Arrow")),
    )


@pytest.fixture
def _clean_dphtx_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Remove DPHTX_* variables so settings tests see only code defaults."""
    for key in list(os.environ):
        if key.startswith("DPHTX_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root and dphtx logger state after configure_logging runs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dphtx_logger = logging.getLogger("dphtx")
    dphtx_handlers = dphtx_logger.handlers[:]
    dphtx_level = dphtx_logger.level
    dphtx_propagate = dphtx_logger.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dphtx_logger.handlers = dphtx_handlers
    dphtx_logger.setLevel(dphtx_level)
    dphtx_logger.propagate = dphtx_propagate
