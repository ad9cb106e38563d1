"""Tests for the artboard-name-start-with-page-name rule."""

from __future__ import annotations

from dphtx.rules import ARTBOARD_NAME_RULE
from tests.conftest import artboard, document, group, messages, page, shape, symbol


class TestArtboardNameRule:
    def test_prefixed_artboard_passes(self) -> None:
        doc = document(page("🎨 Onboarding", artboard("Onboarding - Step 1")))
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_missing_prefix_reported(self) -> None:
        doc = document(page("🎨 Onboarding", artboard("Step 1")))
        assert messages(ARTBOARD_NAME_RULE, doc) == [
            'Artboard "Step 1"\'s Name should start with "Onboarding - "'
        ]

    def test_violation_attributed_to_artboard(self) -> None:
        doc = document(page("Home", artboard("Hero", object_id="AB-1")))
        [violation] = ARTBOARD_NAME_RULE.evaluate(doc)
        assert violation.subject.object_id == "AB-1"
        assert violation.rule == ARTBOARD_NAME_RULE.name

    def test_page_without_emoji(self) -> None:
        doc = document(page("Checkout", artboard("Checkout - Cart"), artboard("Cart")))
        assert messages(ARTBOARD_NAME_RULE, doc) == [
            'Artboard "Cart"\'s Name should start with "Checkout - "'
        ]

    def test_arrow_page_prefix_drops_the_arrow(self) -> None:
        doc = document(page("→ Flows", artboard("Flows - Signup"), artboard("→ Flows - Login")))
        assert messages(ARTBOARD_NAME_RULE, doc) == [
            'Artboard "→ Flows - Login"\'s Name should start with "Flows - "'
        ]

    def test_artboard_named_like_page_is_skipped(self) -> None:
        doc = document(page("🎨 Onboarding", artboard("Onboarding")))
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_separator_must_be_exact(self) -> None:
        doc = document(
            page(
                "Home",
                artboard("Home-Hero"),
                artboard("Home – Hero"),
                artboard("Home  - Hero"),
            )
        )
        assert len(messages(ARTBOARD_NAME_RULE, doc)) == 3

    def test_archived_artboard_skipped(self) -> None:
        doc = document(page("Home", artboard("Old Hero Archive ")))
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_archived_page_skipped(self) -> None:
        doc = document(page("🗄 2019 Archive", artboard("Anything")))
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_symbols_page_skipped(self) -> None:
        doc = document(page("Symbols", artboard("Icons")))
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_ignored_artboard_skipped(self) -> None:
        doc = document(page("Home", artboard("Hero", object_id="skip-me"), artboard("Footer")))
        found = messages(
            ARTBOARD_NAME_RULE,
            doc,
            is_ignored=lambda node: node.object_id == "skip-me",
        )
        assert found == ['Artboard "Footer"\'s Name should start with "Home - "']

    def test_only_direct_artboards_checked(self) -> None:
        doc = document(
            page(
                "Home",
                group("Loose group"),
                shape("Background"),
                symbol("Button"),
                artboard("Home - Hero", artboard("Nested")),
            )
        )
        assert messages(ARTBOARD_NAME_RULE, doc) == []

    def test_empty_artboard_name(self) -> None:
        doc = document(page("Home", artboard(None)))
        assert messages(ARTBOARD_NAME_RULE, doc) == [
            'Artboard ""\'s Name should start with "Home - "'
        ]

    def test_page_of_only_emoji(self) -> None:
        """An all-emoji page name leaves an empty prefix before the separator."""
        doc = document(page("🚧", artboard(" - WIP"), artboard("WIP")))
        assert messages(ARTBOARD_NAME_RULE, doc) == ['Artboard "WIP"\'s Name should start with " - "']

    def test_reports_in_traversal_order(self) -> None:
        doc = document(
            page("A", artboard("one"), artboard("two")),
            page("B", artboard("three")),
        )
        assert messages(ARTBOARD_NAME_RULE, doc) == [
            'Artboard "one"\'s Name should start with "A - "',
            'Artboard "two"\'s Name should start with "A - "',
            'Artboard "three"\'s Name should start with "B - "',
        ]
