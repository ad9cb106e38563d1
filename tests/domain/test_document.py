"""Tests for the document model and its tolerant parser."""

from __future__ import annotations

import dataclasses

import pytest

from dphtx.domain.document import (
    Artboard,
    Document,
    Group,
    LayerClass,
    OtherLayer,
    Page,
    SymbolMaster,
    parse_document,
    parse_layer,
)


class TestParseLayer:
    def test_artboard_with_children(self) -> None:
        layer = parse_layer(
            {
                "_class": "artboard",
                "name": "Home - Hero",
                "do_objectID": "A1",
                "layers": [{"_class": "group", "name": "Header"}],
            }
        )
        assert layer == Artboard(
            name="Home - Hero",
            object_id="A1",
            layers=(Group(name="Header"),),
        )

    def test_symbol_master(self) -> None:
        layer = parse_layer({"_class": "symbolMaster", "name": "Icons/Arrow"})
        assert isinstance(layer, SymbolMaster)
        assert layer.layer_class == LayerClass.SYMBOL_MASTER

    def test_unknown_class_is_other_layer(self) -> None:
        layer = parse_layer({"_class": "text", "name": "Title"})
        assert layer == OtherLayer(name="Title", layer_class="text")

    def test_missing_class(self) -> None:
        layer = parse_layer({"name": "Loose"})
        assert isinstance(layer, OtherLayer)
        assert layer.layer_class == ""

    def test_missing_name_is_empty(self) -> None:
        assert parse_layer({"_class": "group"}).name == ""

    def test_none_name_is_empty(self) -> None:
        assert parse_layer({"_class": "group", "name": None}).name == ""

    def test_non_string_name_is_converted(self) -> None:
        assert parse_layer({"_class": "group", "name": 42}).name == "42"

    def test_non_list_layers_ignored(self) -> None:
        layer = parse_layer({"_class": "group", "name": "G", "layers": "oops"})
        assert layer == Group(name="G")

    def test_non_mapping_children_skipped(self) -> None:
        layer = parse_layer(
            {"_class": "artboard", "name": "A", "layers": [None, 3, {"_class": "group"}]}
        )
        assert isinstance(layer, Artboard)
        assert layer.layers == (Group(),)


class TestParseDocument:
    def test_pages_in_order(self) -> None:
        doc = parse_document(
            {
                "pages": [
                    {"_class": "page", "name": "🏠 Home", "do_objectID": "P1"},
                    {"_class": "page", "name": "Symbols", "do_objectID": "P2"},
                ]
            }
        )
        assert [p.name for p in doc.pages] == ["🏠 Home", "Symbols"]
        assert doc.pages[0].object_id == "P1"

    def test_missing_pages(self) -> None:
        assert parse_document({}) == Document()

    def test_non_list_pages(self) -> None:
        assert parse_document({"pages": {"name": "x"}}) == Document()

    def test_non_mapping_pages_skipped(self) -> None:
        doc = parse_document({"pages": ["nope", {"name": "Ok"}]})
        assert doc.pages == (Page(name="Ok"),)

    def test_root_must_be_mapping(self) -> None:
        with pytest.raises(TypeError, match="mapping"):
            parse_document(["not", "a", "document"])  # type: ignore[arg-type]


class TestPage:
    def test_artboards_skips_other_layers(self) -> None:
        page = Page(
            name="Home",
            layers=(Artboard(name="Home - A"), Group(name="Loose"), Artboard(name="Home - B")),
        )
        assert [a.name for a in page.artboards()] == ["Home - A", "Home - B"]

    def test_find_page_returns_first(self) -> None:
        first = Page(name="Symbols", object_id="1")
        doc = Document(pages=(Page(name="Home"), first, Page(name="Symbols", object_id="2")))
        assert doc.find_page("Symbols") is first
        assert doc.find_page("Missing") is None


class TestImmutability:
    def test_nodes_are_frozen(self) -> None:
        page = Page(name="Home")
        with pytest.raises(dataclasses.FrozenInstanceError):
            page.name = "Other"  # type: ignore[misc]
