"""Document model — typed, read-only views over a Sketch document tree.

The host hands over loosely typed JSON (``pages`` → ``layers`` → ...,
each node tagged with ``_class``). ``parse_document`` turns that into a
closed set of frozen variants so rules can match on type instead of
probing fields:

- ``Page``          a top-level page with child layers
- ``Artboard``      ``_class == "artboard"``, has child layers
- ``Group``         ``_class == "group"``, has child layers
- ``SymbolMaster``  ``_class == "symbolMaster"``
- ``OtherLayer``    any other ``_class`` (text, shapes, instances, ...)

Parsing never raises for malformed nodes: missing names become ``""``,
missing or non-list ``layers`` become empty, and non-mapping entries are
skipped.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class LayerClass(StrEnum):
    """Sketch ``_class`` discriminants this package distinguishes."""

    PAGE = "page"
    ARTBOARD = "artboard"
    GROUP = "group"
    SYMBOL_MASTER = "symbolMaster"


@dataclass(frozen=True)
class Artboard:
    """An artboard placed directly on a page."""

    name: str = ""
    object_id: str = ""
    layers: tuple[Layer, ...] = ()

    @property
    def layer_class(self) -> str:
        return LayerClass.ARTBOARD


@dataclass(frozen=True)
class Group:
    """A layer group."""

    name: str = ""
    object_id: str = ""
    layers: tuple[Layer, ...] = ()

    @property
    def layer_class(self) -> str:
        return LayerClass.GROUP


@dataclass(frozen=True)
class SymbolMaster:
    """A symbol definition (normally found on the Symbols page)."""

    name: str = ""
    object_id: str = ""

    @property
    def layer_class(self) -> str:
        return LayerClass.SYMBOL_MASTER


@dataclass(frozen=True)
class OtherLayer:
    """Any layer variant no rule distinguishes; keeps its raw ``_class``."""

    name: str = ""
    object_id: str = ""
    layer_class: str = ""


Layer = Artboard | Group | SymbolMaster | OtherLayer


@dataclass(frozen=True)
class Page:
    """A document page."""

    name: str = ""
    object_id: str = ""
    layers: tuple[Layer, ...] = ()

    @property
    def layer_class(self) -> str:
        return LayerClass.PAGE

    def artboards(self) -> Iterator[Artboard]:
        """Yield the artboards placed directly on this page."""
        for layer in self.layers:
            if isinstance(layer, Artboard):
                yield layer


Node = Page | Layer


@dataclass(frozen=True)
class Document:
    """An ordered sequence of pages."""

    pages: tuple[Page, ...] = ()

    def find_page(self, name: str) -> Page | None:
        """Return the first page named exactly *name*, or None."""
        for page in self.pages:
            if page.name == name:
                return page
        return None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _children(data: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    raw = data.get("layers")
    if not isinstance(raw, list | tuple):
        return []
    return [item for item in raw if isinstance(item, Mapping)]


def parse_layer(data: Mapping[str, Any]) -> Layer:
    """Build the layer variant matching ``data["_class"]``."""
    layer_class = _text(data.get("_class"))
    name = _text(data.get("name"))
    object_id = _text(data.get("do_objectID"))

    if layer_class == LayerClass.ARTBOARD:
        return Artboard(name=name, object_id=object_id, layers=parse_layers(data))
    if layer_class == LayerClass.GROUP:
        return Group(name=name, object_id=object_id, layers=parse_layers(data))
    if layer_class == LayerClass.SYMBOL_MASTER:
        return SymbolMaster(name=name, object_id=object_id)
    return OtherLayer(name=name, object_id=object_id, layer_class=layer_class)


def parse_layers(data: Mapping[str, Any]) -> tuple[Layer, ...]:
    """Parse the ``layers`` list of *data* into layer variants."""
    return tuple(parse_layer(child) for child in _children(data))


def parse_page(data: Mapping[str, Any]) -> Page:
    """Build a :class:`Page` from its JSON mapping."""
    return Page(
        name=_text(data.get("name")),
        object_id=_text(data.get("do_objectID")),
        layers=parse_layers(data),
    )


def parse_document(data: Mapping[str, Any]) -> Document:
    """Build a :class:`Document` from a host-supplied mapping.

    Raises:
        TypeError: If *data* is not a mapping at all. Anything below the
            root is tolerated.
    """
    if not isinstance(data, Mapping):
        msg = f"Document must be a mapping, got {type(data).__name__}"
        raise TypeError(msg)
    pages = data.get("pages")
    if not isinstance(pages, list | tuple):
        return Document()
    return Document(pages=tuple(parse_page(p) for p in pages if isinstance(p, Mapping)))
