"""Naming predicates shared by the rules.

Pure functions over plain strings. ``None`` is accepted wherever a name is
expected and treated as the empty string, so a malformed node never stops
an evaluation run.
"""

from __future__ import annotations

import re

from dphtx.domain.emoji import EMOJI_PATTERN, EMOJI_STRIP_PATTERN

ARCHIVE_SUFFIX = "Archive"
SYMBOLS_PAGE = "Symbols"
ARTBOARD_SEPARATOR = " - "
SYMBOL_SEPARATOR = "/"

DEFAULT_GROUP_NAME = "Group"
COPY_SUFFIX = "Copy"

# ASCII only: "Group ٣" is a name someone typed, not one Sketch generated.
_GROUP_NUMBER = re.compile(r"[0-9]+")


def is_archived(name: str | None) -> bool:
    """Whether *name* ends with ``Archive`` once trailing whitespace is removed.

    Examples:
        >>> is_archived("Old flows Archive  ")
        True
        >>> is_archived("Archived screens")
        False
    """
    return (name or "").rstrip().endswith(ARCHIVE_SUFFIX)


def is_symbols_page(name: str | None) -> bool:
    """Whether *name* is exactly the reserved Symbols page name."""
    return name == SYMBOLS_PAGE


def strip_emoji(name: str | None) -> str:
    """Remove every recognised emoji from *name* (whitespace is kept)."""
    return EMOJI_STRIP_PATTERN.sub("", name or "")


def starts_with_emoji(name: str | None) -> bool:
    """Test the first code point of *name* against the emoji table.

    Python strings index by code point, so an astral emoji such as
    ``"🔐"`` is a single character here. An empty name has no first
    code point and does not start with an emoji.
    """
    if not name:
        return False
    return EMOJI_PATTERN.match(name[0]) is not None


def is_default_group_name(name: str | None) -> bool:
    """Whether *name* looks like a name Sketch generated for a group.

    Matches ``"Group"``, ``"Group <digits>"`` and anything whose last
    space-separated word is ``"Copy"`` (with at least one word before it).
    Splitting is on single spaces, so ``"Group  2"`` is three tokens.
    """
    name = name or ""
    if name == DEFAULT_GROUP_NAME:
        return True
    parts = name.split(" ")
    if len(parts) == 2 and parts[0] == DEFAULT_GROUP_NAME and _GROUP_NUMBER.fullmatch(parts[1]):
        return True
    return len(parts) > 1 and parts[-1] == COPY_SUFFIX


def uses_slash_grouping(name: str | None) -> bool:
    """Whether *name* is split into at least two ``/``-delimited parts."""
    return len((name or "").split(SYMBOL_SEPARATOR)) > 1
