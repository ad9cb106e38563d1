"""Emoji code-point tables.

Two compiled patterns, both process-wide constants:

- ``EMOJI_PATTERN`` recognises a leading emoji. Page names are tested one
  code point at a time, so multi-code-point alternatives (regional-indicator
  pairs, keycaps) never match there; they are kept so the table describes
  the full recognised set.
- ``EMOJI_STRIP_PATTERN`` removes emoji (and their joiners/selectors) from
  a name before it is used as an artboard prefix.
"""

from __future__ import annotations

import re

EMOJI_PATTERN = re.compile(
    "(?:"
    "[\u2700-\u27bf]"
    "|[\U0001f1e6-\U0001f1ff]{2}"
    # Any astral-plane code point counts as an emoji.
    "|[\U00010000-\U0010ffff]"
    "|[\u0023-\u0039]\ufe0f?\u20e3"
    "|\u3299|\u3297|\u303d|\u3030|\u24c2"
    "|\u203c|\u2049"
    "|[\u25aa-\u25ab]|\u25b6|\u25c0|[\u25fb-\u25fe]"
    "|\u00a9|\u00ae|\u2122|\u2139"
    "|[\u2600-\u26ff]"
    "|\u2b05|\u2b06|\u2b07|\u2b1b|\u2b1c|\u2b50|\u2b55"
    "|\u231a|\u231b|\u2328|\u23cf|[\u23e9-\u23f3]|[\u23f8-\u23fa]"
    "|\u2934|\u2935"
    "|[\u2190-\u21ff]"
    ")"
)

EMOJI_STRIP_PATTERN = re.compile(
    "(?:"
    "[#*0-9]\ufe0f?\u20e3"
    "|["
    "\U0001f000-\U0001faff"
    "\U000e0020-\U000e007f"  # flag tag sequences
    "\u2700-\u27bf"
    "\u2600-\u26ff"
    "\u2190-\u21ff"
    "\u2b05-\u2b07\u2b1b\u2b1c\u2b50\u2b55"
    "\u231a\u231b\u2328\u23cf\u23e9-\u23f3\u23f8-\u23fa"
    "\u25aa\u25ab\u25b6\u25c0\u25fb-\u25fe"
    "\u2934\u2935\u203c\u2049\u2122\u2139\u24c2"
    "\u3030\u303d\u3297\u3299"
    "\u00a9\u00ae"
    "\u200d\ufe0e\ufe0f"  # joiner and variation selectors
    "]"
    ")"
)
