"""Symbols must be organised with ``/`` grouping.

Only layers placed directly on the first page named ``Symbols`` are
checked; anything nested deeper, or on other pages, is left alone.
"""

from __future__ import annotations

from dphtx.domain.naming import SYMBOLS_PAGE, is_archived, uses_slash_grouping
from dphtx.rules.base import PACKAGE_NAME, RuleContext, RuleDefinition


def check_symbol_names(context: RuleContext) -> None:
    page = context.document.find_page(SYMBOLS_PAGE)
    if page is None:
        return
    for symbol in page.layers:
        if is_archived(symbol.name) or context.is_ignored(symbol):
            continue
        if not uses_slash_grouping(symbol.name):
            context.report(f'Symbol "{symbol.name}" should use forward slash grouping', symbol)


SYMBOL_NAME_RULE = RuleDefinition(
    name=f"{PACKAGE_NAME}/symbol-name-should-use-forward-slash-grouping",
    title="Symbol names should use forward slash grouping",
    description="Reports a violation when symbol is not using forward slash grouping",
    rule=check_symbol_names,
)
