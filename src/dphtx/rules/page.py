"""Page names must start with an emoji.

The Symbols page is generated by Sketch and exempt.
"""

from __future__ import annotations

from dphtx.domain.naming import is_symbols_page, starts_with_emoji
from dphtx.rules.base import PACKAGE_NAME, RuleContext, RuleDefinition


def check_page_names(context: RuleContext) -> None:
    for page in context.document.pages:
        if is_symbols_page(page.name):
            continue
        if not starts_with_emoji(page.name):
            context.report(f'Page "{page.name}" should start with an emoji', page)


PAGE_NAME_RULE = RuleDefinition(
    name=f"{PACKAGE_NAME}/page-name-start-with-emoji",
    title="Page name should starts with an emoji",
    description="Reports a violation when Page name does not start with an emoji",
    rule=check_page_names,
)
