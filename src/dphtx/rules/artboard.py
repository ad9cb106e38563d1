"""Artboard names must start with their page's name.

The page's decorative emoji are stripped first, so on a page called
``"🎨 Onboarding"`` every artboard is expected to start with
``"Onboarding - "``.
"""

from __future__ import annotations

from dphtx.domain.naming import (
    ARTBOARD_SEPARATOR,
    is_archived,
    is_symbols_page,
    strip_emoji,
)
from dphtx.rules.base import PACKAGE_NAME, RuleContext, RuleDefinition


def check_artboard_names(context: RuleContext) -> None:
    for page in context.document.pages:
        if is_symbols_page(page.name) or is_archived(page.name):
            continue
        page_name = strip_emoji(page.name).strip()
        prefix = page_name + ARTBOARD_SEPARATOR
        for artboard in page.artboards():
            if (
                artboard.name == page_name
                or is_archived(artboard.name)
                or context.is_ignored(artboard)
            ):
                continue
            if not artboard.name.startswith(prefix):
                context.report(
                    f'Artboard "{artboard.name}"\'s Name should start with "{prefix}"',
                    artboard,
                )


ARTBOARD_NAME_RULE = RuleDefinition(
    name=f"{PACKAGE_NAME}/artboard-name-start-with-page-name",
    title="Artboard name should start with it's parent page's name",
    description=(
        "Reports a violation when Artboard name does not start with "
        "its parent page's name without emoji"
    ),
    rule=check_artboard_names,
)
