"""Groups directly inside artboards must not keep a generated name."""

from __future__ import annotations

from dphtx.domain.document import Group
from dphtx.domain.naming import is_archived, is_default_group_name
from dphtx.rules.base import PACKAGE_NAME, RuleContext, RuleDefinition


def check_group_names(context: RuleContext) -> None:
    for page in context.document.pages:
        if is_archived(page.name):
            continue
        for artboard in page.artboards():
            if is_archived(artboard.name):
                continue
            for layer in artboard.layers:
                if (
                    not isinstance(layer, Group)
                    or is_archived(layer.name)
                    or context.is_ignored(layer)
                ):
                    continue
                if is_default_group_name(layer.name):
                    context.report(f'Group name for "{layer.name}" shouldn\'t be default', layer)


GROUP_NAME_RULE = RuleDefinition(
    name=f"{PACKAGE_NAME}/group-name-shouldnt-be-default",
    title="Group should not be left with the default name",
    description="Reports a violation when Group kept it's default name",
    rule=check_group_names,
)
