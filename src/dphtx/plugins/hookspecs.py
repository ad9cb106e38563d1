"""Pluggy hook specifications for dphtx assistant plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from dphtx.assistant import AssistantPackage

hookspec = pluggy.HookspecMarker("dphtx")


class AssistantHookSpec:
    """Hook specifications for the dphtx plugin system."""

    @hookspec
    def assistant_package(self) -> AssistantPackage | None:
        """Return the assistant package this plugin contributes."""
