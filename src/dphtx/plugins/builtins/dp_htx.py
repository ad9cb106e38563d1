"""Built-in plugin publishing the sketch-assistant-dp-htx rules.

Registered under the ``dphtx.assistants`` entry-point group as ``dp-htx``.
"""

from __future__ import annotations

import pluggy

from dphtx.assistant import AssistantPackage, build_assistant

hookimpl = pluggy.HookimplMarker("dphtx")

PLUGIN_NAME = "dp-htx"


class DpHtxPlugin:
    """Contributes the four naming rules."""

    @hookimpl
    def assistant_package(self) -> AssistantPackage:
        return build_assistant()
