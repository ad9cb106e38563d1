"""AssistantRuntime: the embedding entry point for hosts.

Created once per host process. Configures logging from the settings,
registers the built-in plugin, discovers entry-point plugins, and runs
every collected package against a document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dphtx.config.logging import configure_logging
from dphtx.config.settings import LintSettings
from dphtx.plugins.builtins.dp_htx import PLUGIN_NAME, DpHtxPlugin
from dphtx.plugins.manager import PluginManager
from dphtx.services.lint import LintService

if TYPE_CHECKING:
    from dphtx.assistant import AssistantPackage
    from dphtx.domain.document import Document
    from dphtx.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AssistantRuntime:
    """Loaded packages plus the settings to run them with.

    Packages are collected lazily on first use, so constructing a runtime
    never imports third-party plugins.
    """

    def __init__(
        self,
        settings: LintSettings | None = None,
        *,
        discover: bool = True,
    ) -> None:
        self.settings = settings or LintSettings.load()
        self._discover = discover
        self._plugins: PluginManager | None = None
        self._packages: list[AssistantPackage] | None = None

        configure_logging(verbose=self.settings.verbose, log_json=self.settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (built and loaded on first access)."""
        if self._plugins is None:
            pm = PluginManager()
            pm.register_plugin(DpHtxPlugin(), name=PLUGIN_NAME)
            if self._discover:
                names = pm.discover_and_load()
                logger.debug("Loaded plugins: %s", ", ".join(names))
            self._plugins = pm
        return self._plugins

    @property
    def packages(self) -> list[AssistantPackage]:
        """Every assistant package contributed by a registered plugin."""
        if self._packages is None:
            self._packages = self.plugins.collect_packages()
        return self._packages

    def lint(self, document: Document | Mapping[str, Any]) -> list[ServiceResult]:
        """Run each package against *document*; one result per package."""
        return [
            LintService.from_settings(package, self.settings).lint(document)
            for package in self.packages
        ]
