"""Plugin discovery and package collection.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Each plugin contributes at most one assistant package through the
``assistant_package`` hook.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from dphtx.assistant import AssistantPackage
from dphtx.plugins.hookspecs import AssistantHookSpec

PROJECT_NAME = "dphtx"
ENTRY_POINT_GROUP = "dphtx.assistants"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and package collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AssistantHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``dphtx.assistants`` entry-point group.

        Plugins already registered under an entry point's name are kept
        as they are. Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._name_of(p) for p in self._pm.get_plugins()]

    def collect_packages(self) -> list[AssistantPackage]:
        """Ask every plugin for its package, skipping plugins that misbehave.

        Each plugin is called on its own rather than through the hook
        relay, so one failing plugin cannot hide the others' packages.
        Packages are returned sorted by plugin name.
        """
        packages: list[AssistantPackage] = []
        plugins = sorted(self._pm.get_plugins(), key=self._name_of)
        for plugin in plugins:
            plugin_name = self._name_of(plugin)
            hook = getattr(plugin, "assistant_package", None)
            if hook is None:
                continue

            try:
                package = hook()
            except Exception:
                logger.warning(
                    "Failed to collect assistant package from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            if package is None:
                continue
            if not isinstance(package, AssistantPackage):
                logger.warning(
                    "Plugin %s returned %s instead of an AssistantPackage",
                    plugin_name,
                    type(package).__name__,
                )
                continue
            packages.append(package)
        return packages

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading registers the plugin class itself. Hook methods
        called on a class object have no bound ``self`` and fail.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("dphtx")`` sets a ``dphtx_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "dphtx_impl", None):
                return True
        return False
