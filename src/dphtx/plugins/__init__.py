"""Extension layer — assistant packages via pluggy.

Discovery: entry_points (pip-installed) in the ``dphtx.assistants`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from dphtx.plugins.manager import PluginManager

__all__ = ["PluginManager"]
