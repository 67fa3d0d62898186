"""Extension layer — observability hooks via pluggy.

Discovery: entry_points (pip-installed) and an optional local directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from shieldctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
