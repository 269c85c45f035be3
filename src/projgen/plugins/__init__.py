"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin load failures are warnings, never errors.
"""

from projgen.plugins.manager import PluginManager

__all__ = ["PluginManager"]
