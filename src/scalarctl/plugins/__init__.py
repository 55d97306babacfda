"""Extension layer — plugin system via pluggy.

Discovery: entry points in the ``scalarctl.plugins`` group plus
single-file plugins in a local directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from scalarctl.plugins.hookspecs import hookimpl
from scalarctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
