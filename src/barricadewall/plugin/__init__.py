"""The Barricade To Wall plugin.

Architecture Note:
    plugin/ holds the plugin's own behavior. It depends on host capabilities
    only through the protocols in host/ and never keeps module-level state;
    everything it owns hangs off BarricadeToWall's PluginContext.
"""

from barricadewall.plugin.commands import ToggleCommand
from barricadewall.plugin.context import BarricadeToWall, HostServices, PluginContext
from barricadewall.plugin.conversion import ConversionHandler, PendingReplacement
from barricadewall.plugin.lang import DEFAULT_MESSAGES, Lang
from barricadewall.plugin.permissions import PERMISSIONS, USE

__all__ = [
    "BarricadeToWall",
    "HostServices",
    "PluginContext",
    "ConversionHandler",
    "PendingReplacement",
    "ToggleCommand",
    "Lang",
    "DEFAULT_MESSAGES",
    "USE",
    "PERMISSIONS",
]
