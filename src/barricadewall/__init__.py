"""Barricade To Wall: turns placed barricades into high external walls.

Usage:
    from barricadewall import BarricadeToWall, HostServices, PluginSettings

    host = HostServices.in_memory()
    plugin = BarricadeToWall(host, PluginSettings())
    plugin.init()

    # The host delivers build events and runs ticks
    host.bus.emit(EntityBuilt(planner, barricade))
    host.tick_loop.tick()  # barricade is now a wall
"""

__version__ = "1.1.0"

# Core primitives
from barricadewall.core import (
    EntityId,
    Planner,
    Player,
    Quaternion,
    Vector3,
)

# Configuration
from barricadewall.config import (
    ConfigError,
    Configuration,
    PluginSettings,
    load_config,
)

# Events
from barricadewall.events import (
    Deployed,
    EntityBuilt,
    EventBus,
    ItemDeployed,
)

# Plugin
from barricadewall.plugin import (
    BarricadeToWall,
    ConversionHandler,
    HostServices,
    PluginContext,
    ToggleCommand,
)

# Preferences
from barricadewall.preferences import (
    JsonPreferenceStore,
    PreferenceStore,
    PreferenceStoreError,
)

# Scheduling
from barricadewall.scheduling import (
    TickLoop,
    TickLoopConfig,
)

# World
from barricadewall.world import World

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "Player",
    "Planner",
    "Vector3",
    "Quaternion",
    # Config
    "Configuration",
    "PluginSettings",
    "ConfigError",
    "load_config",
    # Events
    "EventBus",
    "EntityBuilt",
    "ItemDeployed",
    "Deployed",
    # Plugin
    "BarricadeToWall",
    "HostServices",
    "PluginContext",
    "ConversionHandler",
    "ToggleCommand",
    # Preferences
    "PreferenceStore",
    "JsonPreferenceStore",
    "PreferenceStoreError",
    # Scheduling
    "TickLoop",
    "TickLoopConfig",
    # World
    "World",
]
