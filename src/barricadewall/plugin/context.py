"""Plugin lifecycle: everything the plugin owns lives on one object.

Usage:
    host = HostServices.in_memory()
    plugin = BarricadeToWall(host, PluginSettings(config_dir=..., data_dir=...))
    plugin.init()
    ...
    plugin.unload()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from barricadewall.config.loader import load_config
from barricadewall.config.models import PLUGIN_VERSION, Configuration
from barricadewall.config.settings import PluginSettings
from barricadewall.events.bus import EventBus
from barricadewall.events.models import EntityBuilt
from barricadewall.host.chat import ChatLog, CommandRegistry
from barricadewall.host.localization import DEFAULT_LOCALE, Localizer
from barricadewall.host.permissions import MemoryPermissions
from barricadewall.host.protocol import (
    ChatSink,
    CommandService,
    MessageRenderer,
    PermissionService,
)
from barricadewall.plugin import permissions as perms
from barricadewall.plugin.commands import ToggleCommand
from barricadewall.plugin.conversion import ConversionHandler
from barricadewall.plugin.lang import DEFAULT_MESSAGES
from barricadewall.preferences.json_store import JsonPreferenceStore
from barricadewall.scheduling.models import TickLoopConfig
from barricadewall.scheduling.scheduler import TickLoop
from barricadewall.world.world import World

logger = logging.getLogger(__name__)


@dataclass
class HostServices:
    """Capabilities the host server hands to the plugin."""

    world: World
    tick_loop: TickLoop
    bus: EventBus
    permissions: PermissionService
    renderer: MessageRenderer
    chat: ChatSink
    commands: CommandService

    @classmethod
    def in_memory(
        cls,
        prefabs: Iterable[str] | None = None,
        tick_rate: float = 30.0,
    ) -> HostServices:
        """Wire up the in-memory host implementations."""
        return cls(
            world=World(prefabs=prefabs),
            tick_loop=TickLoop(TickLoopConfig(tick_rate=tick_rate)),
            bus=EventBus(),
            permissions=MemoryPermissions(),
            renderer=Localizer(),
            chat=ChatLog(),
            commands=CommandRegistry(),
        )


@dataclass
class PluginContext:
    """State created on init and dropped on unload."""

    config: Configuration
    store: JsonPreferenceStore
    handler: ConversionHandler
    command: ToggleCommand
    subscriptions: list[tuple[type, Callable[[Any], None]]] = field(default_factory=list)


class BarricadeToWall:
    """Turns barricades into high external walls automatically.

    Args:
        host: Host capabilities to register with.
        settings: File locations and host options. Defaults to PluginSettings().
    """

    name = "BarricadeToWall"
    title = "Barricade To Wall"
    author = "VisEntities"
    version = PLUGIN_VERSION

    def __init__(self, host: HostServices, settings: PluginSettings | None = None) -> None:
        self._host = host
        self._settings = settings or PluginSettings()
        self._context: PluginContext | None = None

    @property
    def host(self) -> HostServices:
        return self._host

    @property
    def settings(self) -> PluginSettings:
        return self._settings

    @property
    def loaded(self) -> bool:
        return self._context is not None

    @property
    def context(self) -> PluginContext:
        """Live plugin state.

        Raises:
            RuntimeError: If the plugin is not loaded.
        """
        if self._context is None:
            raise RuntimeError(f"{self.name} is not loaded")
        return self._context

    def init(self) -> PluginContext:
        """Load config and data, then register with the host.

        Calling init on a loaded plugin returns the existing context.
        """
        if self._context is not None:
            return self._context

        host = self._host
        config = load_config(self._settings.config_path, self.version)
        store = JsonPreferenceStore(self._settings.data_path, default=config.enable_by_default)
        store.load()

        # Both files are read before anything is registered with the host
        perms.register_permissions(host.permissions, self.name)
        host.renderer.register_messages(DEFAULT_MESSAGES, DEFAULT_LOCALE)

        handler = ConversionHandler(
            world=host.world,
            tick_loop=host.tick_loop,
            store=store,
            permissions=host.permissions,
            replacements=config.barricade_replacements,
            bus=host.bus,
            reannounce=self._settings.reannounce,
        )
        command = ToggleCommand(store, host.permissions, host.renderer, host.chat)

        context = PluginContext(config=config, store=store, handler=handler, command=command)
        host.bus.subscribe(EntityBuilt, handler.on_entity_built)
        context.subscriptions.append((EntityBuilt, handler.on_entity_built))
        host.commands.add_chat_command(config.chat_command, self.name, command)

        self._context = context
        logger.info(
            "%s v%s loaded: /%s, %d replacement(s), enabled by default: %s",
            self.title,
            self.version,
            config.chat_command,
            len(config.barricade_replacements),
            config.enable_by_default,
        )
        return context

    def unload(self) -> None:
        """Unregister from the host and drop all plugin state.

        Replacements already queued on the tick loop become no-ops.
        """
        context = self._context
        if context is None:
            return

        context.handler.close()
        for event_type, handler in context.subscriptions:
            self._host.bus.unsubscribe(event_type, handler)
        self._host.commands.remove_chat_commands(self.name)
        self._host.permissions.unregister_permissions(self.name)

        self._context = None
        logger.info("%s unloaded", self.title)
