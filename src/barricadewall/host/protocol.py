"""Protocols for the capabilities a host server provides to plugins.

The plugin never implements permissions, localization or chat itself. It is
handed objects satisfying these protocols, which lets a real server bridge
plug in its own services and lets tests use the in-memory ones.

Usage:
    permissions: PermissionService = MemoryPermissions()
    permissions.register_permission("barricadetowall.use", owner="BarricadeToWall")
    permissions.grant(player.user_id, "barricadetowall.use")
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Protocol, runtime_checkable

from barricadewall.core.types import Player

CommandHandler = Callable[[Player, str, Sequence[str]], None]
"""Signature: (player, command_name, args) -> None"""


@runtime_checkable
class PermissionService(Protocol):
    """Grants and checks named capabilities per player."""

    def register_permission(self, name: str, owner: str) -> None:
        """Declare a permission owned by a plugin."""
        ...

    def unregister_permissions(self, owner: str) -> None:
        """Forget every permission a plugin declared."""
        ...

    def has_permission(self, player_id: int, name: str) -> bool:
        """Check whether a player holds a registered permission."""
        ...


@runtime_checkable
class MessageRenderer(Protocol):
    """Looks up localized message templates and fills them in."""

    def register_messages(self, messages: Mapping[str, str], locale: str = "en") -> None:
        """Add or replace message templates for a locale."""
        ...

    def render(self, key: str, locale: str = "en", *args: object) -> str:
        """Render a message for a locale, applying positional args."""
        ...


@runtime_checkable
class ChatSink(Protocol):
    """Delivers chat replies to a player."""

    def send_reply(self, player: Player, message: str) -> None: ...


@runtime_checkable
class CommandService(Protocol):
    """Registers chat commands on the host."""

    def add_chat_command(self, name: str, owner: str, handler: CommandHandler) -> None: ...

    def remove_chat_commands(self, owner: str) -> None: ...
