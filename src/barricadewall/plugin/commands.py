"""The toggle chat command."""

from __future__ import annotations

from collections.abc import Sequence

from barricadewall.core.types import Player
from barricadewall.host.protocol import ChatSink, MessageRenderer, PermissionService
from barricadewall.plugin import permissions as perms
from barricadewall.plugin.lang import Lang, message_player
from barricadewall.preferences.protocol import PreferenceStore


class ToggleCommand:
    """Flips a player's conversion preference and tells them the new state.

    Arguments after the command name are ignored.
    """

    def __init__(
        self,
        store: PreferenceStore,
        permissions: PermissionService,
        renderer: MessageRenderer,
        chat: ChatSink,
    ) -> None:
        self._store = store
        self._permissions = permissions
        self._renderer = renderer
        self._chat = chat

    def __call__(self, player: Player | None, command: str = "", args: Sequence[str] = ()) -> None:
        if player is None:
            return

        if not perms.has_permission(self._permissions, player, perms.USE):
            message_player(self._renderer, self._chat, player, Lang.NO_PERMISSION)
            return

        new_state = not self._store.get(player.user_id)
        self._store.set(player.user_id, new_state)

        if new_state:
            message_player(self._renderer, self._chat, player, Lang.BARRICADE_ENABLED)
        else:
            message_player(self._renderer, self._chat, player, Lang.BARRICADE_DISABLED)
