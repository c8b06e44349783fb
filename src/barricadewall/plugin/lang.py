"""Message keys, default English messages, and reply helpers."""

from __future__ import annotations

from barricadewall.core.types import Player
from barricadewall.host.protocol import ChatSink, MessageRenderer


class Lang:
    NO_PERMISSION = "NoPermission"
    BARRICADE_ENABLED = "BarricadeEnabled"
    BARRICADE_DISABLED = "BarricadeDisabled"


DEFAULT_MESSAGES: dict[str, str] = {
    Lang.NO_PERMISSION: "You do not have permission to use this command.",
    Lang.BARRICADE_ENABLED: (
        "You have turned Barricade-to-Wall ON! Any barricades you place will turn into walls."
    ),
    Lang.BARRICADE_DISABLED: (
        "You have turned Barricade-to-Wall OFF! Barricades you place will remain normal."
    ),
}


def message_player(
    renderer: MessageRenderer,
    chat: ChatSink,
    player: Player,
    key: str,
    *args: object,
) -> str:
    """Render a message in the player's locale and send it. Returns the text sent."""
    message = renderer.render(key, player.locale, *args)
    chat.send_reply(player, message)
    return message
