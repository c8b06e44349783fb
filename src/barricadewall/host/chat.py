"""Chat surface: reply sink and command registry."""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass

from barricadewall.core.types import Player
from barricadewall.host.protocol import CommandHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChatMessage:
    user_id: int
    message: str


class ChatLog:
    """ChatSink that records every reply it is asked to deliver."""

    def __init__(self) -> None:
        self.messages: list[ChatMessage] = []

    def send_reply(self, player: Player, message: str) -> None:
        self.messages.append(ChatMessage(player.user_id, message))

    def for_player(self, user_id: int) -> list[str]:
        return [m.message for m in self.messages if m.user_id == user_id]

    def last(self, user_id: int) -> str | None:
        replies = self.for_player(user_id)
        return replies[-1] if replies else None


@dataclass(frozen=True, slots=True)
class _Registration:
    owner: str
    handler: CommandHandler


class CommandRegistry:
    """CommandService that routes "/name args..." chat lines to handlers.

    Command names are matched case-insensitively. A name can only be held by
    one owner at a time.
    """

    def __init__(self) -> None:
        self._commands: dict[str, _Registration] = {}

    def add_chat_command(self, name: str, owner: str, handler: CommandHandler) -> None:
        key = name.strip().lower()
        if not key or any(c.isspace() for c in key):
            raise ValueError(f"Invalid chat command name: {name!r}")
        existing = self._commands.get(key)
        if existing is not None and existing.owner != owner:
            raise ValueError(f"Chat command /{key} is already registered by {existing.owner!r}")
        self._commands[key] = _Registration(owner, handler)

    def remove_chat_commands(self, owner: str) -> None:
        for key in [k for k, r in self._commands.items() if r.owner == owner]:
            del self._commands[key]

    def commands(self) -> list[str]:
        return sorted(self._commands)

    def dispatch(self, player: Player, text: str) -> bool:
        """Run the command in a chat line.

        Returns:
            True if the line named a registered command, False otherwise.
        """
        text = text.strip()
        if not text.startswith("/"):
            return False
        try:
            parts = shlex.split(text[1:])
        except ValueError:
            parts = text[1:].split()
        if not parts:
            return False

        name, args = parts[0].lower(), parts[1:]
        registration = self._commands.get(name)
        if registration is None:
            return False

        logger.debug("Player %s ran /%s with %d arg(s)", player.user_id_string, name, len(args))
        registration.handler(player, name, args)
        return True
