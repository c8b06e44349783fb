"""Host capabilities the plugin depends on, with in-memory implementations.

Architecture Note:
    protocol.py defines what a server must provide. The other modules are
    the reference implementations used by tests and the example session.
"""

from barricadewall.host.chat import ChatLog, ChatMessage, CommandRegistry
from barricadewall.host.localization import DEFAULT_LOCALE, Localizer
from barricadewall.host.permissions import MemoryPermissions
from barricadewall.host.protocol import (
    ChatSink,
    CommandHandler,
    CommandService,
    MessageRenderer,
    PermissionService,
)

__all__ = [
    # Protocols
    "PermissionService",
    "MessageRenderer",
    "ChatSink",
    "CommandService",
    "CommandHandler",
    # Implementations
    "MemoryPermissions",
    "Localizer",
    "DEFAULT_LOCALE",
    "ChatLog",
    "ChatMessage",
    "CommandRegistry",
]
