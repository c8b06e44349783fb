"""Preference store protocol.

Usage:
    store: PreferenceStore = JsonPreferenceStore(path, default=False)
    if store.get(player.user_id):
        ...
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PreferenceStore(Protocol):
    """Per-player opt-in flags with a default for players never seen."""

    @property
    def default(self) -> bool:
        """Value reported for players without a stored entry."""
        ...

    def get(self, player_id: int) -> bool:
        """Stored value, or the default when the player has none."""
        ...

    def set(self, player_id: int, value: bool) -> None:
        """Store a value and persist the whole mapping before returning."""
        ...
