"""Core value types: transforms and the players that place things."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quaternion:
        return cls()


@dataclass(frozen=True, slots=True)
class Player:
    """A connected player as seen by the plugin.

    Attributes:
        user_id: Unsigned 64-bit platform id.
        display_name: Name shown in chat.
        locale: Language code used to pick localized messages.
    """

    user_id: int
    display_name: str = ""
    locale: str = "en"

    @property
    def user_id_string(self) -> str:
        return str(self.user_id)


@dataclass(frozen=True, slots=True)
class Planner:
    """The building tool a player holds when placing a structure."""

    owner: Player | None = None

    def get_owner_player(self) -> Player | None:
        return self.owner
