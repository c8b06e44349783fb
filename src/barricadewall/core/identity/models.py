"""Entity and player identity models.

Usage:
    entity = EntityId(index=42, generation=1)
    player_id = validate_player_id(76561198000000001)
"""

from dataclasses import dataclass

MAX_PLAYER_ID = 2**64 - 1
"""Player ids are unsigned 64-bit integers."""


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight entity identifier with generation for safe handle reuse.

    A handle whose generation no longer matches its slot refers to an entity
    that has been killed; lookups through it read as missing.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))


def validate_player_id(player_id: int) -> int:
    """Check that a player id fits in an unsigned 64-bit integer.

    Raises:
        ValueError: If the id is negative, too large, or not an integer.
    """
    if isinstance(player_id, bool) or not isinstance(player_id, int):
        raise ValueError(f"Player id must be an integer, got {player_id!r}")
    if not 0 <= player_id <= MAX_PLAYER_ID:
        raise ValueError(f"Player id {player_id} is outside the unsigned 64-bit range")
    return player_id
