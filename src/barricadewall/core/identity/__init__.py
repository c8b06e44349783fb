"""Identity: entity handles and player ids."""

from barricadewall.core.identity.models import MAX_PLAYER_ID, EntityId, validate_player_id

__all__ = [
    "EntityId",
    "MAX_PLAYER_ID",
    "validate_player_id",
]
