"""Core primitives: identity, value types and entity components.

Architecture Note:
    core/ holds stateless data definitions. Stateful services live in
    world/, storage/, scheduling/, events/, preferences/ and plugin/.
"""

from barricadewall.core.components import Ownership, Prefab, Spawned, Transform
from barricadewall.core.identity import MAX_PLAYER_ID, EntityId, validate_player_id
from barricadewall.core.types import Planner, Player, Quaternion, Vector3

__all__ = [
    # Types
    "Vector3",
    "Quaternion",
    "Player",
    "Planner",
    # Identity
    "EntityId",
    "MAX_PLAYER_ID",
    "validate_player_id",
    # Components
    "Prefab",
    "Transform",
    "Ownership",
    "Spawned",
]
