"""Components attached to world entities.

Every entity built or spawned by the world carries a Prefab and a Transform.
Ownership is present only once an owner has been assigned, and Spawned marks
an entity that has been activated in the world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from barricadewall.core.types import Quaternion, Vector3


@dataclass(frozen=True, slots=True)
class Prefab:
    """Template the entity was created from."""

    name: str


@dataclass(frozen=True, slots=True)
class Transform:
    position: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True, slots=True)
class Ownership:
    owner_id: int


@dataclass(frozen=True, slots=True)
class Spawned:
    pass
