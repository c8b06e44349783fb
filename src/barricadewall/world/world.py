"""World: the host's entity table as the plugin sees it.

Usage:
    world = World(prefabs={"assets/prefabs/.../barricade.stone.prefab"})

    # Two-phase creation, like the host engine: create, configure, spawn
    entity = world.create_entity(prefab, position, rotation)
    world.set_owner(entity, player.user_id)
    world.spawn(entity)

    # Killing a stale or missing entity is a no-op
    world.kill(entity)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from barricadewall.core.components import Ownership, Prefab, Spawned, Transform
from barricadewall.core.identity import EntityId, validate_player_id
from barricadewall.core.types import Quaternion, Vector3
from barricadewall.storage.local import LocalStorage
from barricadewall.storage.protocol import Storage

logger = logging.getLogger(__name__)


class World:
    """Entity lifecycle coordinator over a storage backend.

    Args:
        storage: Component storage backend. Defaults to LocalStorage.
        prefabs: Known prefab names. When given, create_entity returns None for
            any other name; when omitted, every prefab name is accepted.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        prefabs: Iterable[str] | None = None,
    ):
        self._storage = storage or LocalStorage()
        self._prefabs: frozenset[str] | None = frozenset(prefabs) if prefabs is not None else None

    def register_prefabs(self, *names: str) -> None:
        """Add prefab names to the catalog. No-op when the catalog is open."""
        if self._prefabs is not None:
            self._prefabs = self._prefabs | frozenset(names)

    def is_known_prefab(self, name: str) -> bool:
        return self._prefabs is None or name in self._prefabs

    def create_entity(
        self,
        prefab: str,
        position: Vector3 | None = None,
        rotation: Quaternion | None = None,
    ) -> EntityId | None:
        """Create an inactive entity from a prefab.

        Returns:
            The new entity, or None when the prefab is not in the catalog.
        """
        if not prefab or not self.is_known_prefab(prefab):
            return None
        entity = self._storage.create_entity()
        self._storage.set_component(entity, Prefab(prefab))
        self._storage.set_component(
            entity,
            Transform(position or Vector3(), rotation or Quaternion.identity()),
        )
        return entity

    def spawn(self, entity: EntityId) -> bool:
        """Activate a created entity. Returns False if the entity is gone."""
        if not self._storage.entity_exists(entity):
            return False
        self._storage.set_component(entity, Spawned())
        return True

    def build(
        self,
        prefab: str,
        position: Vector3 | None = None,
        rotation: Quaternion | None = None,
        owner_id: int | None = None,
    ) -> EntityId | None:
        """Create, own and spawn an entity in one step, as a player placement does."""
        entity = self.create_entity(prefab, position, rotation)
        if entity is None:
            return None
        if owner_id is not None:
            self.set_owner(entity, owner_id)
        self.spawn(entity)
        return entity

    def kill(self, entity: EntityId) -> bool:
        """Destroy an entity. Returns False if it no longer existed."""
        if not self._storage.entity_exists(entity):
            return False
        self._storage.destroy_entity(entity)
        logger.debug("Killed entity %s", entity)
        return True

    def exists(self, entity: EntityId | None) -> bool:
        return entity is not None and self._storage.entity_exists(entity)

    def is_spawned(self, entity: EntityId) -> bool:
        return self._storage.has_component(entity, Spawned)

    def prefab_name(self, entity: EntityId) -> str | None:
        prefab = self._storage.get_component(entity, Prefab)
        return prefab.name if prefab is not None else None

    def transform(self, entity: EntityId) -> Transform | None:
        return self._storage.get_component(entity, Transform)

    def owner_id(self, entity: EntityId) -> int | None:
        ownership = self._storage.get_component(entity, Ownership)
        return ownership.owner_id if ownership is not None else None

    def set_owner(self, entity: EntityId, owner_id: int) -> bool:
        """Assign an owning player. Returns False if the entity is gone."""
        if not self._storage.entity_exists(entity):
            return False
        self._storage.set_component(entity, Ownership(validate_player_id(owner_id)))
        return True

    def entities(self, prefab: str | None = None) -> Iterator[EntityId]:
        """Iterate living entities, optionally only those built from a prefab."""
        for entity, (found,) in self._storage.query(Prefab):
            if prefab is None or found.name == prefab:
                yield entity

    def count(self, prefab: str | None = None) -> int:
        return sum(1 for _ in self.entities(prefab))
