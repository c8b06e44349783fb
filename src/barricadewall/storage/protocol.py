"""Entity table protocol.

World reads and writes entity components only through this interface, so a
host engine can put its own entity table behind a World.

Usage:
    world = World(storage=LocalStorage())
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeVar

from barricadewall.core.identity import EntityId

C = TypeVar("C")


class Storage(Protocol):
    """Per-entity component records.

    A handle whose entity was destroyed is stale: every read through it misses
    and destroy_entity on it does nothing, even after its slot is reused.
    """

    def create_entity(self) -> EntityId: ...

    def destroy_entity(self, entity: EntityId) -> None: ...

    def entity_exists(self, entity: EntityId) -> bool: ...

    def get_component(self, entity: EntityId, component_type: type[C]) -> C | None: ...

    def set_component(self, entity: EntityId, component: Any) -> None:
        """Attach a component, replacing any of the same type.

        Raises:
            KeyError: If the entity is missing or the handle is stale.
        """
        ...

    def remove_component(self, entity: EntityId, component_type: type) -> bool: ...

    def has_component(self, entity: EntityId, component_type: type) -> bool: ...

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Yield (entity, components) for live entities carrying every listed type."""
        ...
