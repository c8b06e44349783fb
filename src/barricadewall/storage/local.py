"""In-process entity table backing the in-memory host.

Usage:
    world = World(storage=LocalStorage())
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

from barricadewall.core.identity import EntityId
from barricadewall.storage.allocator import EntityAllocator

C = TypeVar("C")


@dataclass(slots=True)
class _Record:
    handle: EntityId
    components: dict[type, Any] = field(default_factory=dict)


class LocalStorage:
    """Entity table keyed by slot index.

    A record remembers the handle it was created for; lookups through any
    other generation of the same slot miss. Components are immutable, so they
    are returned as stored.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._records: dict[int, _Record] = {}

    def _record(self, entity: EntityId) -> _Record | None:
        record = self._records.get(entity.index)
        if record is None or record.handle != entity:
            return None
        return record

    def create_entity(self) -> EntityId:
        entity = self._allocator.allocate()
        self._records[entity.index] = _Record(entity)
        return entity

    def destroy_entity(self, entity: EntityId) -> None:
        if self._record(entity) is not None:
            del self._records[entity.index]
            self._allocator.deallocate(entity)

    def entity_exists(self, entity: EntityId) -> bool:
        return self._record(entity) is not None

    def get_component(self, entity: EntityId, component_type: type[C]) -> C | None:
        record = self._record(entity)
        return record.components.get(component_type) if record is not None else None

    def set_component(self, entity: EntityId, component: Any) -> None:
        record = self._record(entity)
        if record is None:
            raise KeyError(f"Entity {entity} does not exist")
        record.components[type(component)] = component

    def remove_component(self, entity: EntityId, component_type: type) -> bool:
        record = self._record(entity)
        if record is None:
            return False
        return record.components.pop(component_type, None) is not None

    def has_component(self, entity: EntityId, component_type: type) -> bool:
        record = self._record(entity)
        return record is not None and component_type in record.components

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Scan every record in creation order of its slot."""
        for record in list(self._records.values()):
            if self._records.get(record.handle.index) is not record:
                continue
            found = record.components
            if all(t in found for t in component_types):
                yield record.handle, tuple(found[t] for t in component_types)

    def __len__(self) -> int:
        return len(self._records)
