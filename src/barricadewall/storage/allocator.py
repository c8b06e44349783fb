"""Entity handle allocation."""

from __future__ import annotations

from collections import deque

from barricadewall.core.identity import EntityId


class EntityAllocator:
    """Hands out entity handles and recycles freed slots.

    Each slot carries a generation that is bumped when the slot is freed, so a
    handle to a killed barricade can never address the wall that later reuses
    its slot. Freed slots are reused oldest first.
    """

    def __init__(self, first_index: int = 1):
        self._next_index = first_index
        self._current: dict[int, int] = {}
        self._released: deque[int] = deque()

    def allocate(self) -> EntityId:
        if self._released:
            index = self._released.popleft()
        else:
            index = self._next_index
            self._next_index += 1
            self._current[index] = 0
        return EntityId(index, self._current[index])

    def deallocate(self, entity: EntityId) -> None:
        """Free a handle's slot. Stale handles are ignored."""
        if self.is_alive(entity):
            self._current[entity.index] += 1
            self._released.append(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        return (
            self._current.get(entity.index) == entity.generation
            and entity.index not in self._released
        )
