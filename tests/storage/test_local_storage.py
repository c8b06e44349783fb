"""Unit tests for LocalStorage, EntityAllocator and atomic file writes."""

from dataclasses import dataclass

import pytest

from barricadewall.core.identity import EntityId
from barricadewall.storage import EntityAllocator, LocalStorage
from barricadewall.storage.files import atomic_write_text


@dataclass(frozen=True, slots=True)
class Health:
    value: int


@dataclass(frozen=True, slots=True)
class Label:
    text: str


def test_allocator_recycles_index_with_new_generation():
    allocator = EntityAllocator()
    first = allocator.allocate()
    allocator.deallocate(first)

    second = allocator.allocate()

    assert second.index == first.index
    assert second.generation == first.generation + 1
    assert not allocator.is_alive(first)
    assert allocator.is_alive(second)


def test_allocator_ignores_double_deallocate():
    allocator = EntityAllocator()
    entity = allocator.allocate()
    allocator.deallocate(entity)
    allocator.deallocate(entity)

    a = allocator.allocate()
    b = allocator.allocate()

    assert a.index != b.index


def test_set_and_get_component():
    storage = LocalStorage()
    entity = storage.create_entity()
    storage.set_component(entity, Health(10))

    assert storage.get_component(entity, Health) == Health(10)
    assert storage.has_component(entity, Health)
    assert storage.get_component(entity, Label) is None


def test_destroyed_entity_reads_as_missing():
    storage = LocalStorage()
    entity = storage.create_entity()
    storage.set_component(entity, Health(1))

    storage.destroy_entity(entity)

    assert not storage.entity_exists(entity)
    assert storage.get_component(entity, Health) is None
    assert not storage.has_component(entity, Health)


def test_destroy_missing_entity_is_noop():
    storage = LocalStorage()
    storage.destroy_entity(EntityId(index=999, generation=0))
    assert len(storage) == 0


def test_stale_handle_does_not_see_recycled_entity():
    storage = LocalStorage()
    old = storage.create_entity()
    storage.destroy_entity(old)
    new = storage.create_entity()
    storage.set_component(new, Health(5))

    assert new.index == old.index
    assert storage.get_component(old, Health) is None
    assert storage.get_component(new, Health) == Health(5)


def test_set_component_on_missing_entity_raises():
    storage = LocalStorage()
    with pytest.raises(KeyError):
        storage.set_component(EntityId(index=42), Health(1))


def test_remove_component():
    storage = LocalStorage()
    entity = storage.create_entity()
    storage.set_component(entity, Health(1))

    assert storage.remove_component(entity, Health) is True
    assert storage.remove_component(entity, Health) is False


def test_query_returns_only_entities_with_all_types():
    storage = LocalStorage()
    both = storage.create_entity()
    storage.set_component(both, Health(1))
    storage.set_component(both, Label("a"))
    only_health = storage.create_entity()
    storage.set_component(only_health, Health(2))

    results = list(storage.query(Health, Label))

    assert results == [(both, (Health(1), Label("a")))]


def test_atomic_write_creates_parents_and_replaces(tmp_path):
    target = tmp_path / "nested" / "file.json"

    atomic_write_text(target, "first")
    atomic_write_text(target, "second")

    assert target.read_text(encoding="utf-8") == "second"
    assert [p.name for p in target.parent.iterdir()] == ["file.json"]
