"""Storage backends."""

from barricadewall.storage.allocator import EntityAllocator
from barricadewall.storage.local import LocalStorage
from barricadewall.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "EntityAllocator",
]
