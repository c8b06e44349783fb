"""World state management.

Architecture Note:
    world/ is a stateful service layer over storage/. The plugin only ever
    talks to World, never to a storage backend directly.
"""

from barricadewall.world.world import World

__all__ = [
    "World",
]
