"""Barricade-to-wall conversion.

When a player with the feature enabled finishes building a barricade, the
barricade is replaced by the configured external wall one tick later. The swap
is deferred because killing an entity from inside the callback announcing its
creation leaves the host's in-flight event processing pointing at a dead
entity.

Usage:
    handler = ConversionHandler(world, tick_loop, store, permissions, replacements, bus=bus)
    bus.subscribe(EntityBuilt, handler.on_entity_built)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from barricadewall.core.identity import EntityId
from barricadewall.core.types import Planner, Player, Quaternion, Vector3
from barricadewall.events.bus import EventBus
from barricadewall.events.models import Deployed, EntityBuilt, ItemDeployed
from barricadewall.host.protocol import PermissionService
from barricadewall.plugin import permissions as perms
from barricadewall.preferences.protocol import PreferenceStore
from barricadewall.scheduling.scheduler import TickLoop
from barricadewall.world.world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PendingReplacement:
    """Everything the deferred swap needs, captured at build time.

    The original entity is gone by the time the replacement is created, so its
    transform and placer are copied out here rather than read later.
    """

    original: EntityId
    source_prefab: str
    dest_prefab: str
    position: Vector3
    rotation: Quaternion
    player: Player
    planner: Planner


class ConversionHandler:
    """Reacts to EntityBuilt and schedules barricade replacements.

    Args:
        world: Entity table the barricade lives in.
        tick_loop: Loop whose next tick runs the swap.
        store: Per-player enablement flags.
        permissions: Host permission service.
        replacements: Source prefab -> destination prefab.
        bus: Where replacement walls are re-announced. None disables it.
        reannounce: Emit EntityBuilt, ItemDeployed and Deployed for each
            replacement so other plugins see the wall as a fresh build.
    """

    def __init__(
        self,
        world: World,
        tick_loop: TickLoop,
        store: PreferenceStore,
        permissions: PermissionService,
        replacements: Mapping[str, str],
        bus: EventBus | None = None,
        reannounce: bool = True,
    ) -> None:
        self._world = world
        self._tick_loop = tick_loop
        self._store = store
        self._permissions = permissions
        self._replacements = dict(replacements)
        self._bus = bus
        self._reannounce = reannounce
        self._closed = False

    @property
    def replacements(self) -> dict[str, str]:
        return dict(self._replacements)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Stop reacting to builds. Replacements already queued become no-ops."""
        self._closed = True

    def is_enabled_for(self, player: Player) -> bool:
        return self._store.get(player.user_id)

    def on_entity_built(self, event: EntityBuilt) -> PendingReplacement | None:
        """Schedule a replacement if the built entity qualifies.

        Returns:
            The scheduled replacement, or None when the event was ignored.
        """
        planner, entity = event.planner, event.entity
        if self._closed or planner is None or entity is None:
            return None

        player = planner.get_owner_player()
        if player is None:
            return None

        if not perms.has_permission(self._permissions, player, perms.USE):
            return None

        if not self.is_enabled_for(player):
            return None

        prefab = self._world.prefab_name(entity)
        transform = self._world.transform(entity)
        if prefab is None or transform is None:
            return None

        dest_prefab = self._replacements.get(prefab)
        if dest_prefab is None:
            return None

        pending = PendingReplacement(
            original=entity,
            source_prefab=prefab,
            dest_prefab=dest_prefab,
            position=transform.position,
            rotation=transform.rotation,
            player=player,
            planner=planner,
        )
        self._tick_loop.next_tick(lambda: self.replace(pending), name="replace_barricade")
        return pending

    def replace(self, pending: PendingReplacement) -> EntityId | None:
        """Kill the original and spawn its replacement.

        Runs on the tick after the build. Any missing piece aborts quietly,
        leaving whatever is in the world as it is.

        Returns:
            The replacement entity, or None if nothing was spawned.
        """
        if self._closed or not self._world.is_known_prefab(pending.dest_prefab):
            return None

        if not self._world.kill(pending.original):
            return None

        new_entity = self._world.create_entity(
            pending.dest_prefab, pending.position, pending.rotation
        )
        if new_entity is None:
            return None

        self._world.set_owner(new_entity, pending.player.user_id)
        self._world.spawn(new_entity)
        logger.debug(
            "Replaced %s with %s for player %s",
            pending.source_prefab,
            pending.dest_prefab,
            pending.player.user_id_string,
        )

        if self._reannounce and self._bus is not None:
            self._announce(self._bus, pending, new_entity)
        return new_entity

    def _announce(self, bus: EventBus, pending: PendingReplacement, new_entity: EntityId) -> None:
        # Observers that already saw the barricade's EntityBuilt will see a
        # second build here, for the wall.
        bus.emit(EntityBuilt(pending.planner, new_entity))
        bus.emit(ItemDeployed(pending.planner, new_entity))
        bus.emit(Deployed(new_entity, pending.player))
