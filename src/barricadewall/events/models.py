"""Notifications exchanged between the host and plugins.

Fields are optional because hosts deliver them that way: a handler must treat
a missing planner, player or entity as "nothing to do".
"""

from __future__ import annotations

from dataclasses import dataclass

from barricadewall.core.identity import EntityId
from barricadewall.core.types import Planner, Player


@dataclass(frozen=True, slots=True)
class EntityBuilt:
    """A player finished placing a structure with a planner."""

    planner: Planner | None
    entity: EntityId | None


@dataclass(frozen=True, slots=True)
class ItemDeployed:
    """A deployable item was placed into the world."""

    planner: Planner | None
    entity: EntityId | None


@dataclass(frozen=True, slots=True)
class Deployed:
    """An entity finished deploying on behalf of a player."""

    entity: EntityId | None
    player: Player | None
