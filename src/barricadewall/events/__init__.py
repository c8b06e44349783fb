"""Host notifications and their dispatch."""

from barricadewall.events.bus import EventBus
from barricadewall.events.models import Deployed, EntityBuilt, ItemDeployed

__all__ = [
    "EventBus",
    "EntityBuilt",
    "ItemDeployed",
    "Deployed",
]
