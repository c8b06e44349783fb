"""Tick loop and deferred work."""

from barricadewall.scheduling.models import ScheduledCallback, TickCallback, TickLoopConfig
from barricadewall.scheduling.scheduler import TickLoop

__all__ = [
    "TickLoop",
    "TickLoopConfig",
    "ScheduledCallback",
    "TickCallback",
]
