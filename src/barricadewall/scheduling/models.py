"""Scheduling models and configuration."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

TickCallback = Callable[[], None] | Callable[[], Awaitable[None]]
"""Zero-argument callable run on a later tick. May be sync or async."""


@dataclass(slots=True)
class ScheduledCallback:
    """A callback waiting in the next-tick queue.

    Attributes:
        callback: What to run.
        queued_at: Tick number that was current when it was queued.
        name: Label used in log messages.
    """

    callback: TickCallback
    queued_at: int
    name: str = ""


@dataclass
class TickLoopConfig:
    """Configuration for the tick loop.

    Passed to TickLoop at construction.
    """

    tick_rate: float = 30.0
    """Ticks per second when driven by TickLoop.run()."""

    max_catch_up: float = 0.25
    """Longest backlog in seconds replayed after a stall."""

    def __post_init__(self) -> None:
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate
