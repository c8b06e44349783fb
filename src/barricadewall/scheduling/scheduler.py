"""Single-threaded tick loop with a next-tick callback queue.

Usage:
    loop = TickLoop()
    loop.next_tick(lambda: print("runs on the following tick"))
    await loop.tick_async()  # or loop.tick() from sync code

    # Drive it in real time until stopped
    task = asyncio.create_task(loop.run())
    ...
    loop.stop()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections import deque

from barricadewall.scheduling.models import ScheduledCallback, TickCallback, TickLoopConfig

logger = logging.getLogger(__name__)


class TickLoop:
    """Cooperative scheduler: everything runs on one asyncio loop.

    Callbacks queued with next_tick() run on the next call to tick_async().
    Callbacks queued while a tick is running are held for the tick after, so a
    continuation never runs inside the same pass that scheduled it.

    Args:
        config: Tick rate and catch-up limits. Defaults to TickLoopConfig().
    """

    def __init__(self, config: TickLoopConfig | None = None) -> None:
        self._config = config or TickLoopConfig()
        self._pending: deque[ScheduledCallback] = deque()
        self._tick = 0
        self._running = False

    @property
    def current_tick(self) -> int:
        return self._tick

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next tick."""
        return len(self._pending)

    @property
    def running(self) -> bool:
        return self._running

    def next_tick(self, callback: TickCallback, name: str = "") -> ScheduledCallback:
        """Queue a callback for the next tick."""
        scheduled = ScheduledCallback(
            callback=callback,
            queued_at=self._tick,
            name=name or getattr(callback, "__name__", "callback"),
        )
        self._pending.append(scheduled)
        return scheduled

    def clear(self) -> int:
        """Drop every pending callback. Returns how many were dropped."""
        dropped = len(self._pending)
        self._pending.clear()
        return dropped

    async def tick_async(self) -> int:
        """Advance one tick, running the callbacks queued before it started.

        A callback that raises is logged and the rest of the batch still runs.

        Returns:
            Number of callbacks run.
        """
        self._tick += 1
        batch, self._pending = self._pending, deque()

        for scheduled in batch:
            try:
                result = scheduled.callback()
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "Tick %d: callback %r queued at tick %d failed",
                    self._tick,
                    scheduled.name,
                    scheduled.queued_at,
                )

        return len(batch)

    def tick(self) -> int:
        """Synchronous wrapper for tick_async."""
        return asyncio.run(self.tick_async())

    async def run(self, ticks: int | None = None) -> None:
        """Tick at the configured rate until stop() or `ticks` ticks have run."""
        interval = self._config.tick_interval
        self._running = True
        completed = 0
        last = time.perf_counter()
        acc = 0.0
        try:
            while self._running and (ticks is None or completed < ticks):
                now = time.perf_counter()
                acc = min(acc + now - last, max(self._config.max_catch_up, interval))
                last = now

                if acc < interval:
                    await asyncio.sleep(interval - acc)
                    continue

                while acc >= interval and (ticks is None or completed < ticks):
                    acc -= interval
                    await self.tick_async()
                    completed += 1
        finally:
            self._running = False

    def stop(self) -> None:
        self._running = False
