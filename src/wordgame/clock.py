"""Round countdown clock."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class RoundClock:
    """Counts a round down one second per tick and reports expiry once.

    When started inside a running event loop the clock schedules its own
    ticking task. Without a loop it only moves when ``tick()`` is called,
    which is how the engine is driven in synchronous code and tests.
    """

    def __init__(
        self,
        duration: int = 60,
        on_expire: Callable[[], None] | None = None,
        on_tick: Callable[[int], None] | None = None,
        interval: float = 1.0,
    ):
        if duration <= 0:
            raise ValueError(f"Round duration must be positive, got {duration}")
        self.duration = duration
        self.remaining = duration
        self.running = False
        self.interval = interval
        self.on_expire = on_expire
        self.on_tick = on_tick
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def scheduled(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Start or resume counting down from the current remaining time."""
        if self.running or self.remaining <= 0:
            return False
        self.running = True
        self._schedule()
        return True

    def pause(self) -> bool:
        """Halt the countdown, keeping the remaining time."""
        if not self.running:
            return False
        self.running = False
        self._cancel()
        return True

    def toggle(self) -> bool:
        if self.running:
            return self.pause()
        return self.start()

    def stop(self) -> None:
        """Halt without firing expiry."""
        self.running = False
        self._cancel()

    def reset(self) -> None:
        self.stop()
        self.remaining = self.duration

    def reconfigure(self, duration: int) -> bool:
        """Change the round length. Refused while the clock is running."""
        if duration <= 0:
            raise ValueError(f"Round duration must be positive, got {duration}")
        if self.running:
            return False
        self.duration = duration
        self.remaining = duration
        return True

    def tick(self) -> None:
        """One elapsed second. Expires the round when the count hits zero."""
        if not self.running:
            return
        self.remaining = max(0, self.remaining - 1)
        logger.debug("Clock tick: %ds left", self.remaining)
        if self.remaining == 0:
            self.running = False
            # The ticking task sees running=False and ends on its own
            self._task = None
            self._generation += 1
            if self.on_tick:
                self.on_tick(self.remaining)
            if self.on_expire:
                self.on_expire()
            return
        if self.on_tick:
            self.on_tick(self.remaining)

    def _schedule(self) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; clock advances on manual ticks")
            return
        self._cancel()
        self._task = asyncio.create_task(self._run(self._generation))

    def _cancel(self) -> None:
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _run(self, generation: int) -> None:
        while True:
            await asyncio.sleep(self.interval)
            # A paused or restarted clock leaves stale tasks behind
            if generation != self._generation or not self.running:
                return
            self.tick()
            if not self.running:
                return
