"""Per-turn countdown for STOP matches"""

import asyncio
import logging
from typing import Any, Callable, Optional

from stop_game.types.match import EliminationReason

logger = logging.getLogger(__name__)


class TurnClock:
    """
    Cancellable countdown that fires an expiry callback at most once per run.

    The clock ticks on the running asyncio loop. Every start() replaces the
    previous run, and cancel() is safe to call at any time, including on a
    clock that is already stopped.
    """

    def __init__(
        self,
        on_expire: Callable[[EliminationReason], Any],
        on_tick: Optional[Callable[[int], Any]] = None,
        tick_interval: float = 1.0,
    ):
        self.on_expire = on_expire
        self.on_tick = on_tick
        self.tick_interval = tick_interval

        self._task: Optional[asyncio.Task] = None
        self._remaining: Optional[int] = None
        self._run_id = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def remaining(self) -> Optional[int]:
        """Seconds left in the current run; None when the clock was never armed or was cancelled"""
        return self._remaining

    def start(self, duration_seconds: int) -> None:
        """Arm the clock. Must be called with an event loop running."""
        if duration_seconds < 0:
            raise ValueError(f"Countdown cannot be negative: {duration_seconds}")

        loop = asyncio.get_running_loop()
        self.cancel()
        self._remaining = duration_seconds
        self._task = loop.create_task(self._countdown(self._run_id))
        logger.debug(f"Turn clock armed for {duration_seconds}s (run {self._run_id})")

    def cancel(self) -> None:
        """Disarm without firing."""
        # A stale run sees a different run id and exits without firing
        self._run_id += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.debug(f"Turn clock cancelled with {self._remaining}s left")
        self._remaining = None

    async def _countdown(self, run_id: int) -> None:
        while run_id == self._run_id and self._remaining > 0:
            await asyncio.sleep(self.tick_interval)
            if run_id != self._run_id:
                return
            self._remaining -= 1
            if self.on_tick is not None:
                try:
                    self.on_tick(self._remaining)
                except Exception as e:
                    logger.exception(f"Error in turn clock tick callback: {e}")

        if run_id != self._run_id:
            return

        # Detach before firing so the callback may re-arm the clock
        self._task = None
        self._run_id += 1
        logger.info("Turn clock expired")
        try:
            self.on_expire(EliminationReason.TIMEOUT)
        except Exception as e:
            logger.exception(f"Error in turn clock expiry callback: {e}")
