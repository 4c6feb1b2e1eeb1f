import asyncio
import logging
from typing import Optional

from core.services.monitor_controller import MonitorController

logger = logging.getLogger(__name__)

DEFAULT_TICK_PERIOD_MS = 2000


class TickScheduler:
    """
    Fixed-period driver calling controller.tick() on the running event loop.
    Commands issued from the same loop can never interleave with a tick.
    """

    def __init__(self, controller: MonitorController, period_ms: int = DEFAULT_TICK_PERIOD_MS):
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms} ms")
        self.controller = controller
        self.period_ms = period_ms
        self.running = False
        self.tick_count = 0
        self._task: Optional[asyncio.Task] = None

    def start(self):
        if self.running:
            return
        self.running = True
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._tick_loop())
        logger.info(f"TickScheduler started (period: {self.period_ms} ms)")

    def stop(self):
        if not self.running:
            return
        self.running = False
        if self._task:
            self._task.cancel()
            self._task = None
        logger.info("TickScheduler stopped")

    async def _tick_loop(self):
        interval = self.period_ms / 1000.0
        while self.running:
            await asyncio.sleep(interval)
            if not self.running:
                break
            try:
                self.controller.tick()
                self.tick_count += 1
            except Exception as e:
                logger.error(f"Tick failed: {e}")
