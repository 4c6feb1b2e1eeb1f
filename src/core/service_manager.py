# External libs
import asyncio
import logging
import random
from typing import Optional

# Internal libs
from core.config_loader import config_loader
from core.event_hub import MonitorTopic, event_hub, init_event_hub
from core.models.log_entry import LogCategory, LogEntry
from core.services.monitor_controller import MonitorController
from core.services.tick_scheduler import TickScheduler

logger = logging.getLogger(__name__)


def build_controller(seed: Optional[int] = None) -> MonitorController:
    """Create a controller wired to the loaded configuration and the global event hub."""
    config = config_loader.get_config()
    return MonitorController(
        rng=random.Random(seed),
        limits=config.limits,
        bounds=config.bounds,
        log_capacity=config.log_capacity,
        level_history_capacity=config.level_history_capacity,
        hub=event_hub,
    )


class ServiceManager:

    def __init__(self):
        self.controller: MonitorController = build_controller()
        self.scheduler: Optional[TickScheduler] = None
        self.running = False

    async def start_services(self, tick_period_ms: Optional[int] = None,
                             scheduler_enabled: bool = True, seed: Optional[int] = None):
        """Start the periodic tick driver if not already started.
        Args:
            tick_period_ms: Tick period; defaults to the configured value.
            scheduler_enabled: When False, the controller only advances on explicit ticks.
            seed: Optional seed for the sensor simulator.
        """
        if self.running:
            return

        logger.info("Starting background services...")
        init_event_hub(asyncio.get_running_loop())
        event_hub.subscribe(MonitorTopic.LOG_ENTRY, self._on_log_entry)

        if seed is not None:
            self.controller = build_controller(seed)

        period = tick_period_ms or config_loader.get_tick_period_ms()
        if scheduler_enabled:
            self.scheduler = TickScheduler(self.controller, period)
            self.scheduler.start()
        else:
            logger.info("Tick scheduler disabled; waiting for explicit ticks")

        self.running = True

    def stop_services(self):
        if self.scheduler is not None:
            self.scheduler.stop()
            self.scheduler = None
        event_hub.unsubscribe(MonitorTopic.LOG_ENTRY, self._on_log_entry)
        init_event_hub(None)
        self.running = False
        logger.info("Background services stopped")

    @staticmethod
    def _on_log_entry(topic: MonitorTopic, entry: LogEntry):
        """Mirror event log entries into the process log."""
        level = logging.WARNING if entry.category is LogCategory.ALERT else logging.INFO
        logger.log(level, f"[{entry.category.value}] {entry.message}")


service_manager = ServiceManager()


def get_controller() -> MonitorController:
    """FastAPI dependency returning the active controller."""
    return service_manager.controller
