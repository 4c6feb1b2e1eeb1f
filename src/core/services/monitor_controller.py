import logging
import random
import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from core.event_hub import EventHub, MonitorTopic
from core.models.actuator_state import ActuatorState
from core.models.circular_buffer import CircularBuffer
from core.models.config_data import ControlLimits, SimulationBounds
from core.models.fault_mode import FaultMode
from core.models.log_entry import LogCategory, LogEntry
from core.models.override_state import OverrideState
from core.models.sensor_reading import SensorReading
from core.processing.control_logic import decide, threshold_exceeded
from core.processing.fault_injector import FaultInjector
from core.processing.sensor_simulator import next_reading
from core.services.event_log import DEFAULT_LOG_CAPACITY, EventLog

logger = logging.getLogger(__name__)

INITIAL_READING = SensorReading(level=5.2, gas=320)
DEFAULT_LEVEL_HISTORY = 30
ALERT_PAYLOAD = "OVERFLOW / GAS DETECTED"


@dataclass(frozen=True)
class MonitorSnapshot:
    """Read-only view of the controller state at one instant."""
    level: float
    gas: int
    relay_on: bool
    buzzer_on: bool
    alert_active: bool
    threshold_exceeded: bool
    manual_mode: bool
    manual_relay: bool
    fault: FaultMode
    log: List[LogEntry]


class MonitorController:
    """
    Composition root for one simulated sewage monitor.

    Owns the current reading, fault mode, override state, derived actuator
    state and the event log. Every mutation recomputes the actuators
    immediately and logs the rising edge of an automatic alert. Callers must
    not run two mutations concurrently.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        limits: ControlLimits = ControlLimits(),
        bounds: SimulationBounds = SimulationBounds(),
        log_capacity: int = DEFAULT_LOG_CAPACITY,
        level_history_capacity: int = DEFAULT_LEVEL_HISTORY,
        hub: Optional[EventHub] = None,
        initial_reading: SensorReading = INITIAL_READING,
    ):
        self._rng = rng or random.Random()
        self._limits = limits
        self._bounds = bounds
        self._hub = hub

        self._reading = initial_reading
        self._faults = FaultInjector()
        self._override = OverrideState()
        self._log = EventLog(log_capacity, clock=clock, hub=hub)
        self._level_history: CircularBuffer[float] = CircularBuffer(level_history_capacity)

        self._actuators, self._alert_active = decide(self._reading, self._override, self._limits)

    # ------------------------------------------------------------------ queries

    @property
    def reading(self) -> SensorReading:
        return self._reading

    @property
    def fault(self) -> FaultMode:
        return self._faults.mode

    @property
    def override(self) -> OverrideState:
        return self._override

    @property
    def actuators(self) -> ActuatorState:
        return self._actuators

    @property
    def alert_active(self) -> bool:
        return self._alert_active

    @property
    def event_log(self) -> EventLog:
        return self._log

    def snapshot(self) -> MonitorSnapshot:
        return MonitorSnapshot(
            level=self._reading.level,
            gas=self._reading.gas,
            relay_on=self._actuators.relay_on,
            buzzer_on=self._actuators.buzzer_on,
            alert_active=self._alert_active,
            threshold_exceeded=threshold_exceeded(self._reading, self._limits),
            manual_mode=self._override.manual_mode,
            manual_relay=self._override.manual_relay,
            fault=self._faults.mode,
            log=self._log.entries(),
        )

    def level_history(self) -> List[float]:
        """Levels of the most recent ticks, oldest first."""
        return self._level_history.get_all()

    def telemetry(self) -> dict:
        """Live data payload as the device would publish it."""
        return {
            "level": round(self._reading.level, 2),
            "gas": self._reading.gas,
            "alert": ALERT_PAYLOAD if self._alert_active else None,
        }

    # ----------------------------------------------------------------- commands

    def tick(self) -> MonitorSnapshot:
        """Advance the simulation by one reading and re-evaluate the actuators."""
        self._reading = next_reading(self._reading, self._faults.mode, self._rng, self._bounds)
        self._level_history.append(self._reading.level)
        logger.debug(f"Tick: level={self._reading.level:.2f}cm gas={self._reading.gas} fault={self._faults.mode.name}")
        return self._commit()

    def set_fault(self, mode: FaultMode) -> MonitorSnapshot:
        transition = self._faults.set_fault(mode)
        if transition is not None:
            self._log.append(*transition)
        return self._commit()

    def set_manual_mode(self, enabled: bool) -> MonitorSnapshot:
        enabled = bool(enabled)
        if enabled != self._override.manual_mode:
            self._override = replace(self._override, manual_mode=enabled)
            logger.info(f"Manual override {'enabled' if enabled else 'disabled'}")
            if enabled:
                self._log.append("Manual override ENABLED - auto-logic suspended", LogCategory.MANUAL)
            else:
                self._log.append("Manual override DISABLED - returning to AUTO", LogCategory.INFO)
        return self._commit()

    def set_manual_relay(self, on: bool) -> MonitorSnapshot:
        on = bool(on)
        if on != self._override.manual_relay:
            self._override = replace(self._override, manual_relay=on)
            logger.info(f"Manual relay set to {'ON' if on else 'OFF'}")
            # Remembered silently while automatic; applied once manual mode is on
            if self._override.manual_mode:
                self._log.append(f"Manual relay -> {'ON' if on else 'OFF'}", LogCategory.MANUAL)
        return self._commit()

    # ----------------------------------------------------------------- internal

    def _commit(self) -> MonitorSnapshot:
        was_alert = self._alert_active
        self._actuators, self._alert_active = decide(self._reading, self._override, self._limits)

        if self._alert_active and not was_alert:
            logger.warning(
                f"Alert raised: level={self._reading.level:.1f}cm gas={self._reading.gas}"
            )
            self._log.append(
                f"{ALERT_PAYLOAD} - level={self._reading.level:.1f}cm gas={self._reading.gas}",
                LogCategory.ALERT,
            )

        snapshot = self.snapshot()
        if self._hub is not None:
            self._hub.publish(MonitorTopic.STATE_CHANGED, snapshot)
        return snapshot
