from typing import Tuple

from core.models.actuator_state import ActuatorState
from core.models.config_data import ControlLimits
from core.models.override_state import OverrideState
from core.models.sensor_reading import SensorReading

DEFAULT_LIMITS = ControlLimits()


def threshold_exceeded(reading: SensorReading, limits: ControlLimits = DEFAULT_LIMITS) -> bool:
    """Raw alarm condition, independent of any operator override."""
    over = reading.level >= limits.level_limit
    gas_high = reading.gas > limits.gas_limit
    return over or gas_high


def decide(reading: SensorReading, override: OverrideState,
           limits: ControlLimits = DEFAULT_LIMITS) -> Tuple[ActuatorState, bool]:
    """
    Map a reading and the override state to (actuators, alert_active).

    Automatic mode stops the pump and sounds the buzzer while a threshold is
    exceeded. Manual mode drives the relay from the operator choice, keeps
    the buzzer off and reports no alert even when a threshold is exceeded.
    """
    alert = threshold_exceeded(reading, limits)

    if override.manual_mode:
        return ActuatorState(relay_on=override.manual_relay, buzzer_on=False), False

    return ActuatorState(relay_on=not alert, buzzer_on=alert), alert
