import random
from typing import Optional

from core.models.config_data import SimulationBounds
from core.models.fault_mode import FaultMode
from core.models.sensor_reading import SensorReading

DEFAULT_BOUNDS = SimulationBounds()


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def next_level(prev: float, fault: FaultMode, rng: random.Random,
               bounds: SimulationBounds = DEFAULT_BOUNDS) -> float:
    """Advance the level by one tick. Overflow drifts strictly upward."""
    if fault is FaultMode.OVERFLOW:
        return clamp(prev + 0.25 + rng.random() * 0.45, *bounds.level_overflow)
    return clamp(prev + (rng.random() - 0.52) * 0.55, *bounds.level_normal)


def next_gas(prev: int, fault: FaultMode, rng: random.Random,
             bounds: SimulationBounds = DEFAULT_BOUNDS) -> int:
    """Advance the gas reading by one tick. A leak drifts strictly upward."""
    if fault is FaultMode.GAS_LEAK:
        value = clamp(prev + 25 + rng.random() * 45, *bounds.gas_leak)
    else:
        value = clamp(prev + (rng.random() - 0.5) * 55, *bounds.gas_normal)
    # bounds are integral, so rounding keeps the value inside them
    return int(round(value))


def next_reading(prev: SensorReading, fault: FaultMode, rng: Optional[random.Random] = None,
                 bounds: SimulationBounds = DEFAULT_BOUNDS) -> SensorReading:
    """
    Produce the reading that follows `prev` under the given fault mode.

    The level is drawn before the gas so a seeded generator yields the same
    sequence regardless of which fault is active.
    """
    rng = rng or random.Random()
    level = next_level(prev.level, fault, rng, bounds)
    gas = next_gas(prev.gas, fault, rng, bounds)
    return SensorReading(level=level, gas=gas)
