from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ControlLimits:
    level_limit: float = 10.0
    gas_limit: int = 600


@dataclass(frozen=True)
class SimulationBounds:
    level_normal: Tuple[float, float] = (1.2, 9.4)
    level_overflow: Tuple[float, float] = (0.0, 24.0)
    gas_normal: Tuple[int, int] = (90, 575)
    gas_leak: Tuple[int, int] = (0, 1023)

    def __post_init__(self):
        for name in ("level_normal", "level_overflow", "gas_normal", "gas_leak"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"Invalid {name} bounds: [{lo}, {hi}]")


@dataclass
class configData:
    limits: ControlLimits = field(default_factory=ControlLimits)
    bounds: SimulationBounds = field(default_factory=SimulationBounds)
    tick_period_ms: int = 2000
    log_capacity: int = 60
    level_history_capacity: int = 30
