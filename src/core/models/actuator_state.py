from dataclasses import dataclass


@dataclass(frozen=True)
class ActuatorState:
    relay_on: bool
    buzzer_on: bool
