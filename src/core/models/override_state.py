from dataclasses import dataclass


@dataclass(frozen=True)
class OverrideState:
    """
    Operator override. manual_relay is kept while manual_mode is off so
    re-enabling manual mode restores the last manual choice.
    """
    manual_mode: bool = False
    manual_relay: bool = True
