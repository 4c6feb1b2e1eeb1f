"""Fault mode enumeration for simulated sensor drift."""
from enum import Enum


class FaultMode(Enum):
    """Injected fault condition. Exactly one is active at a time."""
    NONE = "none"
    OVERFLOW = "overflow"
    GAS_LEAK = "gas_leak"
