import logging
from typing import Optional

from core.models.fault_mode import FaultMode
from core.models.log_entry import LogCategory

logger = logging.getLogger(__name__)

INJECTED_MESSAGES = {
    FaultMode.OVERFLOW: "FAULT INJECTED: Simulated sewage overflow",
    FaultMode.GAS_LEAK: "FAULT INJECTED: Simulated gas leakage",
}
CLEARED_MESSAGE = "Fault cleared - returning to normal"


class FaultInjector:
    """
    Holds the active fault mode. Transitions are total: any mode may be
    requested from any state. Re-setting the current mode is a no-op.
    """

    def __init__(self, mode: FaultMode = FaultMode.NONE):
        self._mode = mode

    @property
    def mode(self) -> FaultMode:
        return self._mode

    def set_fault(self, mode: FaultMode) -> Optional[tuple[str, LogCategory]]:
        """
        Switch to `mode`.

        Returns the (message, category) the transition should be logged with,
        or None when the mode is unchanged.
        """
        previous = self._mode
        if mode is previous:
            return None

        self._mode = mode
        logger.info(f"Fault mode {previous.name} -> {mode.name}")

        if mode is FaultMode.NONE:
            return CLEARED_MESSAGE, LogCategory.INFO
        return INJECTED_MESSAGES[mode], LogCategory.ALERT
