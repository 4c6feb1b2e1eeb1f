"""Event log entry model."""
from dataclasses import dataclass
from enum import Enum


class LogCategory(Enum):
    """Enumeration of event log categories."""
    INFO = "info"
    ALERT = "alert"
    MANUAL = "manual"


@dataclass(frozen=True)
class LogEntry:
    timestamp: float
    message: str
    category: LogCategory = LogCategory.INFO
