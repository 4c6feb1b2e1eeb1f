import logging
import time
from typing import Callable, List, Optional

from core.event_hub import EventHub, MonitorTopic
from core.models.circular_buffer import CircularBuffer
from core.models.log_entry import LogCategory, LogEntry

logger = logging.getLogger(__name__)

DEFAULT_LOG_CAPACITY = 60


class EventLog:
    """
    Bounded, append-only record of state-transition notifications.
    When full, the oldest entry is evicted before the new one is stored.
    """

    def __init__(self, capacity: int = DEFAULT_LOG_CAPACITY,
                 clock: Callable[[], float] = time.time,
                 hub: Optional[EventHub] = None):
        self._entries: CircularBuffer[LogEntry] = CircularBuffer(capacity)
        self._clock = clock
        self._hub = hub

    @property
    def capacity(self) -> int:
        return self._entries.capacity

    def append(self, message: str, category: LogCategory = LogCategory.INFO) -> LogEntry:
        """Timestamp and store a new entry. O(1)."""
        entry = LogEntry(timestamp=float(self._clock()), message=message, category=category)
        self._entries.append(entry)
        logger.debug(f"[{category.value}] {message}")
        if self._hub is not None:
            self._hub.publish(MonitorTopic.LOG_ENTRY, entry)
        return entry

    def entries(self, category: Optional[LogCategory] = None) -> List[LogEntry]:
        """All entries oldest first, optionally restricted to one category."""
        entries = self._entries.get_all()
        if category is None:
            return entries
        return [e for e in entries if e.category is category]

    def __len__(self) -> int:
        return len(self._entries)
