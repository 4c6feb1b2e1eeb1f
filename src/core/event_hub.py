import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class MonitorTopic(Enum):
    """Topics published by the monitor controller.

    LOG_ENTRY is mirrored into the process log by the service manager.
    STATE_CHANGED carries each committed snapshot for push-style consumers.
    """
    LOG_ENTRY = "log_entry"
    STATE_CHANGED = "state_changed"


class EventHub:
    def __init__(self):
        self._subscribers: Dict[MonitorTopic, List[Callable]] = {}
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def init(self, loop: Optional[asyncio.AbstractEventLoop]):
        self._loop = loop

    def subscribe(self, topic: MonitorTopic, handler: Callable):
        handlers = self._subscribers.setdefault(topic, [])
        if handler not in handlers:
            handlers.append(handler)
        logger.debug(f"Subscribed to {topic.value}")

    def unsubscribe(self, topic: MonitorTopic, handler: Callable):
        if handler in self._subscribers.get(topic, []):
            self._subscribers[topic].remove(handler)
            logger.debug(f"Unsubscribed from {topic.value}")

    def unsubscribe_all(self):
        self._subscribers.clear()

    def publish(self, topic: MonitorTopic, message: Any):
        # Copy so handlers may unsubscribe while being called
        handlers = self._subscribers.get(topic, [])[:]
        for handler in handlers:
            try:
                self._dispatch(topic, handler, message)
            except Exception as e:
                logger.error(f"Error handling message on topic {topic.value}: {e}")

    def _dispatch(self, topic: MonitorTopic, handler: Callable, message: Any):
        is_async = asyncio.iscoroutinefunction(handler)
        if self._loop is None:
            if is_async:
                logger.warning(f"EventHub loop not initialized. Cannot dispatch async handler for {topic.value}")
            else:
                handler(topic, message)
            return

        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is self._loop:
            if is_async:
                self._loop.create_task(handler(topic, message))
            else:
                handler(topic, message)
        elif is_async:
            asyncio.run_coroutine_threadsafe(handler(topic, message), self._loop)
        else:
            self._loop.call_soon_threadsafe(handler, topic, message)


# Global instance
event_hub = EventHub()


def init_event_hub(loop):
    """Initialize the global event hub with the given loop."""
    event_hub.init(loop)
