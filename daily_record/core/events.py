"""
Change notification bus
Components subscribe to topics instead of registering ad-hoc callbacks on each other
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from daily_record.core.logger import get_logger
from daily_record.core.timeutils import normalize_date

logger = get_logger(__name__)

EVENT_CREATED = "event-created"
EVENT_UPDATED = "event-updated"
EVENT_DELETED = "event-deleted"
EVENTS_IMPORTED = "events-imported"
DATE_SELECTED = "date-selected"

Subscriber = Callable[[Dict[str, Any]], None]


class EventBus:
    """Topic based publish/subscribe channel"""

    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = {}
        self._lock = threading.Lock()

    def subscribe(self, topic: str, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for a topic, returns a function that unsubscribes it"""
        with self._lock:
            self._subscribers.setdefault(topic, []).append(callback)
        return lambda: self.unsubscribe(topic, callback)

    def unsubscribe(self, topic: str, callback: Subscriber) -> None:
        with self._lock:
            callbacks = self._subscribers.get(topic, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def publish(self, topic: str, data: Dict[str, Any]) -> int:
        """Deliver a payload to every subscriber of a topic

        A failing subscriber is logged and does not stop delivery to the others.

        Returns:
            Number of subscribers that handled the payload
        """
        with self._lock:
            callbacks = list(self._subscribers.get(topic, []))

        payload = {
            "type": topic,
            "data": data,
            "timestamp": datetime.now().isoformat(),
        }

        delivered = 0
        for callback in callbacks:
            try:
                callback(payload)
                delivered += 1
            except Exception:
                logger.error(f"❌ [events] Subscriber failed for {topic}", exc_info=True)

        logger.debug(f"[events] {topic} delivered to {delivered}/{len(callbacks)} subscribers")
        return delivered


@dataclass
class DaySelection:
    """Currently selected date, announced on the bus when it changes"""

    bus: EventBus
    date: Optional[str] = None

    def select(self, date) -> str:
        new_date = normalize_date(date)
        if new_date != self.date:
            self.date = new_date
            self.bus.publish(DATE_SELECTED, {"date": new_date})
        return new_date


# Global event bus instance
_event_bus: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """Get global event bus instance"""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


def emit_event_created(event_data: Dict[str, Any]) -> int:
    """Announce a newly created event"""
    return get_event_bus().publish(EVENT_CREATED, event_data)


def emit_event_updated(event_data: Dict[str, Any]) -> int:
    """Announce an updated event"""
    return get_event_bus().publish(EVENT_UPDATED, event_data)


def emit_event_deleted(event_id: int) -> int:
    """Announce a deleted event"""
    return get_event_bus().publish(EVENT_DELETED, {"id": event_id})


def emit_events_imported(summary: Dict[str, Any]) -> int:
    """Announce the outcome of an import"""
    return get_event_bus().publish(EVENTS_IMPORTED, summary)
