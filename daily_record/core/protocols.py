"""
Type protocols for database and repository operations

This module provides Protocol classes that define the interfaces for database operations.
Using Protocols allows for proper type checking without circular dependencies.
"""

from typing import Any, Dict, List, Optional, Protocol, Tuple

# ==================== Store Protocols ====================


class EventStoreProtocol(Protocol):
    """Protocol for the event store used by statistics and import/export"""

    def insert_event(
        self,
        date: str,
        start_time: str,
        end_time: str,
        event_name: str,
        notes: str = "",
    ) -> int:
        """Insert an event and return its id"""
        ...

    def get_events_in_range(
        self, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get events between two dates, or all events"""
        ...

    def find_duplicate_event(
        self, date: str, start_time: str, end_time: str, event_name: str
    ) -> Optional[int]:
        """Find an identical event"""
        ...

    def get_event_date_bounds(self) -> Tuple[Optional[str], Optional[str]]:
        """Get earliest and latest event dates"""
        ...

    def get_event_frequency(
        self, start_date: str, end_date: str
    ) -> List[Dict[str, Any]]:
        """Grouped aggregate by event name"""
        ...

    def ensure_event_template(self, name: str) -> None:
        """Register a template name"""
        ...
