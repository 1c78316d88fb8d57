"""
Event module handlers
CRUD for the events of a day
"""

from typing import Any, Dict, List

from daily_record.core.db import get_db
from daily_record.core.errors import NotFoundError
from daily_record.core.events import (
    emit_event_created,
    emit_event_deleted,
    emit_event_updated,
)
from daily_record.core.logger import get_logger
from daily_record.core.timeutils import normalize_date
from daily_record.models import Event, EventPayload

from . import api_handler

logger = get_logger(__name__)


@api_handler(
    method="GET",
    path="/events/{date}",
    tags=["events"],
    summary="Get events of a date",
    description="List the events recorded on a date (YYYY-MM-DD), ordered by start time",
)
async def get_events_by_date(date: str) -> List[Dict[str, Any]]:
    """Get events of a date

    @param date - Date in YYYY-MM-DD format
    @returns Events ordered by start time
    """
    rows = get_db().get_events_by_date(normalize_date(date))
    return [Event.model_validate(row).model_dump() for row in rows]


@api_handler(
    body=EventPayload,
    method="POST",
    path="/events",
    tags=["events"],
    summary="Create event",
)
async def create_event(body: EventPayload) -> Dict[str, Any]:
    """Create an event and remember its name as a template

    @param body - Event fields without id
    @returns The new event id
    """
    db = get_db()
    event_id = db.insert_event(
        body.date, body.start_time, body.end_time, body.event_name, body.notes or ""
    )
    db.ensure_event_template(body.event_name)

    logger.info(f"Event created: {event_id} {body.date} {body.start_time}-{body.end_time} {body.event_name}")
    emit_event_created(Event.model_validate(db.get_event_by_id(event_id)).model_dump())
    return {"id": event_id, "message": "Event created"}


@api_handler(
    body=EventPayload,
    method="PUT",
    path="/events/{event_id}",
    tags=["events"],
    summary="Update event",
)
async def update_event(event_id: int, body: EventPayload) -> Dict[str, Any]:
    """Replace the fields of an existing event

    @param event_id - Event id
    @param body - New event fields
    """
    db = get_db()
    affected = db.update_event(
        event_id,
        body.date,
        body.start_time,
        body.end_time,
        body.event_name,
        body.notes or "",
    )
    if affected == 0:
        raise NotFoundError("Event", event_id)

    db.ensure_event_template(body.event_name)
    logger.info(f"Event updated: {event_id}")
    emit_event_updated(Event.model_validate(db.get_event_by_id(event_id)).model_dump())
    return {"success": True, "message": "Event updated"}


@api_handler(
    method="DELETE",
    path="/events/{event_id}",
    tags=["events"],
    summary="Delete event",
)
async def delete_event(event_id: int) -> Dict[str, Any]:
    """Delete an event

    @param event_id - Event id
    """
    if get_db().delete_event(event_id) == 0:
        raise NotFoundError("Event", event_id)

    logger.info(f"Event deleted: {event_id}")
    emit_event_deleted(event_id)
    return {"success": True, "message": "Event deleted"}
