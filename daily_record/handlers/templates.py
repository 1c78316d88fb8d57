"""
Event template handlers
Template names feed the event name autocomplete
"""

from typing import Any, Dict, List

from daily_record.core.db import get_db
from daily_record.core.logger import get_logger
from daily_record.models import CreateTemplateRequest, EventTemplate

from . import api_handler

logger = get_logger(__name__)


@api_handler(
    method="GET",
    path="/event-templates",
    tags=["templates"],
    summary="List event templates",
)
async def get_event_templates() -> List[Dict[str, Any]]:
    """List event templates ordered by name"""
    return [EventTemplate.model_validate(row).model_dump() for row in get_db().get_event_templates()]


@api_handler(
    body=CreateTemplateRequest,
    method="POST",
    path="/event-templates",
    tags=["templates"],
    summary="Create event template",
    description="Create an event template; an existing name is rejected with 409",
)
async def create_event_template(body: CreateTemplateRequest) -> Dict[str, Any]:
    """Create an event template"""
    template_id = get_db().insert_event_template(body.name)
    logger.info(f"Event template created: {template_id} {body.name}")
    return {"id": template_id, "message": "Event template created"}
