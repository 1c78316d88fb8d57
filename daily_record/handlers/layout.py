"""
Day layout handlers
"""

from typing import Any, Dict

from daily_record.core.db import get_db
from daily_record.core.layout import layout_day
from daily_record.core.timeutils import normalize_date

from . import api_handler


@api_handler(
    method="GET",
    path="/layout/{date}",
    tags=["layout"],
    summary="Get 24 hour layout",
    description="Per hour segments for the events of a date, ready to be drawn on the day grid",
)
async def get_day_layout(date: str) -> Dict[str, Any]:
    """Get the hour grid for a date"""
    day = normalize_date(date)
    return layout_day(get_db().get_events_by_date(day), date=day).model_dump()
