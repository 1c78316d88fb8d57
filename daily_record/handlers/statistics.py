"""
Statistics handlers
"""

from typing import Any, Dict

from daily_record.core.db import get_db
from daily_record.core.statistics import aggregate_events, summarize_rows

from . import api_handler


@api_handler(
    method="GET",
    path="/statistics/{start_date}/{end_date}",
    tags=["statistics"],
    summary="Get event statistics",
    description="Frequency and total minutes per event name between two dates (inclusive)",
)
async def get_statistics(start_date: str, end_date: str) -> Dict[str, Any]:
    """Get event frequency statistics

    @param start_date - First date (YYYY-MM-DD)
    @param end_date - Last date (YYYY-MM-DD)
    @returns {"frequency": [{event_name, frequency, total_minutes}]}
    """
    rows = aggregate_events(get_db(), start_date, end_date)
    return {"frequency": [row.model_dump() for row in rows]}


@api_handler(
    method="GET",
    path="/statistics/{start_date}/{end_date}/summary",
    tags=["statistics"],
    summary="Get statistics summary",
    description="Total events, total and average duration and the most frequent event",
)
async def get_statistics_summary(start_date: str, end_date: str) -> Dict[str, Any]:
    """Get summary figures for a date range"""
    rows = aggregate_events(get_db(), start_date, end_date)
    return summarize_rows(rows).model_dump()
