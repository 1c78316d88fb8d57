"""
Data models for API communication
"""

from .base import BaseModel
from .entities import (
    AggregateRow,
    DayLayout,
    Event,
    EventTemplate,
    ExportFile,
    HourLayout,
    ImportResult,
    Segment,
    StatisticsSummary,
)
from .requests import CreateTemplateRequest, EventPayload, ImportRecord

__all__ = [
    # Base
    "BaseModel",
    # Entities
    "Event",
    "EventTemplate",
    "AggregateRow",
    "StatisticsSummary",
    "Segment",
    "HourLayout",
    "DayLayout",
    "ImportResult",
    "ExportFile",
    # Requests
    "EventPayload",
    "ImportRecord",
    "CreateTemplateRequest",
]
