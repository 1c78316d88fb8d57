"""
Data entity model definitions
Define core data structures in the system
"""

from typing import List, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from daily_record.core.timeutils import normalize_date, normalize_time

from .base import BaseModel

# ============ Stored Models ============


class Event(BaseModel):
    """Event model - one dated, time-bounded activity record"""

    # Store rows carry bookkeeping columns such as created_at
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    date: str  # YYYY-MM-DD format
    start_time: str  # HH:MM:SS format
    end_time: str  # HH:MM:SS format
    event_name: str
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return normalize_date(value)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value):
        return normalize_time(value)


class EventTemplate(BaseModel):
    """Event name template used for autocomplete"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    name: str


# ============ Statistics Models ============


class AggregateRow(BaseModel):
    """Per event name rollup over a date range"""

    model_config = ConfigDict(extra="ignore")

    event_name: str
    frequency: int
    total_minutes: Union[int, float] = 0


class StatisticsSummary(BaseModel):
    """Totals derived from aggregate rows"""

    total_events: int
    total_minutes: Union[int, float]
    total_hours: float
    average_minutes: int
    most_frequent: Optional[str] = None


# ============ Layout Models ============


class Segment(BaseModel):
    """Portion of an event rendered inside one hour of the day grid"""

    event_id: Optional[int]
    start_minute: int = Field(ge=0, le=59)
    end_minute: int = Field(ge=0, le=59)
    label: str
    left: float  # percent of the hour
    width: float  # percent of the hour
    color: str


class HourLayout(BaseModel):
    """Segments for a single hour"""

    hour: int = Field(ge=0, le=23)
    segments: List[Segment] = Field(default_factory=list)


class DayLayout(BaseModel):
    """The 24 hour grid for one date"""

    date: Optional[str] = None
    hours: List[HourLayout]


# ============ Import/Export Models ============


class ImportResult(BaseModel):
    """Outcome of an import run"""

    imported: int = 0
    skipped: int = 0
    failed: int = 0
    total: int = 0


class ExportFile(BaseModel):
    """Rendered export ready to be written or downloaded"""

    filename: str
    content: str
    media_type: str
    count: int
