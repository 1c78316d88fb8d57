"""
Request models for API handlers
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from daily_record.core.timeutils import normalize_date, normalize_time

from .base import BaseModel

# ============================================================================
# Event Request Models
# ============================================================================


class EventPayload(BaseModel):
    """Request body for creating or updating an event.

    @property date - Event date (YYYY-MM-DD, timestamps are truncated to the date).
    @property start_time - Start time (HH:MM or HH:MM:SS).
    @property end_time - End time (HH:MM or HH:MM:SS).
    @property event_name - Non-empty event name.
    @property notes - Optional notes.
    """

    date: str
    start_time: str
    end_time: str
    event_name: str
    notes: Optional[str] = ""

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value):
        return normalize_date(value)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value):
        return normalize_time(value)

    @field_validator("event_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Event name must not be empty")
        return value

    @field_validator("notes")
    @classmethod
    def _default_notes(cls, value: Optional[str]) -> str:
        return value or ""


class ImportRecord(EventPayload):
    """One record read from an import file.

    Exported files may carry extra keys such as id or created_at, they are ignored.
    """

    model_config = ConfigDict(extra="ignore")


# ============================================================================
# Template Request Models
# ============================================================================


class CreateTemplateRequest(BaseModel):
    """Request body for creating an event template.

    @property name - Template name (unique).
    """

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Template name must not be empty")
        return value
