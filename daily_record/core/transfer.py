"""
Export and deduplicating import against the event store
"""

from pathlib import PurePath
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from daily_record.core.converter import (
    decode_json,
    decode_markdown,
    encode_json,
    encode_markdown,
)
from daily_record.core.errors import ValidationError
from daily_record.core.logger import get_logger
from daily_record.core.protocols import EventStoreProtocol
from daily_record.core.timeutils import validate_date_range
from daily_record.models.entities import Event, ExportFile, ImportResult
from daily_record.models.requests import ImportRecord

logger = get_logger(__name__)

EXPORT_FORMATS = {
    "json": "application/json; charset=utf-8",
    "md": "text/markdown; charset=utf-8",
}
IMPORT_EXTENSIONS = (".json", ".md")


def export_filename(
    fmt: str, start_date: Optional[str] = None, end_date: Optional[str] = None
) -> str:
    if start_date and end_date:
        return f"daily_record_{start_date}_to_{end_date}.{fmt}"
    return f"daily_record_all.{fmt}"


def export_events(
    store: EventStoreProtocol,
    fmt: str = "md",
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> ExportFile:
    """Render the events of a date range (or all events) as JSON or Markdown

    Without a range the file name uses the earliest and latest dates present.

    Raises:
        ValidationError: unknown format, half-open or inverted date range
    """
    fmt = (fmt or "").lower()
    if fmt not in EXPORT_FORMATS:
        raise ValidationError(f"Unsupported export format: {fmt!r} (use json or md)")

    if (start_date is None) != (end_date is None):
        raise ValidationError("startDate and endDate must be given together")

    if start_date is not None and end_date is not None:
        start_date, end_date = validate_date_range(start_date, end_date)
        name_start, name_end = start_date, end_date
    else:
        name_start, name_end = store.get_event_date_bounds()

    events = [Event.model_validate(row) for row in store.get_events_in_range(start_date, end_date)]
    content = encode_json(events) if fmt == "json" else encode_markdown(events)

    logger.info(f"Exported {len(events)} events as {fmt}")
    return ExportFile(
        filename=export_filename(fmt, name_start, name_end),
        content=content,
        media_type=EXPORT_FORMATS[fmt],
        count=len(events),
    )


def import_records(
    store: EventStoreProtocol, records: Iterable[Union[Event, Mapping[str, Any]]]
) -> ImportResult:
    """Insert records one at a time, skipping exact duplicates

    A record is a duplicate when an event with the same date, start time,
    end time and name already exists. Records that fail validation are
    counted as failed.
    """
    result = ImportResult()

    for raw in records:
        result.total += 1
        data = raw.model_dump() if isinstance(raw, Event) else dict(raw)
        try:
            record = ImportRecord.model_validate(data)
        except PydanticValidationError as e:
            result.failed += 1
            logger.warning(f"Skipping invalid import record #{result.total}: {e.error_count()} errors")
            continue

        existing = store.find_duplicate_event(
            record.date, record.start_time, record.end_time, record.event_name
        )
        if existing is not None:
            result.skipped += 1
            continue

        store.insert_event(
            record.date,
            record.start_time,
            record.end_time,
            record.event_name,
            record.notes or "",
        )
        store.ensure_event_template(record.event_name)
        result.imported += 1

    logger.info(
        f"Import finished: {result.imported} imported, {result.skipped} skipped, "
        f"{result.failed} failed, {result.total} total"
    )
    return result


def import_file(store: EventStoreProtocol, filename: str, content: str) -> ImportResult:
    """Decode a .json or .md file and import its events

    Raises:
        ValidationError: unsupported extension or malformed JSON
    """
    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in IMPORT_EXTENSIONS:
        raise ValidationError(f"Unsupported import file type: {filename!r} (use .json or .md)")

    if suffix == ".json":
        records = decode_json(content)
    else:
        records = decode_markdown(content)

    logger.info(f"Importing {len(records)} records from {filename}")
    return import_records(store, records)
