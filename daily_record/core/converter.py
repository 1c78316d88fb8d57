"""
Import/export converter

JSON: a list of event objects with the stored field names.

Markdown: events grouped by year, month, day and start hour:

    # 2024年

    ## 3月

    ### 3月5日

    **8:00 - 9:00**

    - Running
      - 08:00:00 - 09:00:00
      - Along the river

The Markdown decoder is a line scanner for exactly this layout, not a general
Markdown parser. An event bullet must be followed by its time line; anything
else drops that event with a warning.
"""

import json
import re
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from daily_record.core.errors import ValidationError
from daily_record.core.logger import get_logger
from daily_record.core.timeutils import parse_date, parse_time
from daily_record.models.entities import Event
from daily_record.models.requests import ImportRecord

logger = get_logger(__name__)

EventLike = Union[Event, Mapping[str, Any]]

_YEAR_RE = re.compile(r"^#\s+(\d{4})年\s*$")
_MONTH_RE = re.compile(r"^##\s+(\d{1,2})月\s*$")
_DAY_RE = re.compile(r"^###\s+(\d{1,2})月(\d{1,2})日\s*$")
_EVENT_RE = re.compile(r"^-\s+(.+?)\s*$")
_TIME_RE = re.compile(r"^\s*-\s+(\d{2}:\d{2}:\d{2})\s+-\s+(\d{2}:\d{2}:\d{2})\s*$")
_NOTE_RE = re.compile(r"^\s+-\s+(.*?)\s*$")


def _to_event(event: EventLike) -> Event:
    if isinstance(event, Event):
        return event
    return Event.model_validate(dict(event))


def _single_line(text: str) -> str:
    return re.sub(r"\s*[\r\n]+\s*", " ", text.strip())


# ==================== JSON ====================


def encode_json(events: Iterable[EventLike]) -> str:
    """Serialize events as a JSON array"""
    payload = [_to_event(e).model_dump() for e in events]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def decode_json(text: str) -> List[Dict[str, Any]]:
    """Parse a JSON export into raw event records

    Raises:
        ValidationError: the text is not JSON or not a JSON array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON file: {e}") from e

    if not isinstance(data, list):
        raise ValidationError("JSON import must be a list of events")

    return [item if isinstance(item, dict) else {"value": item} for item in data]


# ==================== Markdown ====================


def encode_markdown(events: Iterable[EventLike]) -> str:
    """Serialize events as year/month/day/hour grouped Markdown"""
    tree: Dict[int, Dict[int, Dict[int, Dict[int, List[Event]]]]] = defaultdict(
        lambda: defaultdict(lambda: defaultdict(lambda: defaultdict(list)))
    )

    for raw in events:
        event = _to_event(raw)
        day = parse_date(event.date)
        hour = parse_time(event.start_time)[0]
        tree[day.year][day.month][day.day][hour].append(event)

    lines: List[str] = []
    for year in sorted(tree):
        lines += [f"# {year}年", ""]
        for month in sorted(tree[year]):
            lines += [f"## {month}月", ""]
            for day in sorted(tree[year][month]):
                lines += [f"### {month}月{day}日", ""]
                for hour in sorted(tree[year][month][day]):
                    lines += [f"**{hour}:00 - {hour + 1}:00**", ""]
                    bucket = sorted(
                        tree[year][month][day][hour], key=lambda e: e.start_time
                    )
                    for event in bucket:
                        lines.append(f"- {_single_line(event.event_name)}")
                        lines.append(f"  - {event.start_time} - {event.end_time}")
                        if event.notes and event.notes.strip():
                            lines.append(f"  - {_single_line(event.notes)}")
                    lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n" if lines else ""


def decode_markdown(text: str) -> List[Event]:
    """Parse Markdown produced by encode_markdown back into events

    Events that cannot be parsed are dropped and logged, never raised.
    """
    lines = text.splitlines()
    events: List[Event] = []

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    i = 0
    while i < len(lines):
        line = lines[i]

        m = _YEAR_RE.match(line)
        if m:
            year = int(m.group(1))
            month = day = None
            i += 1
            continue

        m = _MONTH_RE.match(line)
        if m:
            month = int(m.group(1))
            day = None
            i += 1
            continue

        m = _DAY_RE.match(line)
        if m:
            month, day = int(m.group(1)), int(m.group(2))
            i += 1
            continue

        m = _EVENT_RE.match(line)
        if not m:
            i += 1
            continue

        name = m.group(1)
        time_line = lines[i + 1] if i + 1 < len(lines) else ""
        tm = _TIME_RE.match(time_line)
        if not tm:
            logger.warning(f"Dropping event without time line at line {i + 1}: {name!r}")
            i += 1
            continue

        notes = ""
        consumed = 2
        if i + 2 < len(lines):
            note_line = lines[i + 2]
            nm = _NOTE_RE.match(note_line)
            if nm and not _TIME_RE.match(note_line):
                notes = nm.group(1)
                consumed = 3

        if year is None or month is None or day is None:
            logger.warning(f"Dropping event without date heading at line {i + 1}: {name!r}")
        else:
            try:
                record = ImportRecord(
                    date=f"{year:04d}-{month:02d}-{day:02d}",
                    start_time=tm.group(1),
                    end_time=tm.group(2),
                    event_name=name,
                    notes=notes,
                )
                events.append(Event(**record.model_dump()))
            except PydanticValidationError as e:
                logger.warning(f"Dropping invalid event at line {i + 1}: {name!r} ({e.error_count()} errors)")

        i += consumed

    logger.info(f"Parsed {len(events)} events from Markdown")
    return events
