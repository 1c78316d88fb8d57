"""
Event layout engine

Maps the events of one date onto the 24 hour grid. Every hour an event touches
gets its own segment positioned by start/end minute within that hour.
Overlapping events are not reflowed into lanes; their segments are simply
stacked at the same position.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from daily_record.core.logger import get_logger
from daily_record.core.timeutils import minutes_of_day
from daily_record.models.entities import DayLayout, Event, HourLayout, Segment

logger = get_logger(__name__)

HOURS_PER_DAY = 24

EventLike = Union[Event, Mapping[str, Any]]


def _field(event: EventLike, name: str, default: Any = None) -> Any:
    if isinstance(event, Mapping):
        return event.get(name, default)
    return getattr(event, name, default)


def name_hash(name: str) -> int:
    """Stable 32-bit string hash (hash * 31 + code point, wrapped to signed int)"""
    value = 0
    for ch in name:
        value = (ord(ch) + ((value << 5) - value)) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 1 << 32
    return value


def event_color(event_name: str, hour: int) -> str:
    """Deterministic muted colour for an event name, shaded by hour"""
    hue = abs(name_hash(event_name)) % 360
    saturation = 30 + (hour % 4) * 10
    lightness = 60 + (hour % 3) * 10
    return f"hsla({hue}, {saturation}%, {lightness}%, 0.8)"


def event_segments(event: EventLike) -> Dict[int, Segment]:
    """Split one event into per-hour segments keyed by hour

    Raises ValidationError for malformed start/end times.
    """
    start = minutes_of_day(_field(event, "start_time"))
    end = minutes_of_day(_field(event, "end_time"))
    label = _field(event, "event_name", "") or ""
    event_id = _field(event, "id")

    segments: Dict[int, Segment] = {}
    if end < start:
        logger.debug(f"Event {event_id} ends before it starts, nothing to draw")
        return segments

    start_hour, start_min = divmod(start, 60)
    end_hour, end_min = divmod(end, 60)

    for hour in range(start_hour, end_hour + 1):
        # An event ending exactly on the hour does not spill into that hour
        if hour == end_hour and end_min == 0 and hour != start_hour:
            continue

        seg_start = start_min if hour == start_hour else 0
        seg_end = end_min if hour == end_hour else 59

        segments[hour] = Segment(
            event_id=event_id,
            start_minute=seg_start,
            end_minute=seg_end,
            label=label,
            left=seg_start / 60 * 100,
            width=(seg_end - seg_start + 1) / 60 * 100,
            color=event_color(label, hour),
        )
    return segments


def layout_day(events: Iterable[EventLike], date: Optional[str] = None) -> DayLayout:
    """Build the 24 hour layout for the given events"""
    hours: List[HourLayout] = [HourLayout(hour=h) for h in range(HOURS_PER_DAY)]

    count = 0
    for event in events:
        for hour, segment in event_segments(event).items():
            hours[hour].segments.append(segment)
        count += 1

    logger.debug(f"Laid out {count} events for {date or 'unspecified date'}")
    return DayLayout(date=date, hours=hours)
