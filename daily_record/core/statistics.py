"""
Statistics aggregator

Groups the events of an inclusive date range by name, and derives the
summary figures shown on the statistics page.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Union

from daily_record.core.logger import get_logger
from daily_record.core.protocols import EventStoreProtocol
from daily_record.core.timeutils import validate_date_range
from daily_record.models.entities import AggregateRow, StatisticsSummary

logger = get_logger(__name__)

MINUTES_PER_YEAR = 365 * 24 * 60


def round_half_up(value: Union[int, float], digits: int = 0) -> float:
    """Round with halves going up (2.5 -> 3, 0.25 -> 0.3), unlike round()"""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate_events(
    store: EventStoreProtocol, start_date: str, end_date: str
) -> List[AggregateRow]:
    """Get per event name frequency and total minutes, most frequent first

    Raises:
        ValidationError: dates are malformed or start_date > end_date
            (checked before the store is queried)
    """
    start, end = validate_date_range(start_date, end_date)

    rows = store.get_event_frequency(start, end)
    result = [
        AggregateRow(
            event_name=row["event_name"],
            frequency=int(row["frequency"]),
            total_minutes=row["total_minutes"] or 0,
        )
        for row in rows
    ]

    logger.info(f"Aggregated {len(result)} event names between {start} and {end}")
    return result


def summarize_rows(rows: Iterable[AggregateRow]) -> StatisticsSummary:
    """Derive totals from aggregate rows

    Rows whose total is negative or longer than a year are left out of the
    duration total; they still count towards the number of events.
    """
    rows = list(rows)

    total_events = sum(row.frequency for row in rows)
    total_minutes = sum(
        row.total_minutes
        for row in rows
        if 0 <= row.total_minutes <= MINUTES_PER_YEAR
    )
    average = round_half_up(total_minutes / total_events) if total_events > 0 else 0
    most_frequent: Optional[str] = rows[0].event_name if rows else None

    return StatisticsSummary(
        total_events=total_events,
        total_minutes=total_minutes,
        total_hours=round_half_up(total_minutes / 60, 1),
        average_minutes=int(average),
        most_frequent=most_frequent,
    )
