"""
Calendar event generation.

Renders recorded periods, their estimated ovulation and fertile days, and
the predicted next cycle as day-level events clipped to a date range.
"""
from typing import List, Optional, Sequence
from datetime import date
from aws_lambda_powertools import Logger

from cycle_engine.models.analytics import AnalyticsResult
from cycle_engine.models.event import CalendarEvent, CalendarEventType
from cycle_engine.models.record import FlowLevel, PeriodRecord
from cycle_engine.services.constants import CALENDAR_FERTILE_SPAN
from cycle_engine.services.metrics import sort_records
from cycle_engine.services.statistics import round_half_up
from cycle_engine.utils.dates import DateLike, date_range, parse_date, shift_date, today
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

def _ovulation_events(
    ovulation: Optional[date],
    ovulation_type: CalendarEventType,
    fertile_type: CalendarEventType,
    predicted: bool
) -> List[CalendarEvent]:
    """
    Ovulation day plus the fertile days either side of it. Days past the
    representable calendar are dropped.
    """
    if ovulation is None:
        return []
    events = [CalendarEvent(date=ovulation, type=ovulation_type, is_predicted=predicted)]
    for offset in range(1, CALENDAR_FERTILE_SPAN + 1):
        for day in (shift_date(ovulation, -offset), shift_date(ovulation, offset)):
            if day is not None:
                events.append(CalendarEvent(date=day, type=fertile_type, is_predicted=predicted))
    return events

def generate_calendar_events(
    period_records: Sequence[PeriodRecord],
    analytics: AnalyticsResult,
    from_date: DateLike,
    to_date: DateLike,
    current_date: Optional[DateLike] = None
) -> List[CalendarEvent]:
    """
    Build the calendar events that fall inside ``[from_date, to_date]``.

    Args:
        period_records: Recorded periods
        analytics: Result of ``compute_analytics`` for the same records
        from_date: First day of the range, inclusive
        to_date: Last day of the range, inclusive
        current_date: Reference for deciding whether the predicted period is
            still upcoming, defaults to today

    Returns:
        Events sorted by date. Recorded periods yield ``period`` events for
        each day, plus an ``ovulation`` event half an average cycle after
        each start with ``fertile`` events on the days around it. When the
        predicted next period is today or later, the same shapes are emitted
        with the ``predicted-*`` types. No event lies outside the range.
    """
    start = parse_date(from_date)
    end = parse_date(to_date)
    if start > end:
        logger.warning("Empty calendar range requested", extra={
            "from_date": str(start),
            "to_date": str(end)
        })
        return []

    half_cycle = analytics.average_cycle_length // 2
    candidates: List[CalendarEvent] = []

    for record in sort_records(period_records):
        for day in date_range(record.start_date, record.end_date):
            candidates.append(CalendarEvent(date=day, type=CalendarEventType.PERIOD, intensity=FlowLevel.MEDIUM))
        candidates.extend(_ovulation_events(
            shift_date(record.start_date, half_cycle),
            CalendarEventType.OVULATION,
            CalendarEventType.FERTILE,
            predicted=False
        ))

    reference = today() if current_date is None else parse_date(current_date)
    predicted_start = analytics.next_period_date
    if predicted_start is not None and predicted_start >= reference:
        predicted_days = max(1, round_half_up(analytics.average_period_length))
        predicted_period = [shift_date(predicted_start, offset) for offset in range(predicted_days)]
        for day in filter(None, predicted_period):
            candidates.append(CalendarEvent(
                date=day,
                type=CalendarEventType.PREDICTED_PERIOD,
                intensity=FlowLevel.MEDIUM,
                is_predicted=True
            ))
        candidates.extend(_ovulation_events(
            shift_date(predicted_start, half_cycle),
            CalendarEventType.PREDICTED_OVULATION,
            CalendarEventType.PREDICTED_FERTILE,
            predicted=True
        ))

    events = [event for event in candidates if start <= event.date <= end]
    events.sort(key=lambda event: event.date)

    logger.debug("Generated calendar events", extra={
        "from_date": str(start),
        "to_date": str(end),
        "event_count": len(events)
    })
    return events
