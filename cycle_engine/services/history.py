"""
Per-cycle history breakdowns.

Joins period records with the daily logs that fall inside each period to
summarize symptoms, flow and mood for every recorded cycle.

Typical usage:
    history = compute_cycle_analysis(period_records, daily_records)
    latest = history[0]
"""
from typing import Iterable, List, Optional, Sequence
from aws_lambda_powertools import Logger

from cycle_engine.models.analytics import CycleAnalysis
from cycle_engine.models.record import DailyRecord, FlowLevel, PeriodRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.constants import (
    FLOW_BUCKETS,
    FLOW_NOT_RECORDED,
    FLOW_VALUES,
    SYMPTOM_KEYWORDS
)
from cycle_engine.services.metrics import (
    cycle_length,
    cycle_lengths,
    period_length,
    period_lengths,
    phase_at,
    sort_records
)
from cycle_engine.services.statistics import average_lengths, mean
from cycle_engine.utils.dates import DateLike, parse_date, today
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

def daily_records_for_period(record: PeriodRecord, daily_records: Iterable[DailyRecord]) -> List[DailyRecord]:
    """Daily records dated within the period's ``[start_date, end_date]``."""
    return [daily for daily in daily_records if record.start_date <= daily.date <= record.end_date]

def extract_symptoms(daily_records: Iterable[DailyRecord]) -> List[str]:
    """
    Symptom tags found by keyword matching on daily notes.

    Matching is case-insensitive substring search; each tag is reported once.
    """
    notes = [daily.notes.lower() for daily in daily_records if daily.notes]
    return [
        tag for tag, keywords in SYMPTOM_KEYWORDS
        if any(keyword in note for note in notes for keyword in keywords)
    ]

def calculate_average_flow(daily_records: Iterable[DailyRecord]) -> str:
    """
    Average flow label over the days that recorded a flow level.

    Levels map to 1-3, the mean is bucketed at 1.3 and 2.3.
    """
    values = [FLOW_VALUES[daily.flow_level.value] for daily in daily_records if daily.flow_level is not None]
    if not values:
        return FLOW_NOT_RECORDED

    average = mean(values)
    for upper, label in FLOW_BUCKETS:
        if average <= upper:
            return label
    return FlowLevel.HEAVY.value

def extract_moods(daily_records: Iterable[DailyRecord]) -> List[str]:
    """Distinct moods, in the order first seen."""
    moods = [daily.mood.value for daily in daily_records if daily.mood is not None]
    return list(dict.fromkeys(moods))

def compute_cycle_analysis(
    period_records: Sequence[PeriodRecord],
    daily_records: Sequence[DailyRecord],
    current_date: Optional[DateLike] = None,
    settings: Optional[CycleSettings] = None
) -> List[CycleAnalysis]:
    """
    Build one breakdown per period record.

    Args:
        period_records: Period records in any order
        daily_records: Daily logs in any order
        current_date: Date phases are evaluated at, defaults to today
        settings: Baselines when history is too short for averages

    Returns:
        CycleAnalysis entries, most recent first. Cycle numbers count up
        from 1 in chronological order, and the earliest cycle has a cycle
        length of 0.
    """
    evaluated_at = today() if current_date is None else parse_date(current_date)
    ordered = sort_records(period_records)
    avg_cycle, avg_period = average_lengths(cycle_lengths(ordered), period_lengths(ordered), settings)

    analysis = []
    for index, record in enumerate(ordered):
        period_daily = daily_records_for_period(record, daily_records)
        analysis.append(CycleAnalysis(
            cycle_number=index + 1,
            start_date=record.start_date,
            end_date=record.end_date,
            period_length=period_length(record),
            cycle_length=cycle_length(record, ordered[index - 1]) if index > 0 else 0,
            phase=phase_at(evaluated_at, record, avg_cycle, avg_period),
            symptoms=extract_symptoms(period_daily),
            average_flow=calculate_average_flow(period_daily),
            mood=extract_moods(period_daily)
        ))

    logger.debug("Compiled cycle history", extra={
        "cycle_count": len(analysis),
        "daily_record_count": len(daily_records),
        "evaluated_at": str(evaluated_at)
    })
    analysis.reverse()
    return analysis
