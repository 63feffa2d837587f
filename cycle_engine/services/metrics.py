"""
Per-record and per-pair cycle measurements.

Typical usage:
    records = sort_records(period_records)
    lengths = cycle_lengths(records)
    phase = phase_at(today(), records[-1], 28, 5)
"""
from typing import Callable, Iterable, List, Optional, Tuple
from aws_lambda_powertools import Logger

from cycle_engine.models.phase import PeriodPhase
from cycle_engine.models.record import PeriodRecord
from cycle_engine.services.constants import (
    MAX_VALID_CYCLE_LENGTH,
    OVULATION_PHASE_HALF_WIDTH
)
from cycle_engine.utils.dates import DateLike, days_between, parse_date, today
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

# Ordered (phase, upper bound) checks; the first bound that days-since-start
# does not exceed wins, and anything past the last bound is luteal.
# When the average period is long relative to the cycle, the follicular bound
# can fall below the menstrual one, leaving the follicular window empty.
PHASE_THRESHOLDS: List[Tuple[PeriodPhase, Callable[[float, float], float]]] = [
    (PeriodPhase.MENSTRUAL, lambda cycle, period: period),
    (PeriodPhase.FOLLICULAR, lambda cycle, period: cycle / 2 - OVULATION_PHASE_HALF_WIDTH),
    (PeriodPhase.OVULATION, lambda cycle, period: cycle / 2 + OVULATION_PHASE_HALF_WIDTH),
]
FALLBACK_PHASE = PeriodPhase.LUTEAL

def sort_records(records: Iterable[PeriodRecord], reverse: bool = False) -> List[PeriodRecord]:
    """Sort period records by start date, oldest first unless ``reverse``."""
    return sorted(records, key=lambda r: r.start_date, reverse=reverse)

def period_length(record: PeriodRecord) -> int:
    """Number of menstruating days in a record, counting both ends."""
    return days_between(record.start_date, record.end_date) + 1

def cycle_length(current: PeriodRecord, previous: PeriodRecord) -> int:
    """Days from the previous record's start to the current record's start."""
    return days_between(previous.start_date, current.start_date)

def is_valid_statistics_cycle(length: int) -> bool:
    """Check whether a cycle length is plausible enough to use in statistics."""
    return 0 < length <= MAX_VALID_CYCLE_LENGTH

def cycle_lengths(records: Iterable[PeriodRecord]) -> List[int]:
    """
    Cycle lengths between chronologically adjacent records.

    Lengths outside ``(0, MAX_VALID_CYCLE_LENGTH]`` are treated as data-entry
    anomalies and left out; the records themselves are untouched.

    Args:
        records: Period records in any order

    Returns:
        Valid cycle lengths in chronological order
    """
    ordered = sort_records(records)
    lengths = []
    for previous, current in zip(ordered, ordered[1:]):
        length = cycle_length(current, previous)
        if is_valid_statistics_cycle(length):
            lengths.append(length)
        else:
            logger.warning(
                "Excluding anomalous cycle length from statistics",
                extra={
                    "previous_start": str(previous.start_date),
                    "current_start": str(current.start_date),
                    "cycle_length": length
                }
            )
    return lengths

def period_lengths(records: Iterable[PeriodRecord]) -> List[int]:
    """Period lengths in chronological order. No outlier filtering is applied."""
    return [period_length(record) for record in sort_records(records)]

def phase_boundaries(avg_cycle_length: float, avg_period_length: float) -> List[Tuple[PeriodPhase, float]]:
    """
    Resolve the phase thresholds for the given averages.

    Returns:
        List of (phase, last day-since-start belonging to that phase)
    """
    return [(phase, bound(avg_cycle_length, avg_period_length)) for phase, bound in PHASE_THRESHOLDS]

def phase_at(
    target_date: Optional[DateLike],
    last_period: PeriodRecord,
    avg_cycle_length: float,
    avg_period_length: float
) -> PeriodPhase:
    """
    Classify a date into a cycle phase relative to the most recent period.

    Args:
        target_date: Date to classify, defaults to today
        last_period: Most recent period record on or before the date
        avg_cycle_length: Average cycle length in days
        avg_period_length: Average period length in days

    Returns:
        The first phase whose threshold the days since the period start
        does not exceed, otherwise luteal

    Example:
        >>> phase_at("2024-01-15", record_starting_jan_1, 28, 5)
        <PeriodPhase.OVULATION: 'Ovulation'>
    """
    target = today() if target_date is None else parse_date(target_date)
    days_since_start = days_between(last_period.start_date, target)

    for phase, limit in phase_boundaries(avg_cycle_length, avg_period_length):
        if days_since_start <= limit:
            return phase
    return FALLBACK_PHASE

def is_in_period(target_date: DateLike, records: Iterable[PeriodRecord]) -> bool:
    """Check whether a date falls inside any recorded period."""
    return get_period_for_date(target_date, records) is not None

def get_period_for_date(target_date: DateLike, records: Iterable[PeriodRecord]) -> Optional[PeriodRecord]:
    """Return the first record whose span contains the date, if any."""
    target = parse_date(target_date)
    for record in records:
        if record.start_date <= target <= record.end_date:
            return record
    return None

def days_until_next_period(next_period_date: Optional[DateLike], current_date: Optional[DateLike] = None) -> int:
    """
    Days from ``current_date`` (today by default) until the predicted period.

    Negative when the prediction is already overdue; 0 without a prediction.
    """
    if next_period_date is None:
        return 0
    current = today() if current_date is None else parse_date(current_date)
    return days_between(current, next_period_date)
