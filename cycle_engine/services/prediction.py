"""
Service module for next-cycle predictions.

Projections are pure functions of already-computed averages and the most
recent record. Ovulation is back-dated from the predicted period by the
fixed ``ASSUMED_LUTEAL_PHASE_DAYS``, whatever the user's cycle length.

Typical usage:
    next_period = predict_next_period(latest_record, 28)
    ovulation = predict_ovulation(next_period)
    window = fertile_window(ovulation)
"""
from typing import Iterable, Optional
from datetime import date
from aws_lambda_powertools import Logger

from cycle_engine.models.analytics import FertileWindow, Prediction
from cycle_engine.models.record import PeriodRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.constants import (
    ASSUMED_LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_AFTER_OVULATION,
    FERTILE_DAYS_BEFORE_OVULATION
)
from cycle_engine.services.metrics import cycle_lengths, days_until_next_period, sort_records
from cycle_engine.services.statistics import mean, prediction_confidence, round_half_up
from cycle_engine.utils.dates import DateLike, shift_date
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

def predict_next_period(last_record: Optional[PeriodRecord], avg_cycle_length: float) -> Optional[date]:
    """
    Predict the start of the next period.

    Args:
        last_record: Most recent period record, or None without history
        avg_cycle_length: Average cycle length in days

    Returns:
        ``last_record.start_date + round(avg_cycle_length)`` days, or None
        without history or when the date would fall past year 9999
    """
    if last_record is None:
        return None
    return shift_date(last_record.start_date, round_half_up(avg_cycle_length))

def predict_ovulation(next_period_date: Optional[date]) -> Optional[date]:
    """Ovulation date, a fixed luteal phase before the next period."""
    if next_period_date is None:
        return None
    return shift_date(next_period_date, -ASSUMED_LUTEAL_PHASE_DAYS)

def fertile_window(ovulation_date: Optional[date]) -> FertileWindow:
    """
    Fertile window from five days before ovulation to one day after.

    Returns an empty window when there is no ovulation date.
    """
    if ovulation_date is None:
        return FertileWindow()
    return FertileWindow(
        start=shift_date(ovulation_date, -FERTILE_DAYS_BEFORE_OVULATION),
        end=shift_date(ovulation_date, FERTILE_DAYS_AFTER_OVULATION)
    )

def generate_prediction(
    records: Iterable[PeriodRecord],
    current_date: Optional[DateLike] = None,
    settings: Optional[CycleSettings] = None
) -> Prediction:
    """
    Build a complete next-cycle prediction from the record history.

    Args:
        records: Period records in any order
        current_date: Reference date for ``days_until_next``, defaults to today
        settings: Baseline cycle length when history is too short

    Returns:
        Prediction with next period, ovulation, fertile window, confidence
        and days until the next period; an empty Prediction without records

    Example:
        >>> prediction = generate_prediction(records, "2024-02-01")
        >>> prediction.next_period_date
        datetime.date(2024, 2, 26)
    """
    ordered = sort_records(records)
    if not ordered:
        return Prediction()

    settings = settings or CycleSettings()
    lengths = cycle_lengths(ordered)
    if lengths:
        avg_cycle_length = mean(lengths)
    else:
        logger.info("Not enough cycles for prediction, using baseline cycle length", extra={
            "record_count": len(ordered),
            "baseline_cycle_length": settings.average_cycle_length
        })
        avg_cycle_length = settings.average_cycle_length

    next_period = predict_next_period(ordered[-1], avg_cycle_length)
    ovulation = predict_ovulation(next_period)

    return Prediction(
        next_period_date=next_period,
        ovulation_date=ovulation,
        fertile_window=fertile_window(ovulation),
        confidence=prediction_confidence(lengths),
        days_until_next=days_until_next_period(next_period, current_date)
    )
