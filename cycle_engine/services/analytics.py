"""
Service module composing cycle statistics and predictions.

This is the entry point a record store calls whenever its period or daily
records change. It sorts the snapshot it is given, derives cycle and period
length series, and assembles statistics, scores, predictions and advice
into a single ``AnalyticsResult``.

Typical usage:
    analytics = compute_analytics(period_records, daily_records)
    print(f"Next period expected on {analytics.next_period_date}")
"""
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from aws_lambda_powertools import Logger

from cycle_engine.models.analytics import AnalyticsResult, MonthlyStats
from cycle_engine.models.record import DailyRecord, PeriodRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.constants import MIN_RECORDS_FOR_STATISTICS
from cycle_engine.services.metrics import cycle_lengths, period_length, period_lengths, sort_records
from cycle_engine.services.prediction import fertile_window, predict_next_period, predict_ovulation
from cycle_engine.services.statistics import (
    average_lengths,
    generate_recommendations,
    health_score,
    identify_outliers,
    identify_risk_factors,
    mean,
    prediction_confidence,
    regularity_score,
    round_half_up,
    trend,
    variation_coefficient
)
from cycle_engine.utils.logging import SERVICE_NAME

logger = Logger(service=SERVICE_NAME)

def compute_analytics(
    period_records: Sequence[PeriodRecord],
    daily_records: Sequence[DailyRecord],
    settings: Optional[CycleSettings] = None
) -> AnalyticsResult:
    """
    Compute aggregate statistics and next-cycle predictions.

    Args:
        period_records: Period records in any order
        daily_records: Daily logs in any order
        settings: Baseline cycle and period lengths used when there is not
            enough history

    Returns:
        AnalyticsResult. With fewer than two records the averages fall back
        to the baselines; with no records the prediction dates are None.
        Average cycle length is rounded to whole days, average period length
        to one decimal and variation coefficients to two decimals.

    Example:
        >>> analytics = compute_analytics(records, [])
        >>> analytics.average_cycle_length
        28
    """
    settings = settings or CycleSettings()
    ordered = sort_records(period_records)
    cycles = cycle_lengths(ordered)
    periods = period_lengths(ordered)

    if len(ordered) < MIN_RECORDS_FOR_STATISTICS:
        logger.warning("Not enough period records for statistics, using baselines", extra={
            "record_count": len(ordered),
            "baseline_cycle_length": settings.average_cycle_length,
            "baseline_period_length": settings.average_period_length
        })

    avg_cycle, avg_period = average_lengths(cycles, periods, settings)
    regularity = regularity_score(cycles)
    health = health_score(cycles, periods, daily_records, settings)
    risks = identify_risk_factors(cycles, periods, settings)

    next_period = predict_next_period(ordered[-1] if ordered else None, avg_cycle)
    ovulation = predict_ovulation(next_period)

    result = AnalyticsResult(
        total_records=len(ordered),
        average_cycle_length=round_half_up(avg_cycle),
        average_period_length=round(avg_period, 1),
        cycle_length_variation=round(variation_coefficient(cycles), 2),
        period_length_variation=round(variation_coefficient(periods), 2),
        regularity_score=regularity,
        trend=trend(cycles),
        next_period_date=next_period,
        fertile_window=fertile_window(ovulation),
        ovulation_date=ovulation,
        health_score=health,
        prediction_confidence=prediction_confidence(cycles),
        outliers=[int(value) for value in identify_outliers(cycles)],
        risk_factors=risks,
        recommendations=generate_recommendations(regularity, health, risks)
    )

    logger.info("Computed cycle analytics", extra={
        "record_count": result.total_records,
        "cycle_count": len(cycles),
        "average_cycle_length": result.average_cycle_length,
        "regularity_score": result.regularity_score,
        "health_score": result.health_score
    })
    return result

def compute_monthly_stats(period_records: Sequence[PeriodRecord]) -> List[MonthlyStats]:
    """
    Period count and average period length per month of period start.

    Returns:
        One entry per ``YYYY-MM`` that has a period start, oldest first
    """
    lengths_by_month: Dict[str, List[int]] = defaultdict(list)
    for record in sort_records(period_records):
        lengths_by_month[record.start_date.strftime("%Y-%m")].append(period_length(record))

    return [
        MonthlyStats(
            month=month,
            period_count=len(lengths),
            average_period_length=mean(lengths)
        )
        for month, lengths in sorted(lengths_by_month.items())
    ]
