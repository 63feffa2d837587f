"""
Statistics calculation service for cycle tracking data.

This module aggregates cycle and period length series into dispersion
measures, regularity and health scores, trend direction, outliers, risk
factors and advisory recommendations. Every function is a pure transform of
its arguments and guards numeric edge cases (empty series, zero mean) by
returning neutral values instead of raising.
"""
import math
import statistics
from typing import Iterable, List, Optional, Sequence, Tuple

from cycle_engine.models.analytics import Trend
from cycle_engine.models.record import DailyRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.constants import (
    CONFIDENCE_STDDEV_PENALTY,
    GENERAL_RECOMMENDATIONS,
    IRREGULAR_VARIATION_THRESHOLD,
    IRREGULARITY_RECOMMENDATIONS,
    LOW_HEALTH_RECOMMENDATIONS,
    LOW_HEALTH_SCORE,
    LOW_REGULARITY_SCORE,
    MIN_PREDICTION_CONFIDENCE,
    NORMAL_CYCLE_RANGE,
    NORMAL_PERIOD_RANGE,
    OUTLIER_THRESHOLD,
    RANGE_PENALTY,
    REGULARITY_SCALE,
    REGULARITY_WEIGHT,
    RISK_IRREGULAR_CYCLE,
    RISK_LONG_CYCLE,
    RISK_LONG_PERIOD,
    RISK_RECOMMENDATION,
    RISK_SHORT_CYCLE,
    RISK_SHORT_PERIOD,
    TREND_MIN_DIFFERENCE,
    TREND_SLOPE_THRESHOLD,
    TREND_WINDOW_SIZE
)

MAX_SYMPTOM_PENALTY = 30

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)

def clamp(value: float, lower: float = 0, upper: float = 100) -> float:
    """Restrict a value to ``[lower, upper]``."""
    return max(lower, min(upper, value))

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0 for an empty series."""
    if not values:
        return 0.0
    return statistics.mean(values)

def stddev(values: Sequence[float]) -> float:
    """Population standard deviation (divisor n); 0 for an empty series."""
    if not values:
        return 0.0
    return statistics.pstdev(values)

def variation_coefficient(values: Sequence[float]) -> float:
    """
    Coefficient of variation (standard deviation over mean).

    Returns 0 for fewer than two samples or a zero mean.
    """
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    if avg == 0:
        return 0.0
    return stddev(values) / avg

def regularity_score(cycle_lengths: Sequence[float]) -> int:
    """
    Score cycle-length consistency from 0 (erratic) to 100 (perfectly regular).

    Args:
        cycle_lengths: Valid cycle lengths

    Returns:
        ``100 - variation_coefficient * 200`` rounded and clamped to
        ``[0, 100]``; 100 when fewer than two lengths exist

    Example:
        >>> regularity_score([28, 28, 28, 28])
        100
        >>> regularity_score([21, 35, 21, 35])
        50
    """
    if len(cycle_lengths) < 2:
        return 100
    variation = variation_coefficient(cycle_lengths)
    return int(clamp(round_half_up(100 - variation * REGULARITY_SCALE)))

def trend(values: Sequence[float], window_size: int = TREND_WINDOW_SIZE) -> Trend:
    """
    Compare the latest window of values against the window before it.

    Args:
        values: Series in chronological order
        window_size: Number of entries per window

    Returns:
        ``Trend.STABLE`` with fewer than ``2 * window_size`` entries or when the
        window means differ by less than a day, otherwise the direction of
        the change
    """
    if len(values) < window_size * 2:
        return Trend.STABLE

    recent = values[-window_size:]
    earlier = values[-window_size * 2:-window_size]
    difference = mean(recent) - mean(earlier)

    if abs(difference) < TREND_MIN_DIFFERENCE:
        return Trend.STABLE
    return Trend.INCREASING if difference > 0 else Trend.DECREASING

def trend_slope(values: Sequence[float]) -> float:
    """
    Least-squares slope of the series against its 1-based index.

    Returns 0 for fewer than two values.
    """
    n = len(values)
    if n < 2:
        return 0.0

    x_mean = (n + 1) / 2
    y_mean = mean(values)
    numerator = sum((i - x_mean) * (value - y_mean) for i, value in enumerate(values, start=1))
    denominator = sum((i - x_mean) ** 2 for i in range(1, n + 1))
    return numerator / denominator

def slope_trend(slope: float) -> Trend:
    """Classify a regression slope, in days per cycle."""
    if slope > TREND_SLOPE_THRESHOLD:
        return Trend.INCREASING
    if slope < -TREND_SLOPE_THRESHOLD:
        return Trend.DECREASING
    return Trend.STABLE

def identify_outliers(values: Sequence[float], threshold: float = OUTLIER_THRESHOLD) -> List[float]:
    """Values deviating from the mean by more than ``threshold`` standard deviations."""
    avg = mean(values)
    deviation = stddev(values)
    return [value for value in values if abs(value - avg) > threshold * deviation]

def symptom_severity_score(daily_records: Iterable[DailyRecord]) -> float:
    """
    Health-score penalty for symptom severity.

    Daily records carry no structured severity yet, so this is a deliberate
    no-op that always returns 0. The health score already subtracts its
    result, capped at ``MAX_SYMPTOM_PENALTY``.
    """
    return 0.0

def _average_or_default(values: Sequence[float], default: float) -> float:
    return mean(values) if values else default

def health_score(
    cycle_lengths: Sequence[float],
    period_lengths: Sequence[float],
    daily_records: Iterable[DailyRecord] = (),
    settings: Optional[CycleSettings] = None
) -> int:
    """
    Composite 0-100 health score.

    Starts at 100 and blends in the regularity score at 40% weight, then
    subtracts a fixed penalty when the average period length falls outside
    ``NORMAL_PERIOD_RANGE`` and another when the average cycle length falls
    outside ``NORMAL_CYCLE_RANGE``. Empty series fall back to the
    configured baselines rather than being penalized.

    Args:
        cycle_lengths: Valid cycle lengths
        period_lengths: Period lengths
        daily_records: Daily logs, passed to the symptom severity term
        settings: Baselines for empty series

    Returns:
        Rounded score clamped to ``[0, 100]``
    """
    settings = settings or CycleSettings()
    score = 100 * (1 - REGULARITY_WEIGHT) + regularity_score(cycle_lengths) * REGULARITY_WEIGHT

    avg_period = _average_or_default(period_lengths, settings.average_period_length)
    if not NORMAL_PERIOD_RANGE[0] <= avg_period <= NORMAL_PERIOD_RANGE[1]:
        score -= RANGE_PENALTY

    avg_cycle = _average_or_default(cycle_lengths, settings.average_cycle_length)
    if not NORMAL_CYCLE_RANGE[0] <= avg_cycle <= NORMAL_CYCLE_RANGE[1]:
        score -= RANGE_PENALTY

    score -= min(MAX_SYMPTOM_PENALTY, symptom_severity_score(daily_records))

    return int(clamp(round_half_up(score)))

def identify_risk_factors(
    cycle_lengths: Sequence[float],
    period_lengths: Sequence[float],
    settings: Optional[CycleSettings] = None
) -> List[str]:
    """
    Label risk factors in the cycle history.

    Returns:
        Any of ``irregular cycle``, ``short cycle``/``long cycle`` and
        ``short period``/``long period``, in that order
    """
    settings = settings or CycleSettings()
    risks = []

    if variation_coefficient(cycle_lengths) > IRREGULAR_VARIATION_THRESHOLD:
        risks.append(RISK_IRREGULAR_CYCLE)

    avg_cycle = _average_or_default(cycle_lengths, settings.average_cycle_length)
    if avg_cycle < NORMAL_CYCLE_RANGE[0]:
        risks.append(RISK_SHORT_CYCLE)
    elif avg_cycle > NORMAL_CYCLE_RANGE[1]:
        risks.append(RISK_LONG_CYCLE)

    avg_period = _average_or_default(period_lengths, settings.average_period_length)
    if avg_period < NORMAL_PERIOD_RANGE[0]:
        risks.append(RISK_SHORT_PERIOD)
    elif avg_period > NORMAL_PERIOD_RANGE[1]:
        risks.append(RISK_LONG_PERIOD)

    return risks

def generate_recommendations(regularity: int, health: int, risk_factors: Sequence[str]) -> List[str]:
    """
    Map scores and risk factors to advisory strings.

    The two general lifestyle recommendations are always included, last.
    """
    recommendations = []

    if regularity < LOW_REGULARITY_SCORE:
        recommendations.extend(IRREGULARITY_RECOMMENDATIONS)

    if health < LOW_HEALTH_SCORE:
        recommendations.extend(LOW_HEALTH_RECOMMENDATIONS)

    if risk_factors:
        recommendations.append(RISK_RECOMMENDATION)

    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return recommendations

def prediction_confidence(cycle_lengths: Sequence[float]) -> int:
    """
    Confidence (50-100) in the next-period prediction.

    Each day of standard deviation costs 10 points; fewer than two lengths
    give the floor value.
    """
    if len(cycle_lengths) < 2:
        return MIN_PREDICTION_CONFIDENCE
    return max(MIN_PREDICTION_CONFIDENCE, round_half_up(100 - stddev(cycle_lengths) * CONFIDENCE_STDDEV_PENALTY))

def average_lengths(
    cycle_lengths: Sequence[float],
    period_lengths: Sequence[float],
    settings: Optional[CycleSettings] = None
) -> Tuple[float, float]:
    """
    Average cycle and period lengths, each falling back to its baseline
    when the series is empty.

    Returns:
        Tuple of (average cycle length, average period length)
    """
    settings = settings or CycleSettings()
    return (
        _average_or_default(cycle_lengths, settings.average_cycle_length),
        _average_or_default(period_lengths, settings.average_period_length)
    )
