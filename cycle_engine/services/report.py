"""
Plain-text cycle health report for export.
"""
from typing import List, Optional, Sequence, Tuple

from cycle_engine.models.record import DailyRecord, PeriodRecord
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.analytics import compute_analytics
from cycle_engine.services.constants import (
    HEALTH_FALLBACK_LEVEL,
    HEALTH_LEVELS,
    REGULARITY_FALLBACK_LABEL,
    REGULARITY_LABELS,
    REPORT_RECENT_RECORDS
)
from cycle_engine.services.metrics import period_length, sort_records
from cycle_engine.utils.dates import DateLike, parse_date, relative_label, today

def _label_for(score: int, table: List[Tuple[int, str]], fallback: str) -> str:
    for threshold, label in table:
        if score >= threshold:
            return label
    return fallback

def regularity_label(score: int) -> str:
    """Describe a regularity score, e.g. ``Very regular`` for 90 and above."""
    return _label_for(score, REGULARITY_LABELS, REGULARITY_FALLBACK_LABEL)

def health_level(score: int) -> str:
    """Describe a health score, e.g. ``Excellent`` for 90 and above."""
    return _label_for(score, HEALTH_LEVELS, HEALTH_FALLBACK_LEVEL)

def generate_report(
    period_records: Sequence[PeriodRecord],
    daily_records: Sequence[DailyRecord],
    current_date: Optional[DateLike] = None,
    settings: Optional[CycleSettings] = None
) -> str:
    """
    Generate a human-readable summary of the cycle statistics.

    Args:
        period_records: Period records in any order
        daily_records: Daily logs in any order
        current_date: Date stamped on the report, defaults to today
        settings: Baselines for short histories

    Returns:
        Formatted report string
    """
    generated_on = today() if current_date is None else parse_date(current_date)
    analytics = compute_analytics(period_records, daily_records, settings)
    recent = sort_records(period_records)[-REPORT_RECENT_RECORDS:]

    report = [
        "📊 Cycle Health Report",
        f"Generated: {generated_on.isoformat()}",
        "",
        "📈 Summary:",
        f"• Total records: {analytics.total_records}",
        f"• Average cycle length: {analytics.average_cycle_length:.1f} days",
        f"• Average period length: {analytics.average_period_length:.1f} days",
        f"• Regularity: {regularity_label(analytics.regularity_score)} ({analytics.regularity_score}%)",
        f"• Health score: {health_level(analytics.health_score)} ({analytics.health_score})",
        f"• Trend: {analytics.trend.value}",
    ]

    if analytics.next_period_date is not None:
        report.extend([
            "",
            "🔮 Prediction:",
            (f"• Next period: {analytics.next_period_date.isoformat()} "
             f"({relative_label(analytics.next_period_date, generated_on)})"),
            f"• Ovulation: {analytics.ovulation_date.isoformat()}",
            (f"• Fertile window: {analytics.fertile_window.start.isoformat()} "
             f"to {analytics.fertile_window.end.isoformat()}"),
        ])

    if analytics.risk_factors:
        report.extend([
            "",
            "⚠️ Risk Factors:",
            *[f"• {risk}" for risk in analytics.risk_factors]
        ])

    if recent:
        report.extend([
            "",
            "🗓️ Recent Records:",
            *[
                f"• {record.start_date.isoformat()} to {record.end_date.isoformat()} ({period_length(record)} days)"
                for record in reversed(recent)
            ]
        ])

    report.extend([
        "",
        "💡 Recommendations:",
        *[f"• {recommendation}" for recommendation in analytics.recommendations]
    ])

    return "\n".join(report)
