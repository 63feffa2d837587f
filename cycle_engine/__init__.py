"""
Cycle analytics and prediction engine.

Pure, synchronous computations over in-memory period and daily records:
statistics, regularity and health scoring, predictions, per-cycle history,
calendar events, validation and a text report.
"""
from cycle_engine.services.analytics import compute_analytics, compute_monthly_stats
from cycle_engine.services.calendar import generate_calendar_events
from cycle_engine.services.history import compute_cycle_analysis
from cycle_engine.services.prediction import generate_prediction
from cycle_engine.services.report import generate_report
from cycle_engine.services.validation import (
    has_overlap,
    validate_daily_record,
    validate_import_data,
    validate_period_record
)

__all__ = [
    "compute_analytics",
    "compute_cycle_analysis",
    "compute_monthly_stats",
    "generate_calendar_events",
    "generate_prediction",
    "generate_report",
    "has_overlap",
    "validate_daily_record",
    "validate_import_data",
    "validate_period_record",
]
