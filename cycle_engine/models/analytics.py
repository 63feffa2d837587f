"""
Result models produced by the analytics and prediction services.
"""
from enum import Enum
from datetime import date
from typing import List, Optional
from pydantic import Field

from cycle_engine.models.base import CamelModel
from cycle_engine.models.phase import PeriodPhase

class Trend(str, Enum):
    """Direction in which cycle lengths are moving."""
    STABLE = "stable"
    INCREASING = "increasing"
    DECREASING = "decreasing"

class FertileWindow(CamelModel):
    """Fertile window, inclusive on both ends."""
    start: Optional[date] = None
    end: Optional[date] = None

class AnalyticsResult(CamelModel):
    """
    Aggregate statistics and predictions for a user's cycle history.

    Date fields are ``None`` when there are no period records to project from.
    """
    total_records: int = 0
    average_cycle_length: int
    average_period_length: float
    cycle_length_variation: float = 0.0
    period_length_variation: float = 0.0
    regularity_score: int = Field(100, ge=0, le=100)
    trend: Trend = Trend.STABLE
    next_period_date: Optional[date] = None
    fertile_window: FertileWindow = Field(default_factory=FertileWindow)
    ovulation_date: Optional[date] = None
    health_score: int = Field(100, ge=0, le=100)
    prediction_confidence: int = 50
    outliers: List[int] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

class Prediction(CamelModel):
    """Next-cycle projection for a single point in time."""
    next_period_date: Optional[date] = None
    ovulation_date: Optional[date] = None
    fertile_window: FertileWindow = Field(default_factory=FertileWindow)
    confidence: int = 0
    days_until_next: int = 0

class CycleAnalysis(CamelModel):
    """
    Breakdown of a single historical cycle.
    """
    cycle_number: int
    start_date: date
    end_date: date
    period_length: int
    cycle_length: int  # 0 for the earliest record
    phase: PeriodPhase
    symptoms: List[str] = Field(default_factory=list)
    average_flow: str
    mood: List[str] = Field(default_factory=list)

class MonthlyStats(CamelModel):
    """Period statistics for one calendar month, keyed by ``YYYY-MM``."""
    month: str
    period_count: int = 0
    average_period_length: float = 0.0
