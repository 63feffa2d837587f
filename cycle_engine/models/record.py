"""
Record models for period episodes and daily wellness logs.
"""
from enum import Enum
from datetime import date, datetime
from typing import Optional
from pydantic import model_validator

from cycle_engine.models.base import CamelModel

class FlowLevel(str, Enum):
    """Menstrual flow intensity."""
    LIGHT = "Light"
    MEDIUM = "Medium"
    HEAVY = "Heavy"

class Mood(str, Enum):
    """Mood tags a user can attach to a daily record."""
    HAPPY = "Happy"
    SAD = "Sad"
    ANGRY = "Angry"
    ANXIOUS = "Anxious"
    CALM = "Calm"
    IRRITABLE = "Irritable"

class ExerciseIntensity(str, Enum):
    """Exercise intensity for a day."""
    NONE = "None"
    LIGHT = "Light"
    MEDIUM = "Medium"
    HEAVY = "Heavy"

class PeriodRecord(CamelModel):
    """
    One menstrual episode. Both dates are inclusive.
    """
    serial_num: Optional[str] = None
    start_date: date
    end_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_date_order(self) -> "PeriodRecord":
        if self.start_date > self.end_date:
            raise ValueError("end_date cannot be earlier than start_date")
        return self

class DailyRecord(CamelModel):
    """
    One day's wellness log.

    Linked to a period record only by its date falling inside the
    record's ``[start_date, end_date]`` span.
    """
    date: date
    period_serial_num: Optional[str] = None
    flow_level: Optional[FlowLevel] = None
    mood: Optional[Mood] = None
    exercise_intensity: ExerciseIntensity = ExerciseIntensity.NONE
    diet: str = ""
    water_intake: Optional[int] = None
    sleep_hours: Optional[float] = None
    sexual_activity: bool = False
    contraception_method: Optional[str] = None
    notes: Optional[str] = None
