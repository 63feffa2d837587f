"""
Health tip model for phase- and symptom-based lifestyle suggestions.
"""
from enum import Enum
from pydantic import BaseModel, Field

class TipCategory(str, Enum):
    """Areas of daily life a tip addresses."""
    DIET = "Diet"
    EXERCISE = "Exercise"
    SLEEP = "Sleep"
    CARE = "Care"
    MOOD = "Mood"

class HealthTip(BaseModel):
    """
    A single lifestyle tip. Lower priority values are shown first.
    """
    id: int
    text: str
    priority: int = Field(999, ge=1)
    category: TipCategory
