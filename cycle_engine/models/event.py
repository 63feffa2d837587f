"""
Calendar event model for rendering cycle facts on a calendar.
"""
from enum import Enum
from datetime import date
from typing import Optional

from cycle_engine.models.base import CamelModel
from cycle_engine.models.record import FlowLevel

class CalendarEventType(str, Enum):
    """
    Kinds of calendar events. The ``predicted-*`` variants are projections
    of the next cycle rather than facts about recorded ones.
    """
    PERIOD = "period"
    PREDICTED_PERIOD = "predicted-period"
    OVULATION = "ovulation"
    PREDICTED_OVULATION = "predicted-ovulation"
    FERTILE = "fertile"
    PREDICTED_FERTILE = "predicted-fertile"

class CalendarEvent(CamelModel):
    """
    A single day-level event. Events are derived on demand and never stored.
    """
    date: date
    type: CalendarEventType
    intensity: Optional[FlowLevel] = None
    is_predicted: bool = False
