"""
User-configurable cycle settings.
"""
from pydantic import Field

from cycle_engine.models.base import CamelModel
from cycle_engine.services.constants import DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH

class CycleSettings(CamelModel):
    """
    Baseline cycle and period lengths used when there is not enough
    history to compute them.
    """
    average_cycle_length: int = Field(DEFAULT_CYCLE_LENGTH, gt=0)
    average_period_length: int = Field(DEFAULT_PERIOD_LENGTH, gt=0)
