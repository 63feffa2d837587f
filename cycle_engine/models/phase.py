"""
Phase model definition for menstrual cycle phases.
"""
from enum import Enum

class PeriodPhase(str, Enum):
    """
    Menstrual cycle phases, in the order they occur within a cycle.
    """
    MENSTRUAL = "Menstrual"
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    LUTEAL = "Luteal"
