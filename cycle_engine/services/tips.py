"""
Service module for phase- and symptom-specific health tips.

Typical usage:
    >>> phase = phase_at(today(), latest_record, 28, 5)
    >>> tips = get_personalized_tips(phase, daily_record=todays_log)
    >>> print([tip.text for tip in tips])
"""
from typing import Iterable, List, Optional, Sequence

from cycle_engine.models.phase import PeriodPhase
from cycle_engine.models.record import DailyRecord, ExerciseIntensity, FlowLevel, Mood
from cycle_engine.models.recommendation import HealthTip, TipCategory
from cycle_engine.services.constants import GENERAL_TIPS, PHASE_SPECIFIC_TIPS, SYMPTOM_TIPS

def _by_priority(tips: Iterable[HealthTip]) -> List[HealthTip]:
    return sorted(tips, key=lambda tip: tip.priority)

def get_tips_for_phase(phase: PeriodPhase, max_tips: int = 3, include_general: bool = False) -> List[HealthTip]:
    """
    Highest-priority tips for a cycle phase.

    Args:
        phase: Cycle phase
        max_tips: Maximum number of tips returned
        include_general: Whether general tips compete with phase tips

    Returns:
        Up to ``max_tips`` tips ordered by priority
    """
    tips = list(PHASE_SPECIFIC_TIPS.get(phase, []))
    if include_general:
        tips.extend(GENERAL_TIPS)
    return _by_priority(tips)[:max_tips]

def get_tips_for_symptoms(symptoms: Iterable[str]) -> List[HealthTip]:
    """Tips for each known symptom key, ordered by priority."""
    tips = []
    for symptom in symptoms:
        tips.extend(SYMPTOM_TIPS.get(symptom, []))
    return _by_priority(tips)

def get_tips_by_category(category: TipCategory, phase: Optional[PeriodPhase] = None) -> List[HealthTip]:
    """
    General and phase tips in one category.

    Without a phase, tips from every phase are considered.
    """
    tips = list(GENERAL_TIPS)
    if phase is not None:
        tips.extend(PHASE_SPECIFIC_TIPS.get(phase, []))
    else:
        for phase_tips in PHASE_SPECIFIC_TIPS.values():
            tips.extend(phase_tips)
    return _by_priority(tip for tip in tips if tip.category == category)

def infer_symptoms(daily_record: DailyRecord) -> List[str]:
    """Symptom keys suggested by a daily record's flow, mood and exercise."""
    symptoms = []
    if daily_record.flow_level == FlowLevel.HEAVY:
        symptoms.append("heavyFlow")
    if daily_record.mood in (Mood.SAD, Mood.IRRITABLE):
        symptoms.append("moodSwings")
    if daily_record.exercise_intensity == ExerciseIntensity.NONE:
        symptoms.append("fatigue")
    return symptoms

def get_personalized_tips(
    phase: PeriodPhase,
    daily_record: Optional[DailyRecord] = None,
    categories: Optional[Sequence[TipCategory]] = None,
    exclude_symptoms: Sequence[str] = (),
    max_tips: int = 3
) -> List[HealthTip]:
    """
    Tips for a phase, enriched by symptoms inferred from today's log.

    Args:
        phase: Current cycle phase
        daily_record: Optional daily log used to infer symptoms
        categories: Only keep tips in these categories, when given
        exclude_symptoms: Symptom keys to ignore
        max_tips: Maximum number of tips returned

    Returns:
        Up to ``max_tips`` distinct tips ordered by priority
    """
    tips = get_tips_for_phase(phase, max_tips=10, include_general=True)

    if daily_record is not None:
        symptoms = [s for s in infer_symptoms(daily_record) if s not in exclude_symptoms]
        tips.extend(get_tips_for_symptoms(symptoms))

    if categories:
        tips = [tip for tip in tips if tip.category in categories]

    seen = set()
    unique = []
    for tip in tips:
        if tip.id not in seen:
            seen.add(tip.id)
            unique.append(tip)
    return _by_priority(unique)[:max_tips]
