"""
Constants and shared data for cycle analytics services.
"""
from typing import Dict, List, Tuple

from cycle_engine.models.phase import PeriodPhase
from cycle_engine.models.recommendation import HealthTip, TipCategory

# Baselines used when there is too little history
DEFAULT_CYCLE_LENGTH = 28
DEFAULT_PERIOD_LENGTH = 5
MIN_RECORDS_FOR_STATISTICS = 2

# Cycle lengths outside (0, MAX_VALID_CYCLE_LENGTH] are data-entry anomalies
MAX_VALID_CYCLE_LENGTH = 60

# Fixed luteal phase used to back-date ovulation from the next period.
# Candidate for per-user parameterization; degrades for cycles far from 28 days.
ASSUMED_LUTEAL_PHASE_DAYS = 14

FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Days either side of the ovulation day that count as ovulation phase
OVULATION_PHASE_HALF_WIDTH = 3

# Calendar renders ovulation day +/- this many days as fertile
CALENDAR_FERTILE_SPAN = 1

# Record validation bounds
MIN_PERIOD_LENGTH = 1
MAX_PERIOD_LENGTH = 14
MIN_CYCLE_LENGTH = 15
MAX_WATER_INTAKE_ML = 5000
MAX_SLEEP_HOURS = 24
MAX_NOTES_LENGTH = 500

# Healthy reference ranges
NORMAL_CYCLE_RANGE = (21, 35)
NORMAL_PERIOD_RANGE = (3, 7)

# Statistics
REGULARITY_SCALE = 200
REGULARITY_WEIGHT = 0.4
RANGE_PENALTY = 20
IRREGULAR_VARIATION_THRESHOLD = 0.15
TREND_WINDOW_SIZE = 6
TREND_MIN_DIFFERENCE = 1
TREND_SLOPE_THRESHOLD = 0.5
OUTLIER_THRESHOLD = 2
MIN_PREDICTION_CONFIDENCE = 50
CONFIDENCE_STDDEV_PENALTY = 10

# Recommendation thresholds
LOW_REGULARITY_SCORE = 70
LOW_HEALTH_SCORE = 70

RISK_IRREGULAR_CYCLE = "irregular cycle"
RISK_SHORT_CYCLE = "short cycle"
RISK_LONG_CYCLE = "long cycle"
RISK_SHORT_PERIOD = "short period"
RISK_LONG_PERIOD = "long period"

IRREGULARITY_RECOMMENDATIONS = [
    "Consider consulting a doctor about the cause of irregular cycles",
    "Keep a regular daily schedule",
    "Reduce stress and try relaxation techniques",
]

LOW_HEALTH_RECOMMENDATIONS = [
    "Pay attention to lifestyle, diet and exercise habits",
    "Track symptom changes to share details with your doctor",
]

RISK_RECOMMENDATION = "Schedule regular gynecological check-ups"

GENERAL_RECOMMENDATIONS = [
    "Keep a balanced diet and exercise moderately",
    "Get enough sleep and manage stress",
]

# Flow levels mapped to numbers for averaging, and the upper bound of each bucket
FLOW_VALUES = {
    "Light": 1,
    "Medium": 2,
    "Heavy": 3,
}

FLOW_BUCKETS: List[Tuple[float, str]] = [
    (1.3, "Light"),
    (2.3, "Medium"),
]

FLOW_NOT_RECORDED = "Not recorded"

# Keyword matching on daily notes; order is the order tags are reported in
SYMPTOM_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("pain", ("pain", "cramp", "ache")),
    ("headache", ("headache", "migraine")),
    ("fatigue", ("fatigue", "tired", "exhausted")),
]

# Report labels, highest threshold first
REGULARITY_LABELS: List[Tuple[int, str]] = [
    (90, "Very regular"),
    (80, "Regular"),
    (70, "Fairly regular"),
    (60, "Moderately regular"),
    (50, "Somewhat irregular"),
]
REGULARITY_FALLBACK_LABEL = "Irregular"

HEALTH_LEVELS: List[Tuple[int, str]] = [
    (90, "Excellent"),
    (80, "Good"),
    (70, "Fair"),
    (60, "Needs improvement"),
]
HEALTH_FALLBACK_LEVEL = "Needs attention"

REPORT_RECENT_RECORDS = 5

GENERAL_TIPS: List[HealthTip] = [
    HealthTip(id=1, text="Drinking enough water helps ease period discomfort", priority=1, category=TipCategory.DIET),
    HealthTip(id=2, text="A regular sleep schedule matters for your cycle", priority=2, category=TipCategory.SLEEP),
    HealthTip(id=3, text="Iron-rich foods help replace nutrients lost during your period", priority=3, category=TipCategory.DIET),
    HealthTip(id=4, text="Moderate exercise can relieve period symptoms", priority=4, category=TipCategory.EXERCISE),
    HealthTip(id=5, text="A positive mood helps ease period discomfort", priority=5, category=TipCategory.MOOD),
    HealthTip(id=6, text="Some sunlight helps your body produce vitamin D", priority=6, category=TipCategory.CARE),
]

PHASE_SPECIFIC_TIPS: Dict[PeriodPhase, List[HealthTip]] = {
    PeriodPhase.MENSTRUAL: [
        HealthTip(id=101, text="Drink warm water and avoid cold drinks", priority=1, category=TipCategory.DIET),
        HealthTip(id=102, text="Rest well and avoid strenuous exercise", priority=2, category=TipCategory.EXERCISE),
        HealthTip(id=103, text="Keep warm, especially your abdomen and lower back", priority=3, category=TipCategory.CARE),
        HealthTip(id=104, text="Gentle yoga or stretching can help", priority=4, category=TipCategory.EXERCISE),
        HealthTip(id=105, text="Prefer warm meals over raw or cold food", priority=5, category=TipCategory.DIET),
        HealthTip(id=106, text="A warm foot bath or heat pad can ease cramps", priority=6, category=TipCategory.CARE),
    ],
    PeriodPhase.FOLLICULAR: [
        HealthTip(id=201, text="Energy is rising, a good time for higher intensity workouts", priority=1, category=TipCategory.EXERCISE),
        HealthTip(id=202, text="Add protein and fresh vegetables to support recovery", priority=2, category=TipCategory.DIET),
        HealthTip(id=203, text="A good time to start new projects or habits", priority=3, category=TipCategory.MOOD),
        HealthTip(id=204, text="Keep a consistent bedtime to lock in good sleep", priority=4, category=TipCategory.SLEEP),
    ],
    PeriodPhase.OVULATION: [
        HealthTip(id=301, text="Stay hydrated as body temperature rises slightly", priority=1, category=TipCategory.DIET),
        HealthTip(id=302, text="Challenging workouts are well tolerated now", priority=2, category=TipCategory.EXERCISE),
        HealthTip(id=303, text="Mild pelvic discomfort around ovulation is common", priority=3, category=TipCategory.CARE),
        HealthTip(id=304, text="Social energy peaks, plan activities you enjoy", priority=4, category=TipCategory.MOOD),
    ],
    PeriodPhase.LUTEAL: [
        HealthTip(id=401, text="Cut back on salt and caffeine to reduce bloating", priority=1, category=TipCategory.DIET),
        HealthTip(id=402, text="Magnesium-rich foods can ease premenstrual symptoms", priority=2, category=TipCategory.DIET),
        HealthTip(id=403, text="Switch to moderate exercise such as walking or pilates", priority=3, category=TipCategory.EXERCISE),
        HealthTip(id=404, text="Plan extra rest, sleep needs often increase", priority=4, category=TipCategory.SLEEP),
        HealthTip(id=405, text="Relaxation techniques help with irritability", priority=5, category=TipCategory.MOOD),
    ],
}

SYMPTOM_TIPS: Dict[str, List[HealthTip]] = {
    "heavyFlow": [
        HealthTip(id=501, text="Heavy flow: eat iron-rich foods such as spinach and red meat", priority=1, category=TipCategory.DIET),
        HealthTip(id=502, text="If heavy flow lasts more than a week, consult a doctor", priority=2, category=TipCategory.CARE),
    ],
    "moodSwings": [
        HealthTip(id=601, text="Mood swings: short walks and breathing exercises can help", priority=1, category=TipCategory.MOOD),
        HealthTip(id=602, text="Talk to someone you trust about how you feel", priority=3, category=TipCategory.MOOD),
    ],
    "fatigue": [
        HealthTip(id=701, text="Fatigue: light movement often restores energy better than rest alone", priority=2, category=TipCategory.EXERCISE),
        HealthTip(id=702, text="Aim for seven to nine hours of sleep", priority=2, category=TipCategory.SLEEP),
    ],
    "pain": [
        HealthTip(id=801, text="Apply heat to the lower abdomen to ease cramps", priority=1, category=TipCategory.CARE),
    ],
}
