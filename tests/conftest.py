"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date, timedelta
from typing import List, Sequence

from cycle_engine.models.record import DailyRecord, FlowLevel, Mood, PeriodRecord


def _make_records(start: date, cycle_lengths: Sequence[int], period_days: int = 5) -> List[PeriodRecord]:
    """Build consecutive period records separated by the given cycle lengths."""
    starts = [start]
    for length in cycle_lengths:
        starts.append(starts[-1] + timedelta(days=length))
    return [
        PeriodRecord(
            serial_num=f"period_{i:03d}",
            start_date=s,
            end_date=s + timedelta(days=period_days - 1)
        )
        for i, s in enumerate(starts, start=1)
    ]


@pytest.fixture
def make_records():
    """Factory building records from a start date and a list of cycle lengths."""
    return _make_records


@pytest.fixture
def record_a() -> PeriodRecord:
    """Period from 2024-01-01 to 2024-01-05."""
    return PeriodRecord(serial_num="period_a", start_date=date(2024, 1, 1), end_date=date(2024, 1, 5))


@pytest.fixture
def record_b() -> PeriodRecord:
    """Period starting 28 days after record_a."""
    return PeriodRecord(serial_num="period_b", start_date=date(2024, 1, 29), end_date=date(2024, 2, 2))


@pytest.fixture
def two_records(record_a, record_b) -> List[PeriodRecord]:
    """Records A and B, deliberately out of order."""
    return [record_b, record_a]


@pytest.fixture
def regular_records() -> List[PeriodRecord]:
    """Five 5-day periods exactly 28 days apart, starting 2024-01-01."""
    return _make_records(date(2024, 1, 1), [28, 28, 28, 28])


@pytest.fixture
def irregular_records() -> List[PeriodRecord]:
    """Periods alternating between 21 and 35 day cycles."""
    return _make_records(date(2024, 1, 1), [21, 35, 21, 35])


@pytest.fixture
def daily_records() -> List[DailyRecord]:
    """Daily logs spread over records A and B plus one day outside any period."""
    return [
        DailyRecord(date=date(2024, 1, 1), flow_level=FlowLevel.HEAVY, mood=Mood.SAD,
                    diet="Soup", notes="Bad cramps and tired"),
        DailyRecord(date=date(2024, 1, 2), flow_level=FlowLevel.MEDIUM, mood=Mood.SAD,
                    diet="Rice", notes="Headache in the evening"),
        DailyRecord(date=date(2024, 1, 3), flow_level=FlowLevel.LIGHT, mood=Mood.CALM, diet="Salad"),
        DailyRecord(date=date(2024, 1, 20), mood=Mood.HAPPY, diet="Pasta", notes="Feeling great"),
        DailyRecord(date=date(2024, 1, 29), flow_level=FlowLevel.LIGHT, diet="Oats"),
        DailyRecord(date=date(2024, 1, 30), flow_level=FlowLevel.LIGHT, diet="Oats"),
    ]
