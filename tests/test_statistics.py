"""Tests for statistics calculation service."""
import pytest

from cycle_engine.models.analytics import Trend
from cycle_engine.models.settings import CycleSettings
from cycle_engine.services.statistics import (
    average_lengths,
    generate_recommendations,
    health_score,
    identify_outliers,
    identify_risk_factors,
    mean,
    prediction_confidence,
    regularity_score,
    round_half_up,
    slope_trend,
    stddev,
    symptom_severity_score,
    trend,
    trend_slope,
    variation_coefficient
)

@pytest.mark.parametrize("value,expected", [
    (0.5, 1),
    (1.49, 1),
    (2.5, 3),
    (28.5, 29),
    (4.0, 4),
])
def test_round_half_up(value, expected):
    """Test that halves round up rather than to even."""
    assert round_half_up(value) == expected

def test_mean_and_stddev():
    """Test the basic aggregates, including the empty series."""
    assert mean([]) == 0
    assert mean([26, 30]) == 28
    assert stddev([]) == 0
    assert stddev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

def test_variation_coefficient_guards():
    """Test neutral values for short series and zero means."""
    assert variation_coefficient([28]) == 0
    assert variation_coefficient([0, 0]) == 0
    assert variation_coefficient([21, 35, 21, 35]) == pytest.approx(0.25)

@pytest.mark.parametrize("lengths,expected", [
    ([], 100),
    ([28], 100),
    ([28, 28, 28, 28], 100),
    ([21, 35, 21, 35], 50),
    ([10, 50, 10, 50], 0),
])
def test_regularity_score(lengths, expected):
    """Test regularity scoring from the coefficient of variation."""
    assert regularity_score(lengths) == expected

def test_trend_needs_two_full_windows():
    """Test that short series are always stable."""
    assert trend([20] * 6 + [40] * 5) == Trend.STABLE

def test_trend_directions():
    """Test increasing, decreasing and stable comparisons of the two windows."""
    rising = [28] * 6 + [32] * 6
    assert trend(rising) == Trend.INCREASING
    assert trend(list(reversed(rising))) == Trend.DECREASING
    # Window means half a day apart
    assert trend([28] * 6 + [28.5] * 6) == Trend.STABLE

def test_trend_uses_latest_windows():
    """Test that only the most recent twelve entries count."""
    values = [60] * 4 + [28] * 12
    assert trend(values) == Trend.STABLE

def test_trend_slope():
    """Test the least-squares slope and its classification."""
    assert trend_slope([26, 27, 28, 29, 30]) == pytest.approx(1.0)
    assert trend_slope([28]) == 0
    assert slope_trend(1.0) == Trend.INCREASING
    assert slope_trend(-0.6) == Trend.DECREASING
    assert slope_trend(0.5) == Trend.STABLE

def test_identify_outliers():
    """Test that values beyond two standard deviations are flagged."""
    assert identify_outliers([28] * 9 + [60]) == [60]
    assert identify_outliers([28, 28, 28]) == []
    assert identify_outliers([]) == []

def test_symptom_severity_score_is_neutral(daily_records):
    """Test that symptoms never reduce the health score."""
    assert symptom_severity_score(daily_records) == 0

@pytest.mark.parametrize("cycles,periods,expected", [
    ([28, 28, 28, 28], [5, 5, 5, 5, 5], 100),
    ([21, 35, 21, 35], [5, 5, 5, 5, 5], 80),
    ([28, 28], [9, 9], 80),
    ([40, 40], [9, 9], 60),
    ([10, 50, 10, 50], [8], 40),
])
def test_health_score(cycles, periods, expected):
    """Test the composite health score."""
    assert health_score(cycles, periods) == expected

def test_health_score_empty_history_uses_baselines():
    """Test that a new user is not penalized for missing data."""
    assert health_score([], []) == 100
    assert health_score([], [], settings=CycleSettings(average_cycle_length=40)) == 80

def test_identify_risk_factors():
    """Test risk labelling for cycle and period averages."""
    assert identify_risk_factors([28, 28], [5, 5]) == []
    assert identify_risk_factors([18, 18], [2]) == ["short cycle", "short period"]
    assert identify_risk_factors([40, 40], [9]) == ["long cycle", "long period"]
    assert identify_risk_factors([21, 35, 21, 35], [5]) == ["irregular cycle"]
    assert identify_risk_factors([], []) == []

def test_generate_recommendations_general_only():
    """Test that healthy histories still get the general advice."""
    recommendations = generate_recommendations(100, 100, [])
    assert recommendations == [
        "Keep a balanced diet and exercise moderately",
        "Get enough sleep and manage stress"
    ]

def test_generate_recommendations_all_triggers():
    """Test that every trigger contributes its recommendations."""
    recommendations = generate_recommendations(50, 60, ["short cycle"])
    assert len(recommendations) == 8
    assert recommendations[-2:] == [
        "Keep a balanced diet and exercise moderately",
        "Get enough sleep and manage stress"
    ]

@pytest.mark.parametrize("lengths,expected", [
    ([], 50),
    ([28], 50),
    ([28, 28, 28], 100),
    ([27, 29], 90),
    ([21, 35, 21, 35], 50),
])
def test_prediction_confidence(lengths, expected):
    """Test confidence from the cycle-length standard deviation."""
    assert prediction_confidence(lengths) == expected

def test_average_lengths():
    """Test averages and their baseline fallbacks."""
    assert average_lengths([26, 30], [4, 6]) == (28, 5)
    assert average_lengths([], []) == (28, 5)
    settings = CycleSettings(average_cycle_length=30, average_period_length=4)
    assert average_lengths([], [], settings) == (30, 4)
