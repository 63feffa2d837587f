"""Tests for the plain-text health report."""
import pytest
from datetime import date

from cycle_engine.services.report import generate_report, health_level, regularity_label

def test_report_for_regular_history(regular_records):
    """Test every section of a report for a regular history."""
    report = generate_report(regular_records, [], current_date="2024-05-01")
    lines = report.split("\n")

    assert lines[0] == "📊 Cycle Health Report"
    assert lines[1] == "Generated: 2024-05-01"
    assert "• Total records: 5" in lines
    assert "• Average cycle length: 28.0 days" in lines
    assert "• Average period length: 5.0 days" in lines
    assert "• Regularity: Very regular (100%)" in lines
    assert "• Health score: Excellent (100)" in lines
    assert "• Trend: stable" in lines
    assert "• Next period: 2024-05-20 (in 19 days)" in lines
    assert "• Ovulation: 2024-05-06" in lines
    assert "• Fertile window: 2024-05-01 to 2024-05-07" in lines
    assert "⚠️ Risk Factors:" not in lines
    assert lines[-1] == "• Get enough sleep and manage stress"

def test_report_lists_recent_records_newest_first(regular_records):
    """Test the recent records section."""
    lines = generate_report(regular_records, [], current_date="2024-05-01").split("\n")

    start = lines.index("🗓️ Recent Records:")
    assert lines[start + 1] == "• 2024-04-22 to 2024-04-26 (5 days)"
    assert lines[start + 5] == "• 2024-01-01 to 2024-01-05 (5 days)"

def test_report_limits_recent_records(make_records):
    """Test that only the five latest records are listed."""
    records = make_records(date(2023, 1, 1), [28] * 7)
    lines = generate_report(records, [], current_date="2023-08-01").split("\n")

    start = lines.index("🗓️ Recent Records:")
    recent = [line for line in lines[start + 1:] if line.startswith("• 20")]
    assert len(recent) == 5

def test_report_for_irregular_history(irregular_records):
    """Test risk factors and labels for an irregular history."""
    lines = generate_report(irregular_records, [], current_date="2024-05-01").split("\n")

    assert "• Regularity: Somewhat irregular (50%)" in lines
    assert "• Health score: Good (80)" in lines
    assert "⚠️ Risk Factors:" in lines
    assert "• irregular cycle" in lines

def test_report_without_records():
    """Test that empty histories skip the prediction and records sections."""
    report = generate_report([], [], current_date="2024-05-01")

    assert "🔮 Prediction:" not in report
    assert "🗓️ Recent Records:" not in report
    assert "• Total records: 0" in report
    assert "💡 Recommendations:" in report

def test_report_overdue_prediction(two_records):
    """Test the relative label once the prediction has passed."""
    report = generate_report(two_records, [], current_date="2024-02-27")
    assert "• Next period: 2024-02-26 (yesterday)" in report

@pytest.mark.parametrize("score,expected", [
    (100, "Very regular"),
    (90, "Very regular"),
    (85, "Regular"),
    (70, "Fairly regular"),
    (65, "Moderately regular"),
    (50, "Somewhat irregular"),
    (49, "Irregular"),
])
def test_regularity_label(score, expected):
    """Test regularity score descriptions."""
    assert regularity_label(score) == expected

@pytest.mark.parametrize("score,expected", [
    (95, "Excellent"),
    (80, "Good"),
    (75, "Fair"),
    (60, "Needs improvement"),
    (10, "Needs attention"),
])
def test_health_level(score, expected):
    """Test health score descriptions."""
    assert health_level(score) == expected
