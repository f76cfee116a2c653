"""
Tests for the log entry summary used by insight generation.
"""
import pytest

from src.models.insight import CycleAnalysisSummary, Trend
from src.services.statistics import analyze_trend, metric_values, summarize

def test_summarize_empty_entries():
    """An empty history yields neutral defaults."""
    summary = summarize([])

    assert summary == CycleAnalysisSummary()
    assert summary.total_entries == 0
    assert summary.common_symptoms == {}
    assert summary.recent_energy == 5
    assert summary.recent_pain == 0
    assert summary.energy_trend == Trend.STABLE
    assert summary.pain_trend == Trend.STABLE

def test_summarize_counts_and_means(sample_entries):
    summary = summarize(sample_entries)

    assert summary.total_entries == 4
    assert list(summary.common_symptoms.items()) == [
        ("cramps", 3),
        ("headache", 2),
        ("fatigue", 1),
        ("bloating", 1)
    ]
    assert summary.mood_patterns == {"tired": 2, "irritable": 1}
    assert summary.sleep_patterns == {"good": 1, "fair": 1, "poor": 1}
    # Missing values are left out of both the sum and the count
    assert summary.recent_energy == pytest.approx(13 / 3)
    assert summary.recent_pain == pytest.approx(14 / 3)

def test_summarize_trends_follow_supplied_order(sample_entries):
    """Trends compare the first and last of the last three values in order."""
    summary = summarize(sample_entries)

    # energy values in order: 6, 4, 3
    assert summary.energy_trend == Trend.DECLINING
    # pain values in order: 2, 5, 7
    assert summary.pain_trend == Trend.IMPROVING

def test_summarize_limits_recent_window(sample_entries):
    summary = summarize(sample_entries, recent=2)

    assert summary.total_entries == 4
    assert summary.recent_energy == 5.0
    assert summary.recent_pain == 3.5
    assert summary.sleep_patterns == {"good": 1, "fair": 1}
    # symptoms still cover every entry
    assert summary.common_symptoms["cramps"] == 3

def test_summarize_keeps_top_five_symptoms():
    entries = [
        {"symptoms": ["a", "b", "c", "d", "e", "f"]},
        {"symptoms": ["f", "e"]},
        {"symptoms": ["f"]}
    ]

    summary = summarize(entries)

    assert list(summary.common_symptoms) == ["f", "e", "a", "b", "c"]
    assert summary.common_symptoms["f"] == 3

def test_summarize_accepts_mappings():
    entries = [
        {"mood": "happy", "energy_level": 8, "pain_intensity": 1, "sleep_quality": "excellent"},
        {"mood": "happy", "energy_level": 6}
    ]

    summary = summarize(entries)

    assert summary.mood_patterns == {"happy": 2}
    assert summary.recent_energy == 7.0
    assert summary.recent_pain == 1.0
    assert summary.common_symptoms == {}

@pytest.mark.parametrize("values,expected", [
    ([3, 3, 3, 6], Trend.IMPROVING),
    ([6, 6, 6, 3], Trend.DECLINING),
    ([5, 5], Trend.STABLE),
    ([5, 6], Trend.STABLE),
    ([5, 7], Trend.IMPROVING),
    ([7], Trend.STABLE),
    ([], Trend.STABLE),
    ([9, 1, 2, 8], Trend.IMPROVING)
])
def test_analyze_trend(values, expected):
    assert analyze_trend(values) == expected

def test_metric_values_skips_missing(sample_entries):
    assert metric_values(sample_entries, "energy_level") == [6, 4, 3]
    assert metric_values(sample_entries, "temperature") == []

def test_summarize_without_window_uses_every_entry():
    entries = [{"energy_level": level} for level in (2, 2, 2, 2, 2, 2, 2, 8, 8, 8)]

    assert summarize(entries).recent_energy == 3.8
    assert summarize(entries, recent=7).recent_energy == 2.0

def test_summarize_means_are_not_rounded():
    entries = [{"pain_intensity": 1}, {"pain_intensity": 2}, {"pain_intensity": 2}]

    assert summarize(entries).recent_pain == 5 / 3
