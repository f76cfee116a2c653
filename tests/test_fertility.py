"""
Tests for the fertility window and probability estimates.
"""
import pytest

from src.services.fertility import (
    estimate_probability,
    build_fertility_window,
    build_fertility_timeline,
    describe_fertility_status
)

@pytest.mark.parametrize("cycle_day,expected", [
    (1, 3),
    (9, 3),
    (10, 15),
    (12, 15),
    (13, 25),
    (14, 33),
    (15, 25),
    (16, 15),
    (17, 3),
    (28, 3),
    (45, 3)
])
def test_estimate_probability(cycle_day, expected):
    assert estimate_probability(cycle_day) == expected

def test_estimate_probability_with_custom_ovulation_day():
    """Days next to ovulation win over the wider window check."""
    assert estimate_probability(11, ovulation_day=12) == 25
    assert estimate_probability(12, ovulation_day=12) == 33
    assert estimate_probability(14, ovulation_day=12) == 15

def test_fertility_window_before_window():
    window = build_fertility_window(5)

    assert window.is_in_fertile_window is False
    assert window.is_ovulation_day is False
    assert window.days_until_fertile == 5
    assert window.days_until_ovulation == 9

def test_fertility_window_on_ovulation_day():
    window = build_fertility_window(14)

    assert window.is_in_fertile_window is True
    assert window.is_ovulation_day is True
    assert window.days_until_ovulation == 0

def test_fertility_window_after_window_reports_negative_distances():
    window = build_fertility_window(20)

    assert window.is_in_fertile_window is False
    assert window.days_until_fertile == -10
    assert window.days_until_ovulation == -6

def test_fertility_timeline():
    """Test one timeline entry per window day with past/today markers."""
    timeline = build_fertility_timeline(12)

    assert [day.day for day in timeline] == [10, 11, 12, 13, 14, 15, 16]
    assert [day.probability for day in timeline] == [15, 15, 15, 25, 33, 25, 15]
    assert [day.is_past for day in timeline] == [True, True, False, False, False, False, False]
    assert [day.day for day in timeline if day.is_today] == [12]
    assert [day.day for day in timeline if day.is_ovulation] == [14]

@pytest.mark.parametrize("cycle_day,expected", [
    (3, "7 days until fertile window"),
    (11, "Fertile Window"),
    (14, "Peak Fertility"),
    (22, "Post-ovulation phase")
])
def test_describe_fertility_status(cycle_day, expected):
    assert describe_fertility_status(build_fertility_window(cycle_day)) == expected
