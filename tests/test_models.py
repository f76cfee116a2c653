"""
Tests for model validation rules.
"""
import pytest
from datetime import date, datetime, timezone
from pydantic import ValidationError

from src.models.entry import CycleLogEntry, CycleLogEntryCreate
from src.models.insight import Insight
from src.models.phase import CyclePhase, Mood
from src.models.profile import UserCycleProfile, to_utc_date

def test_profile_defaults():
    profile = UserCycleProfile(user_id="123")

    assert profile.cycle_length == 28
    assert profile.period_length == 5
    assert profile.last_period_start is None
    assert profile.notifications_enabled is True
    assert profile.app_lock_enabled is False

@pytest.mark.parametrize("cycle_length", [20, 46])
def test_profile_rejects_cycle_length_out_of_range(cycle_length):
    with pytest.raises(ValidationError):
        UserCycleProfile(user_id="123", cycle_length=cycle_length)

def test_profile_rejects_period_not_shorter_than_cycle():
    with pytest.raises(ValidationError):
        UserCycleProfile(user_id="123", cycle_length=21, period_length=21)

def test_profile_parses_iso_timestamp():
    profile = UserCycleProfile(user_id="123", last_period_start="2024-01-01T00:00:00.000Z")

    assert profile.last_period_start == date(2024, 1, 1)

def test_to_utc_date():
    assert to_utc_date(datetime(2024, 1, 1, 22, tzinfo=timezone.utc)) == date(2024, 1, 1)
    assert to_utc_date("2024-01-01") == "2024-01-01"
    assert to_utc_date("not-a-timestamp-at-all") == "not-a-timestamp-at-all"

def test_entry_create_requires_date_and_phase():
    with pytest.raises(ValidationError):
        CycleLogEntryCreate(phase="menstrual")
    with pytest.raises(ValidationError):
        CycleLogEntryCreate(date="2024-01-01")

def test_entry_rejects_out_of_range_scores():
    with pytest.raises(ValidationError):
        CycleLogEntryCreate(date="2024-01-01", phase="luteal", pain_intensity=11)
    with pytest.raises(ValidationError):
        CycleLogEntryCreate(date="2024-01-01", phase="luteal", energy_level=0)

def test_entry_defaults():
    entry = CycleLogEntry(user_id="123", date="2024-01-05", phase="follicular", mood="happy")

    assert entry.phase == CyclePhase.FOLLICULAR
    assert entry.mood == Mood.HAPPY
    assert entry.symptoms == []
    assert len(entry.entry_id) == 32
    assert entry.created_at.tzinfo is not None

def test_insight_defaults():
    insight = Insight()

    assert insight.title == "Health Insight"
    assert insight.confidence == 75
    assert insight.type.value == "tip"
    assert insight.category.value == "wellness"
