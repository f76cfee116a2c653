"""
Tests for profile settings updates.
"""
import pytest
from datetime import date

from src.models.profile import ProfileSettingsUpdate
from src.services.exceptions import ProfileValidationError
from src.services.profile import apply_settings_update

def test_apply_settings_update_merges_changes(sample_profile):
    updated = apply_settings_update(
        sample_profile,
        ProfileSettingsUpdate(cycle_length=30, last_period_start=date(2024, 2, 2))
    )

    assert updated.cycle_length == 30
    assert updated.last_period_start == date(2024, 2, 2)
    # untouched fields are kept
    assert updated.period_length == 5
    assert updated.name == "Test User"
    # the input profile is not mutated
    assert sample_profile.cycle_length == 28

def test_apply_settings_update_accepts_bounds(sample_profile):
    assert apply_settings_update(sample_profile, ProfileSettingsUpdate(cycle_length=21)).cycle_length == 21
    assert apply_settings_update(sample_profile, ProfileSettingsUpdate(cycle_length=45)).cycle_length == 45

@pytest.mark.parametrize("cycle_length", [20, 46, 0])
def test_apply_settings_update_rejects_cycle_length(sample_profile, cycle_length):
    with pytest.raises(ProfileValidationError) as exc_info:
        apply_settings_update(sample_profile, ProfileSettingsUpdate(cycle_length=cycle_length))

    assert exc_info.value.fields == ["cycle_length"]
    assert "between 21 and 45" in str(exc_info.value)

def test_apply_settings_update_rejects_period_longer_than_cycle(sample_profile):
    with pytest.raises(ProfileValidationError):
        apply_settings_update(sample_profile, ProfileSettingsUpdate(period_length=28))

def test_apply_settings_update_normalises_datetime(sample_profile):
    """An ISO timestamp is stored as its UTC calendar date."""
    updated = apply_settings_update(
        sample_profile,
        ProfileSettingsUpdate(last_period_start="2024-03-01T23:30:00-05:00")
    )

    assert updated.last_period_start == date(2024, 3, 2)

def test_apply_settings_update_ignores_none(sample_profile):
    updated = apply_settings_update(sample_profile, ProfileSettingsUpdate(name=None, notifications_enabled=False))

    assert updated.name == "Test User"
    assert updated.notifications_enabled is False
