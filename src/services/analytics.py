"""
Analytics payloads served by the analytics endpoints.

Typical usage:
    fertility = build_fertility_report(profile, as_of)
    analytics = build_analytics(profile, entries, as_of)
"""
from typing import Any, Dict, Optional, Sequence
from datetime import date

from src.models.entry import CycleLogEntry
from src.models.phase import CyclePhase
from src.models.profile import UserCycleProfile
from src.services.cycle import compute_snapshot
from src.services.fertility import (
    build_fertility_window,
    build_fertility_timeline,
    describe_fertility_status
)
from src.services.constants import (
    FERTILE_WINDOW_START,
    FERTILE_WINDOW_END,
    OVULATION_DAY
)

def build_fertility_report(profile: UserCycleProfile, as_of: date) -> Dict[str, Any]:
    """
    Build the fertility section for a profile on a given date.

    Args:
        profile: User cycle profile
        as_of: UTC calendar date

    Returns:
        Dictionary with the current cycle day, window flags, probability,
        the fixed window bounds, distances and the window timeline
    """
    snapshot = compute_snapshot(profile, as_of)
    window = build_fertility_window(snapshot.cycle_day)

    return {
        "current_cycle_day": snapshot.cycle_day,
        "is_in_fertile_window": window.is_in_fertile_window,
        "is_ovulation_day": window.is_ovulation_day,
        "pregnancy_probability": snapshot.pregnancy_probability,
        "fertile_window_start": FERTILE_WINDOW_START,
        "fertile_window_end": FERTILE_WINDOW_END,
        "ovulation_day": OVULATION_DAY,
        "days_until_fertile": window.days_until_fertile,
        "days_until_ovulation": window.days_until_ovulation,
        "status": describe_fertility_status(window),
        "timeline": [day.model_dump() for day in build_fertility_timeline(snapshot.cycle_day)]
    }

def find_last_period(
    profile: UserCycleProfile,
    entries: Sequence[CycleLogEntry]
) -> Optional[date]:
    """Most recent entry labelled menstrual, else the profile's last period start."""
    menstrual_dates = [e.date for e in entries if e.phase == CyclePhase.MENSTRUAL]
    if menstrual_dates:
        return max(menstrual_dates)
    return profile.last_period_start

def build_analytics(
    profile: UserCycleProfile,
    entries: Sequence[CycleLogEntry],
    as_of: date
) -> Dict[str, Any]:
    """
    Build the combined analytics payload.

    The average cycle length is the configured one; it is not inferred from
    logged history.

    Args:
        profile: User cycle profile
        entries: Log entries, newest first
        as_of: UTC calendar date

    Returns:
        Dictionary with ``fertility`` and ``insights`` sections
    """
    snapshot = compute_snapshot(profile, as_of)
    last_period = find_last_period(profile, entries)

    return {
        "fertility": build_fertility_report(profile, as_of),
        "insights": {
            "total_entries": len(entries),
            "avg_cycle_length": profile.cycle_length,
            "last_period": last_period.isoformat() if last_period else None,
            "next_period_date": snapshot.next_period_date.isoformat(),
            "days_until_next_period": snapshot.days_until_next_period
        }
    }
