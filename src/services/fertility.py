"""
Service module for fertility window and conception probability estimates.

The window and ovulation day are fixed cycle-day offsets (days 10-16,
ovulation on day 14) and are not scaled to the user's cycle length.

Typical usage:
    probability = estimate_probability(snapshot.cycle_day)
    window = build_fertility_window(snapshot.cycle_day)
    status = describe_fertility_status(window)
"""
from typing import List

from src.models.snapshot import FertilityDay, FertilityWindow
from src.services.constants import (
    FERTILE_WINDOW_START,
    FERTILE_WINDOW_END,
    OVULATION_DAY,
    PROBABILITY_OVULATION_DAY,
    PROBABILITY_ADJACENT_DAY,
    PROBABILITY_FERTILE_WINDOW,
    PROBABILITY_BASELINE,
    FERTILITY_STATUS_PEAK,
    FERTILITY_STATUS_WINDOW,
    FERTILITY_STATUS_UPCOMING,
    FERTILITY_STATUS_POST_OVULATION
)

def estimate_probability(
    cycle_day: int,
    ovulation_day: int = OVULATION_DAY,
    fertile_start: int = FERTILE_WINDOW_START,
    fertile_end: int = FERTILE_WINDOW_END
) -> int:
    """
    Estimate the chance of conception (percent) for a cycle day.

    This is a four-step function, not an interpolation. The days either side
    of ovulation are checked before the wider window because they also fall
    inside it.

    Args:
        cycle_day: Day in the cycle (1-based)
        ovulation_day: Cycle day of ovulation
        fertile_start: First day of the fertile window
        fertile_end: Last day of the fertile window

    Returns:
        One of 33, 25, 15 or 3

    Example:
        >>> estimate_probability(14)
        33
        >>> estimate_probability(15)
        25
    """
    if cycle_day == ovulation_day:
        return PROBABILITY_OVULATION_DAY
    if cycle_day in (ovulation_day - 1, ovulation_day + 1):
        return PROBABILITY_ADJACENT_DAY
    if fertile_start <= cycle_day <= fertile_end:
        return PROBABILITY_FERTILE_WINDOW
    return PROBABILITY_BASELINE

def build_fertility_window(
    cycle_day: int,
    fertile_start: int = FERTILE_WINDOW_START,
    fertile_end: int = FERTILE_WINDOW_END,
    ovulation_day: int = OVULATION_DAY
) -> FertilityWindow:
    """
    Locate a cycle day relative to the fertile window.

    Distances are plain differences; once the window has passed they are
    negative and are returned as-is for the caller to present.
    """
    return FertilityWindow(
        is_in_fertile_window=fertile_start <= cycle_day <= fertile_end,
        is_ovulation_day=cycle_day == ovulation_day,
        days_until_fertile=fertile_start - cycle_day,
        days_until_ovulation=ovulation_day - cycle_day
    )

def build_fertility_timeline(
    cycle_day: int,
    fertile_start: int = FERTILE_WINDOW_START,
    fertile_end: int = FERTILE_WINDOW_END,
    ovulation_day: int = OVULATION_DAY
) -> List[FertilityDay]:
    """
    Build one entry per fertile-window day with its estimated probability.

    Example:
        >>> [d.probability for d in build_fertility_timeline(1)]
        [15, 15, 15, 25, 33, 25, 15]
    """
    return [
        FertilityDay(
            day=day,
            is_today=day == cycle_day,
            is_past=day < cycle_day,
            is_ovulation=day == ovulation_day,
            probability=estimate_probability(day, ovulation_day, fertile_start, fertile_end)
        )
        for day in range(fertile_start, fertile_end + 1)
    ]

def describe_fertility_status(window: FertilityWindow) -> str:
    """Short label for the fertility screen header."""
    if window.is_ovulation_day:
        return FERTILITY_STATUS_PEAK
    if window.is_in_fertile_window:
        return FERTILITY_STATUS_WINDOW
    if window.days_until_fertile > 0:
        return FERTILITY_STATUS_UPCOMING.format(days=window.days_until_fertile)
    return FERTILITY_STATUS_POST_OVULATION
