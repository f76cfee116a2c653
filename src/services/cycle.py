"""
Service module for cycle position calculations.

This module turns a user's cycle profile and an explicit as-of date into a
snapshot of where the user is in their cycle, a per-day calendar, and the
supportive message shown on the home screen. Nothing here reads the clock;
callers pass the date they are interested in, always as a UTC calendar date.

Typical usage:
    profile = profiles.get(user_id)
    snapshot = compute_snapshot(profile, as_of=date(2024, 1, 15))
    days = build_calendar(profile, date(2024, 1, 1), date(2024, 1, 31))
"""
import math
from typing import Dict, Iterable, List, Optional
from datetime import date, timedelta

from src.models.entry import CycleLogEntry
from src.models.profile import UserCycleProfile
from src.models.snapshot import CalendarDay, CycleSnapshot
from src.services.fertility import estimate_probability
from src.services.utils import days_between, iter_dates
from src.services.constants import (
    FERTILE_WINDOW_START,
    FERTILE_WINDOW_END,
    OVULATION_DAY,
    MAX_CALENDAR_DAYS,
    SUPPORTIVE_MESSAGES,
    PERIOD_MESSAGES,
    PRE_PERIOD_MESSAGE,
    PMS_MESSAGE,
    OVULATION_MESSAGE
)

def compute_snapshot(profile: UserCycleProfile, as_of: date) -> CycleSnapshot:
    """
    Compute the cycle snapshot for a profile on a given date.

    Dates before the last period start count as day 1, and dates many cycles
    later wrap around the configured cycle length. A profile without a last
    period start gets a placeholder snapshot (day 1, no flags, a full cycle
    until the next period) rather than an error.

    Args:
        profile: Validated cycle profile
        as_of: UTC calendar date to compute the snapshot for

    Returns:
        CycleSnapshot for ``as_of``

    Example:
        >>> profile = UserCycleProfile(user_id="u1", last_period_start=date(2024, 1, 1))
        >>> snapshot = compute_snapshot(profile, date(2024, 1, 15))
        >>> snapshot.cycle_day, snapshot.is_fertile
        (15, True)
    """
    cycle_length = profile.cycle_length

    if profile.last_period_start is None:
        return CycleSnapshot(
            as_of=as_of,
            cycle_day=1,
            period_day=None,
            is_period=False,
            is_fertile=False,
            is_ovulation=False,
            days_until_next_period=cycle_length,
            next_period_date=as_of + timedelta(days=cycle_length),
            pregnancy_probability=estimate_probability(1)
        )

    days_since = max(0, days_between(profile.last_period_start, as_of))
    cycle_day = (days_since % cycle_length) + 1
    is_period = cycle_day <= profile.period_length

    raw_days_until = cycle_length - days_since
    if raw_days_until % cycle_length == 0:
        # Period starts today; count to the last day of this cycle
        days_until_next_period = cycle_length - 1
    elif raw_days_until > 0:
        days_until_next_period = raw_days_until
    else:
        # Later cycles: remainder truncated toward zero
        days_until_next_period = cycle_length + int(math.fmod(raw_days_until, cycle_length))

    return CycleSnapshot(
        as_of=as_of,
        cycle_day=cycle_day,
        period_day=cycle_day if is_period else None,
        is_period=is_period,
        is_fertile=FERTILE_WINDOW_START <= cycle_day <= FERTILE_WINDOW_END,
        is_ovulation=cycle_day == OVULATION_DAY,
        days_until_next_period=days_until_next_period,
        next_period_date=as_of + timedelta(days=days_until_next_period),
        pregnancy_probability=estimate_probability(cycle_day)
    )

def build_calendar(
    profile: UserCycleProfile,
    start: date,
    end: date,
    entries: Iterable[CycleLogEntry] = (),
    today: Optional[date] = None
) -> List[CalendarDay]:
    """
    Build calendar statuses for every date in ``start``..``end`` inclusive.

    Dates before the last period start (or every date, if it is unset) have
    no known cycle day and carry no flags. Period days after ``today`` are
    marked as predicted.

    Args:
        profile: Validated cycle profile
        start: First calendar date
        end: Last calendar date
        entries: Log entries to attach to their dates
        today: Reference date for predictions, defaults to ``end``

    Returns:
        List of CalendarDay, one per date

    Raises:
        ValueError: If the range is reversed or longer than a year
    """
    if end < start:
        raise ValueError("Calendar end date must not be before start date")
    if days_between(start, end) + 1 > MAX_CALENDAR_DAYS:
        raise ValueError(f"Calendar range cannot exceed {MAX_CALENDAR_DAYS} days")

    reference = today or end
    entries_by_date: Dict[date, List[str]] = {}
    for entry in entries:
        entries_by_date.setdefault(entry.date, []).append(entry.entry_id)

    calendar = []
    for day in iter_dates(start, end):
        entry_ids = entries_by_date.get(day, [])
        if profile.last_period_start is None or day < profile.last_period_start:
            calendar.append(CalendarDay(date=day, entry_ids=entry_ids))
            continue

        snapshot = compute_snapshot(profile, day)
        calendar.append(CalendarDay(
            date=day,
            cycle_day=snapshot.cycle_day,
            period_day=snapshot.period_day,
            is_period=snapshot.is_period,
            is_predicted_period=snapshot.is_period and day > reference,
            is_fertile=snapshot.is_fertile,
            is_ovulation=snapshot.is_ovulation,
            entry_ids=entry_ids
        ))

    return calendar

def get_phase_message(
    days_until_period: int,
    is_period: bool,
    period_day: Optional[int] = None,
    as_of: Optional[date] = None
) -> str:
    """
    Pick the supportive message for the home screen.

    When no phase-specific message applies, one of the general messages is
    chosen from the date so that the same day always shows the same text.

    Example:
        >>> get_phase_message(2, False)
        'Your period may arrive soon. Stock up on comfort items! 🧸'
    """
    if is_period and period_day:
        if period_day <= 2:
            return PERIOD_MESSAGES["early"]
        if period_day <= 4:
            return PERIOD_MESSAGES["middle"]
        return PERIOD_MESSAGES["late"]

    if 0 < days_until_period <= 3:
        return PRE_PERIOD_MESSAGE
    if 3 < days_until_period <= 7:
        return PMS_MESSAGE
    if 14 < days_until_period <= 18:
        return OVULATION_MESSAGE

    index = as_of.toordinal() % len(SUPPORTIVE_MESSAGES) if as_of else 0
    return SUPPORTIVE_MESSAGES[index]
