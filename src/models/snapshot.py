"""
Derived, non-persisted views computed from a profile for a given date.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

class CycleSnapshot(BaseModel):
    """
    Cycle position and phase flags for a profile as of a specific date.
    """
    as_of: date
    cycle_day: int = Field(..., ge=1)
    period_day: Optional[int] = None
    is_period: bool
    is_fertile: bool
    is_ovulation: bool
    days_until_next_period: int = Field(..., ge=0)
    next_period_date: date
    pregnancy_probability: int

class FertilityWindow(BaseModel):
    """
    Position of a cycle day relative to the fertile window.

    Negative ``days_until_*`` values mean the window or ovulation has already
    passed in the current cycle.
    """
    is_in_fertile_window: bool
    is_ovulation_day: bool
    days_until_fertile: int
    days_until_ovulation: int

class FertilityDay(BaseModel):
    """One day of the fertile window timeline."""
    day: int
    is_today: bool
    is_past: bool
    is_ovulation: bool
    probability: int

class CalendarDay(BaseModel):
    """
    Calendar status for a single date. ``cycle_day`` is None when the date
    falls before the last recorded period start or no start is recorded.
    """
    date: date
    cycle_day: Optional[int] = None
    period_day: Optional[int] = None
    is_period: bool = False
    is_predicted_period: bool = False
    is_fertile: bool = False
    is_ovulation: bool = False
    entry_ids: List[str] = Field(default_factory=list)
