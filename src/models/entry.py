"""
Log entry model for daily cycle and wellness tracking.
"""
import datetime
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field

from src.models.phase import CyclePhase, FlowLevel, Mood, SleepQuality, ExerciseLevel

class CycleLogEntryUpdate(BaseModel):
    """
    Partial update for a log entry. Only fields that are set are applied.
    """
    date: Optional[datetime.date] = None
    phase: Optional[CyclePhase] = None
    flow: Optional[FlowLevel] = None
    mood: Optional[Mood] = None
    symptoms: Optional[List[str]] = None
    notes: Optional[str] = None
    pain_intensity: Optional[int] = Field(None, ge=0, le=10)
    energy_level: Optional[int] = Field(None, ge=1, le=10)
    sleep_quality: Optional[SleepQuality] = None
    temperature: Optional[float] = None  # basal body temperature, Fahrenheit
    water_intake: Optional[int] = Field(None, ge=0)  # glasses
    exercise: Optional[ExerciseLevel] = None
    medications: Optional[List[str]] = None
    supplements: Optional[List[str]] = None

class CycleLogEntryCreate(CycleLogEntryUpdate):
    """
    Payload for logging a new entry. Date and phase are required.

    The phase is whatever the client labels the day with; it is not
    re-derived from the profile's cycle day.
    """
    date: datetime.date
    phase: CyclePhase
    symptoms: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    supplements: List[str] = Field(default_factory=list)

class CycleLogEntry(CycleLogEntryCreate):
    """
    A stored daily log entry owned by a single user.
    """
    entry_id: str = Field(default_factory=lambda: uuid4().hex)
    user_id: str
    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )
