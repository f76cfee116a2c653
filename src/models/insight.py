"""
Models for the log analysis summary and generated insights.
"""
import math
from enum import Enum
from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator

class Trend(str, Enum):
    """Direction of a tracked metric over recent entries."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"

class InsightType(str, Enum):
    PATTERN = "pattern"
    PREDICTION = "prediction"
    TIP = "tip"
    WARNING = "warning"
    CELEBRATION = "celebration"

class InsightCategory(str, Enum):
    MOOD = "mood"
    SYMPTOMS = "symptoms"
    ENERGY = "energy"
    HEALTH = "health"
    CYCLE = "cycle"
    WELLNESS = "wellness"

class CycleAnalysisSummary(BaseModel):
    """
    Aggregated view of a user's log entries.

    The count mappings are ordered by descending count; equal counts keep
    the order in which the label was first seen.
    """
    total_entries: int = 0
    common_symptoms: Dict[str, int] = Field(default_factory=dict)
    mood_patterns: Dict[str, int] = Field(default_factory=dict)
    sleep_patterns: Dict[str, int] = Field(default_factory=dict)
    recent_energy: float = 5
    recent_pain: float = 0
    energy_trend: Trend = Trend.STABLE
    pain_trend: Trend = Trend.STABLE

class Insight(BaseModel):
    """
    A single insight returned by the text-generation service.

    Values outside the known vocabularies are clamped to safe defaults
    rather than rejected, since the upstream output is free-form.
    """
    title: str = "Health Insight"
    message: str = "Take care of yourself today."
    confidence: int = 75
    type: InsightType = InsightType.TIP
    category: InsightCategory = InsightCategory.WELLNESS

    @field_validator("title", "message", mode="before")
    @classmethod
    def default_blank_text(cls, value: Any, info) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("confidence", mode="before")
    @classmethod
    def clamp_confidence(cls, value: Any) -> int:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 75
        if not math.isfinite(number):
            return 75
        confidence = int(round(number))
        if confidence == 0 and not value:
            # falsy upstream values fall back like a missing field
            return 75
        return min(100, max(0, confidence))

    @field_validator("type", mode="before")
    @classmethod
    def clamp_type(cls, value: Any) -> InsightType:
        try:
            return InsightType(value)
        except (TypeError, ValueError):
            return InsightType.TIP

    @field_validator("category", mode="before")
    @classmethod
    def clamp_category(cls, value: Any) -> InsightCategory:
        try:
            return InsightCategory(value)
        except (TypeError, ValueError):
            return InsightCategory.WELLNESS
