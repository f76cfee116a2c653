"""
Enumerations for cycle phases and logged health attributes.
"""
from enum import Enum

class CyclePhase(str, Enum):
    """
    Menstrual cycle phases used to label log entries.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"

class FlowLevel(str, Enum):
    """Menstrual flow intensity."""
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

class Mood(str, Enum):
    """Moods a user can log for a day."""
    HAPPY = "happy"
    SAD = "sad"
    ANXIOUS = "anxious"
    ENERGETIC = "energetic"
    TIRED = "tired"
    IRRITABLE = "irritable"

class SleepQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    TERRIBLE = "terrible"

class ExerciseLevel(str, Enum):
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"
    YOGA = "yoga"
