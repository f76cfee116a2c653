"""
Statistics service that condenses log entries into an analysis summary.

The summary is the only data sent to the insight generation service, so its
shape is kept small and stable. Everything here is a pure transform over the
entries the caller supplies; slicing to a recent window is the caller's job.

Typical usage:
    entries = entries_repo.list(user_id, limit=90)  # newest first
    summary = summarize(entries, recent=RECENT_ENTRY_WINDOW)
"""
from typing import Any, List, Mapping, Optional, Sequence, Union
from aws_lambda_powertools import Logger

from src.models.entry import CycleLogEntry
from src.models.insight import CycleAnalysisSummary, Trend
from src.services.utils import rank_counts, mean_or_default
from src.services.constants import (
    COMMON_SYMPTOM_LIMIT,
    TREND_SAMPLE_SIZE,
    TREND_THRESHOLD,
    DEFAULT_ENERGY_LEVEL,
    DEFAULT_PAIN_LEVEL
)

logger = Logger()

EntryLike = Union[CycleLogEntry, Mapping[str, Any]]

def _value(entry: EntryLike, field: str) -> Any:
    """Read a field from an entry model or a plain mapping."""
    if isinstance(entry, Mapping):
        return entry.get(field)
    return getattr(entry, field, None)

def _label(value: Any) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", value)

def metric_values(entries: Sequence[EntryLike], field: str) -> List[float]:
    """Values of a numeric field in entry order, skipping entries without it."""
    return [
        value for value in (_value(entry, field) for entry in entries)
        if value is not None
    ]

def analyze_trend(values: Sequence[float]) -> Trend:
    """
    Compare the first and last of the last three values.

    Args:
        values: Metric values in the order supplied

    Returns:
        IMPROVING if the last value is more than one point above the first,
        DECLINING if more than one point below, STABLE otherwise or when
        fewer than two values are available

    Example:
        >>> analyze_trend([3, 3, 3, 6])
        <Trend.IMPROVING: 'improving'>
    """
    sample = list(values)[-TREND_SAMPLE_SIZE:]
    if len(sample) < 2:
        return Trend.STABLE

    first, last = sample[0], sample[-1]
    if last > first + TREND_THRESHOLD:
        return Trend.IMPROVING
    if last < first - TREND_THRESHOLD:
        return Trend.DECLINING
    return Trend.STABLE

def summarize(
    entries: Sequence[EntryLike],
    recent: Optional[int] = None
) -> CycleAnalysisSummary:
    """
    Summarise log entries for insight generation.

    Symptom and mood counts cover every supplied entry. Energy, pain, sleep
    and trends cover the first ``recent`` entries when a window is given
    (the newest ones when entries come from storage), else every entry.
    Missing metric values are left out of both the sum and the count.

    Args:
        entries: Log entries (models or mappings with the same field names)
        recent: Optional number of leading entries treated as recent

    Returns:
        CycleAnalysisSummary, with neutral defaults for an empty input
    """
    if not entries:
        return CycleAnalysisSummary()

    symptoms = [
        symptom
        for entry in entries
        for symptom in (_value(entry, "symptoms") or [])
    ]
    moods = [
        _label(_value(entry, "mood")) for entry in entries
        if _value(entry, "mood") is not None
    ]

    recent_entries = list(entries)
    if recent is not None:
        recent_entries = recent_entries[:recent]
    sleep = [
        _label(_value(entry, "sleep_quality")) for entry in recent_entries
        if _value(entry, "sleep_quality") is not None
    ]
    energy = metric_values(recent_entries, "energy_level")
    pain = metric_values(recent_entries, "pain_intensity")

    summary = CycleAnalysisSummary(
        total_entries=len(entries),
        common_symptoms=rank_counts(symptoms, limit=COMMON_SYMPTOM_LIMIT),
        mood_patterns=rank_counts(moods),
        sleep_patterns=rank_counts(sleep),
        recent_energy=mean_or_default(energy, DEFAULT_ENERGY_LEVEL),
        recent_pain=mean_or_default(pain, DEFAULT_PAIN_LEVEL),
        energy_trend=analyze_trend(energy),
        pain_trend=analyze_trend(pain)
    )

    logger.debug("Summarized log entries", extra={
        "total_entries": summary.total_entries,
        "recent_entries": len(recent_entries),
        "energy_samples": len(energy),
        "pain_samples": len(pain)
    })
    return summary
