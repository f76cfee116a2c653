"""
Shared utility functions for cycle-related services.

These utilities are used across multiple service modules to handle common
operations like day arithmetic, label counting and averaging.
"""
from typing import Dict, Iterable, Iterator, List, Optional
from datetime import date, timedelta

def days_between(start: date, end: date) -> int:
    """
    Number of whole days from ``start`` to ``end`` (negative if ``end`` is earlier).

    Both values are calendar dates in the same (UTC) frame, so there is no
    time-of-day component to truncate.

    Example:
        >>> days_between(date(2024, 1, 1), date(2024, 1, 15))
        14
    """
    return (end - start).days

def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

def rank_counts(labels: Iterable[str], limit: Optional[int] = None) -> Dict[str, int]:
    """
    Count labels and order them by descending count.

    Ties keep first-seen order because dicts preserve insertion order and
    ``sorted`` is stable.

    Args:
        labels: Labels in the order they were encountered
        limit: Optional maximum number of labels to keep

    Returns:
        Ordered mapping of label to count

    Example:
        >>> rank_counts(["cramps", "bloating", "cramps"])
        {'cramps': 2, 'bloating': 1}
    """
    counts: Dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return dict(ranked)

def mean_or_default(values: List[float], default: float) -> float:
    """
    Arithmetic mean of ``values``, or ``default`` when empty.

    The mean is not rounded; presentation is left to the caller.

    Example:
        >>> mean_or_default([4, 5], default=0)
        4.5
    """
    if not values:
        return default
    return sum(values) / len(values)
