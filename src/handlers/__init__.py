"""
Lambda handlers package for AWS Lambda functions.
"""
from .analytics import (
    handler as analytics_handler,
    fertility_handler,
    insights_handler,
    snapshot_handler,
    calendar_handler
)
from .entries import handler as entries_handler
from .profile import handler as profile_handler

__all__ = [
    "analytics_handler",
    "fertility_handler",
    "insights_handler",
    "snapshot_handler",
    "calendar_handler",
    "entries_handler",
    "profile_handler"
]
