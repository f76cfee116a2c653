"""
Pytest configuration and shared fixtures.
"""
import json
import pytest
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import List, Optional
from unittest.mock import Mock

from src.models.entry import CycleLogEntry
from src.models.phase import CyclePhase
from src.models.profile import UserCycleProfile

@dataclass
class FakeLambdaContext:
    """Minimal Lambda context accepted by Powertools decorators."""
    function_name: str = "cycle-tracker-test"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:cycle-tracker-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()

@pytest.fixture
def sample_profile() -> UserCycleProfile:
    """A 28-day cycle profile whose last period started on 2024-01-01."""
    return UserCycleProfile(
        user_id="123",
        name="Test User",
        cycle_length=28,
        period_length=5,
        last_period_start=date(2024, 1, 1)
    )

@pytest.fixture
def unset_profile() -> UserCycleProfile:
    """A profile for a user who has not recorded a period yet."""
    return UserCycleProfile(user_id="123")

@pytest.fixture
def sample_entries() -> List[CycleLogEntry]:
    """Entries newest first, as the repository returns them."""
    return [
        CycleLogEntry(
            entry_id="e4",
            user_id="123",
            date=date(2024, 1, 4),
            phase=CyclePhase.MENSTRUAL,
            flow="light",
            mood="tired",
            symptoms=["cramps", "fatigue"],
            pain_intensity=2,
            energy_level=6,
            sleep_quality="good"
        ),
        CycleLogEntry(
            entry_id="e3",
            user_id="123",
            date=date(2024, 1, 3),
            phase=CyclePhase.MENSTRUAL,
            flow="medium",
            mood="irritable",
            symptoms=["bloating", "cramps"],
            pain_intensity=5,
            energy_level=4,
            sleep_quality="fair"
        ),
        CycleLogEntry(
            entry_id="e2",
            user_id="123",
            date=date(2024, 1, 2),
            phase=CyclePhase.MENSTRUAL,
            flow="heavy",
            mood="tired",
            symptoms=["cramps", "headache"],
            pain_intensity=7,
            sleep_quality="poor"
        ),
        CycleLogEntry(
            entry_id="e1",
            user_id="123",
            date=date(2024, 1, 1),
            phase=CyclePhase.MENSTRUAL,
            flow="heavy",
            symptoms=["headache"],
            energy_level=3,
            created_at=datetime(2024, 1, 1, 8, tzinfo=timezone.utc)
        )
    ]

@pytest.fixture
def mock_dynamo() -> Mock:
    """DynamoDB client double with an empty table."""
    dynamo = Mock()
    dynamo.get_item.return_value = None
    dynamo.query_items.return_value = []
    return dynamo

@pytest.fixture
def api_event():
    """Factory for authorized API Gateway proxy events."""
    def build(method="GET", body=None, query=None, path=None, user_id="123"):
        event = {
            "httpMethod": method,
            "path": "/test",
            "queryStringParameters": query,
            "pathParameters": path,
            "body": json.dumps(body) if body is not None else None,
            "requestContext": {"authorizer": {}}
        }
        if user_id:
            event["requestContext"]["authorizer"]["claims"] = {"sub": user_id}
        return event
    return build
