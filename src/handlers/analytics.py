"""
Lambda handlers for cycle analytics, fertility and insights.
"""
from typing import Any, Dict
from datetime import date, timedelta

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.profile import UserCycleProfile
from src.services.analytics import build_analytics, build_fertility_report
from src.services.cycle import build_calendar, compute_snapshot, get_phase_message
from src.services.exceptions import ProfileNotFoundError
from src.services.storage import ProfileRepository, CycleLogRepository
from src.services.constants import ANALYTICS_ENTRY_LIMIT, FERTILITY_ENTRY_LIMIT
from src.utils.clients import get_profiles, get_entries, get_insight_generator
from src.utils.logging import logger
from src.utils.middleware import require_auth, handle_service_errors
from src.utils.params import parse_date_param, utc_today
from src.utils.responses import success_response

tracer = Tracer(service="cycle_tracker")

def load_profile(profiles: ProfileRepository, user_id: str) -> UserCycleProfile:
    """
    Load a profile or fail with ProfileNotFoundError.
    """
    profile = profiles.get(user_id)
    if profile is None:
        raise ProfileNotFoundError("Cycle profile not found")
    return profile

def get_analytics(
    user_id: str,
    as_of: date,
    profiles: ProfileRepository,
    entries: CycleLogRepository
) -> Dict[str, Any]:
    """Combined fertility and insight counts for the last 90 entries."""
    profile = load_profile(profiles, user_id)
    recent = entries.list(user_id, limit=ANALYTICS_ENTRY_LIMIT)
    return build_analytics(profile, recent, as_of)

def get_snapshot(user_id: str, as_of: date, profiles: ProfileRepository) -> Dict[str, Any]:
    """Cycle snapshot plus the home screen message."""
    profile = load_profile(profiles, user_id)
    snapshot = compute_snapshot(profile, as_of)
    data = snapshot.model_dump(mode="json")
    data["cycle_length"] = profile.cycle_length
    data["message"] = get_phase_message(
        snapshot.days_until_next_period,
        snapshot.is_period,
        snapshot.period_day,
        as_of
    )
    return data

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    GET /analytics

    Args:
        event: API Gateway Lambda proxy event, optional ``date`` query parameter
        context: Lambda context
        user_id: Caller resolved by the authorizer

    Returns:
        API Gateway Lambda proxy response
    """
    as_of = parse_date_param(event, "date", default=utc_today())
    return success_response(get_analytics(user_id, as_of, get_profiles(), get_entries()))

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def fertility_handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """GET /analytics/fertility"""
    as_of = parse_date_param(event, "date", default=utc_today())
    profile = load_profile(get_profiles(), user_id)
    report = build_fertility_report(profile, as_of)
    report["recent_entries"] = len(get_entries().list(user_id, limit=FERTILITY_ENTRY_LIMIT))
    return success_response(report)

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def insights_handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    GET /analytics/insights

    The insight generator never raises; when the text-generation service
    fails the response still carries fallback insights.
    """
    profile = load_profile(get_profiles(), user_id)
    recent = get_entries().list(user_id, limit=ANALYTICS_ENTRY_LIMIT)
    insights = get_insight_generator().generate(profile, recent)
    return success_response([insight.model_dump(mode="json") for insight in insights])

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def snapshot_handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """GET /cycle/today"""
    as_of = parse_date_param(event, "date", default=utc_today())
    return success_response(get_snapshot(user_id, as_of, get_profiles()))

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def calendar_handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    GET /cycle/calendar?start=YYYY-MM-DD&end=YYYY-MM-DD

    Defaults to the 30 days starting today.
    """
    today = utc_today()
    start = parse_date_param(event, "start", default=today)
    end = parse_date_param(event, "end", default=start + timedelta(days=29))

    profile = load_profile(get_profiles(), user_id)
    entries = [e for e in get_entries().list(user_id) if start <= e.date <= end]
    days = build_calendar(profile, start, end, entries=entries, today=today)
    return success_response([day.model_dump(mode="json") for day in days])
