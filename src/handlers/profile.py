"""
Lambda handler for reading and updating cycle profile settings.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.profile import UserCycleProfile, ProfileSettingsUpdate
from src.services.profile import apply_settings_update
from src.services.storage import ProfileRepository
from src.utils.clients import get_profiles
from src.utils.logging import logger
from src.utils.middleware import require_auth, handle_service_errors
from src.utils.params import json_body
from src.utils.responses import success_response

tracer = Tracer(service="cycle_tracker")

def update_settings(
    user_id: str,
    body: Dict[str, Any],
    profiles: ProfileRepository
) -> UserCycleProfile:
    """
    Apply a settings update, creating a default profile on first use.

    Raises:
        ProfileValidationError: If the resulting cycle settings are invalid
        pydantic.ValidationError: If the body has fields of the wrong type
    """
    update = ProfileSettingsUpdate(**body)
    current = profiles.get(user_id) or UserCycleProfile(user_id=user_id)
    return profiles.save(apply_settings_update(current, update))

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    GET/PUT /users/settings

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Caller resolved by the authorizer

    Returns:
        API Gateway Lambda proxy response with the stored settings
    """
    profiles = get_profiles()
    method = event.get("httpMethod", "GET").upper()

    if method == "PUT":
        profile = update_settings(user_id, json_body(event), profiles)
    else:
        profile = profiles.get(user_id) or UserCycleProfile(user_id=user_id)

    return success_response(profile.model_dump(mode="json"))
