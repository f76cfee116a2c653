"""
Lambda handler for creating, reading, updating and deleting log entries.
"""
from typing import Any, Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.entry import CycleLogEntryCreate, CycleLogEntryUpdate
from src.utils.clients import get_entries
from src.utils.logging import logger
from src.utils.middleware import require_auth, handle_service_errors
from src.utils.params import json_body, parse_limit_param, path_param
from src.utils.responses import success_response, error_response

tracer = Tracer(service="cycle_tracker")

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
@handle_service_errors
def handler(event: Dict[str, Any], context: LambdaContext, user_id: str) -> Dict[str, Any]:
    """
    Route log entry requests.

    - GET /cycles                 list entries, newest first (optional ``limit``)
    - GET /cycles/{entry_id}      single entry
    - POST /cycles                create entry
    - PUT /cycles/{entry_id}      partial update
    - DELETE /cycles/{entry_id}   delete entry

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Caller resolved by the authorizer

    Returns:
        API Gateway Lambda proxy response
    """
    entries = get_entries()
    method = event.get("httpMethod", "GET").upper()
    entry_id = path_param(event, "entry_id")

    if method == "GET" and entry_id:
        return success_response(entries.get(user_id, entry_id).model_dump(mode="json"))

    if method == "GET":
        items = entries.list(user_id, limit=parse_limit_param(event))
        return success_response([item.model_dump(mode="json") for item in items])

    if method == "POST":
        payload = CycleLogEntryCreate(**json_body(event))
        entry = entries.create(user_id, payload)
        return success_response(entry.model_dump(mode="json"), status_code=201)

    if method == "PUT" and entry_id:
        update = CycleLogEntryUpdate(**json_body(event))
        return success_response(entries.update(user_id, entry_id, update).model_dump(mode="json"))

    if method == "DELETE" and entry_id:
        entries.delete(user_id, entry_id)
        return success_response({})

    return error_response(f"Unsupported route: {method}", 405)
