"""
Helpers for reading API Gateway request parameters.
"""
import json
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

def utc_today() -> date:
    """Today's date in UTC, the frame all cycle arithmetic uses."""
    return datetime.now(timezone.utc).date()

def query_params(event: Dict[str, Any]) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}

def path_param(event: Dict[str, Any], name: str) -> Optional[str]:
    return (event.get("pathParameters") or {}).get(name)

def parse_date_param(event: Dict[str, Any], name: str, default: Optional[date] = None) -> Optional[date]:
    """
    Read a ``YYYY-MM-DD`` query parameter.

    Raises:
        ValueError: If the parameter is present but not a valid date
    """
    value = query_params(event).get(name)
    if not value:
        return default
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{name} must be a date in YYYY-MM-DD format")

def json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the request body.

    Raises:
        ValueError: If the body is not a JSON object
    """
    body = event.get("body") or "{}"
    if isinstance(body, str):
        body = json.loads(body)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body

def parse_limit_param(event: Dict[str, Any], name: str = "limit") -> Optional[int]:
    """
    Read an optional positive integer query parameter.

    Raises:
        ValueError: If the parameter is present but not an integer of at least 1
    """
    value = query_params(event).get(name)
    if not value:
        return None
    try:
        limit = int(value)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer")
    if limit < 1:
        raise ValueError(f"{name} must be a positive integer")
    return limit
