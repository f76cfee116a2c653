"""
API Gateway proxy response builders.
"""
import json
from typing import Any, Dict

HEADERS = {"Content-Type": "application/json"}

def success_response(data: Any, status_code: int = 200) -> Dict[str, Any]:
    """Build a ``{"success": true, "data": ...}`` response."""
    return {
        "statusCode": status_code,
        "headers": HEADERS,
        "body": json.dumps({"success": True, "data": data}, default=str),
        "isBase64Encoded": False
    }

def error_response(message: str, status_code: int) -> Dict[str, Any]:
    """Build a ``{"success": false, "message": ...}`` response."""
    return {
        "statusCode": status_code,
        "headers": HEADERS,
        "body": json.dumps({"success": False, "message": message}),
        "isBase64Encoded": False
    }
