"""
Caller identity resolution for API Gateway events.

Authentication itself happens upstream in an API Gateway authorizer; by the
time a handler runs, the verified identity is in the request context.
"""
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger
from src.services.exceptions import AuthorizationError

logger = Logger()

def _claims_sub(claims: Any) -> Optional[str]:
    if isinstance(claims, dict) and claims.get("sub"):
        return str(claims["sub"])
    return None

def get_caller_id(event: Dict[str, Any]) -> str:
    """
    Extract the authenticated user ID from an API Gateway proxy event.

    Supports Cognito user pool authorizers (``claims.sub``), HTTP API JWT
    authorizers (``jwt.claims.sub``) and Lambda authorizers
    (``principalId``), in that order.

    Args:
        event: API Gateway Lambda proxy event

    Returns:
        The caller's user ID

    Raises:
        AuthorizationError: If no identity is present
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

    user_id = (
        _claims_sub(authorizer.get("claims"))
        or _claims_sub((authorizer.get("jwt") or {}).get("claims"))
        or (str(authorizer["principalId"]) if authorizer.get("principalId") else None)
    )
    if not user_id:
        logger.warning("Request without caller identity", extra={
            "authorizer_keys": sorted(authorizer.keys()),
            "path": event.get("path") or event.get("rawPath")
        })
        raise AuthorizationError("Could not determine user ID")
    return user_id
