"""
Middleware functions for request processing.
"""
from functools import wraps
from typing import Any, Callable, Dict

from pydantic import ValidationError

from src.services.exceptions import (
    AuthorizationError,
    EntryNotFoundError,
    ProfileNotFoundError,
    ProfileValidationError
)
from src.utils.auth import get_caller_id
from src.utils.logging import logger, log_exception
from src.utils.responses import error_response

def require_auth(f: Callable) -> Callable:
    """
    Decorator that resolves the caller and passes it as ``user_id``.

    Requests without an authorizer identity get a 401 response and never
    reach the handler.

    Args:
        f: Handler function taking ``(event, context, user_id)``

    Returns:
        Wrapped handler function taking ``(event, context)``
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], context: Any, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            user_id = get_caller_id(event)
        except AuthorizationError as e:
            return error_response(str(e), 401)

        logger.append_keys(user_id=user_id)
        return f(event, context, user_id, *args, **kwargs)

    return wrapped

def handle_service_errors(f: Callable) -> Callable:
    """
    Decorator mapping service exceptions to API Gateway responses.

    Validation problems become 400, missing records 404, and anything
    unexpected is logged and returned as a generic 500.
    """
    @wraps(f)
    def wrapped(*args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            return f(*args, **kwargs)
        except ValidationError as e:
            logger.info("Rejected invalid request", extra={"errors": e.errors(include_url=False)})
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            message = f"{field}: {first['msg']}" if field else first["msg"]
            return error_response(message, 400)
        except (ProfileValidationError, ValueError) as e:
            return error_response(str(e), 400)
        except (ProfileNotFoundError, EntryNotFoundError) as e:
            return error_response(str(e), 404)
        except Exception:
            log_exception(logger, "Unhandled error processing request")
            return error_response("Server error", 500)

    return wrapped
