"""Shared Powertools logger for the cycle tracker functions."""
import os
import sys
import json
import traceback
from functools import partial
from aws_lambda_powertools import Logger

def format_exception(exc_info):
    """
    Render exception info as one line, frames joined by `` | ``.

    Accepts ``True`` (current exception), an exception instance or an
    ``exc_info`` tuple.
    """
    if exc_info is True:
        exc_info = sys.exc_info()
    elif isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

    if not (isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[0]):
        return None
    try:
        trace = ''.join(traceback.format_exception(*exc_info))
    except Exception as e:
        return f"Error formatting exception: {str(e)}"
    return trace.replace('\n', ' | ').strip()

class SingleLineLogger(Logger):
    """Logger that writes exception tracebacks as a single log attribute."""

    def exception(self, message, *args, **kwargs):
        exc_info = kwargs.pop('exc_info', True)
        extra = kwargs.pop('extra', {})
        extra['exception'] = format_exception(exc_info)
        kwargs['exc_info'] = False
        kwargs['extra'] = extra
        super().exception(message, *args, **kwargs)

logger = SingleLineLogger(
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'cycle_tracker'),
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=partial(json.dumps, default=str),
    use_rfc3339=True
)

logger.append_keys(
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME'),
    stage=os.environ.get('STAGE', 'dev')
)

def log_exception(logger, message, exc_info=None, **kwargs):
    """Log the current (or given) exception at error level on a single line."""
    exc_info = exc_info if exc_info else sys.exc_info()
    extra = kwargs.pop('extra', {})
    extra['exception'] = format_exception(exc_info)
    if isinstance(exc_info, tuple) and exc_info[0]:
        extra['error_type'] = exc_info[0].__name__
    logger.error(message, extra=extra, **kwargs)
