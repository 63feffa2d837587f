"""
Engine-wide logging setup.

Service modules create ``Logger(service=SERVICE_NAME)``; powertools reuses
the configuration of the first logger created for a service, which is the
one built here because every service imports this module first.
Tracebacks are flattened to one line so each log record stays a single JSON
document.
"""
import os
import sys
import json
import traceback
from typing import Iterable, Optional
from aws_lambda_powertools import Logger

SERVICE_NAME = "cycle_engine"

def format_exception(exc_info) -> Optional[str]:
    """
    Render exception info as a single line.

    Args:
        exc_info: ``True`` for the exception being handled, an exception
            instance, or a ``sys.exc_info()`` tuple

    Returns:
        Traceback lines joined with `` | ``, or None when there is no exception
    """
    if exc_info is True:
        exc_info = sys.exc_info()
    if isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)

    if not (isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[0] is not None):
        return None
    trace = ''.join(traceback.format_exception(*exc_info))
    return " | ".join(line.strip() for line in trace.splitlines() if line.strip())

class SingleLineLogger(Logger):
    """Powertools logger whose ``exception`` output fits on one line."""

    def exception(self, message, *args, **kwargs):
        extra = kwargs.pop('extra', {})
        extra['exception'] = format_exception(kwargs.pop('exc_info', True))
        kwargs['exc_info'] = False
        kwargs['extra'] = extra
        super().exception(message, *args, **kwargs)

logger = SingleLineLogger(
    service=SERVICE_NAME,
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    json_serializer=json.dumps,
    use_rfc3339=True
)

def log_rejected_record(logger, record_kind: str, errors: Iterable[str]):
    """Log the rules a candidate record violated, at debug level."""
    errors = list(errors)
    logger.debug("Rejected candidate record", extra={
        "record_kind": record_kind,
        "error_count": len(errors),
        "errors": errors
    })
