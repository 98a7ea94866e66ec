"""Structured logging for callable operations.

Every log line is JSON (console-rendered in debug mode) and carries the
request context bound by ``bind_call_context``: the callable operation name,
a per-call id and, once the bearer token has been verified, the caller uid.
"""

import logging
import uuid
from typing import Optional

import structlog
from structlog import contextvars as structlog_contextvars


def setup_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :param debug: Render human-readable console output instead of JSON
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog_contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_call_context(operation: str, call_id: Optional[str] = None) -> str:
    """Start a fresh log context for one callable invocation.

    :returns: The call id bound to every log line of this invocation
    """
    call_id = call_id or uuid.uuid4().hex
    structlog_contextvars.clear_contextvars()
    structlog_contextvars.bind_contextvars(operation=operation, call_id=call_id)
    return call_id


def bind_caller(uid: str) -> None:
    """Attach the verified caller uid to the current log context."""
    structlog_contextvars.bind_contextvars(uid=uid)
