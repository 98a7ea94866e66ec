"""
Error handling for service methods.

``service_error_handler`` gives every service operation the same failure
contract: the failure is logged once, with the operation's arguments, and
re-raised as a ``ServiceException`` subclass for the callable boundary to map.
"""

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, ParamSpec, Type, TypeVar

import structlog

from garden_league.core.exceptions import ServiceException, ValidationError

logger = structlog.get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

# Arguments never copied into the log context
_EXCLUDED_PARAMS = {"self", "store", "batch"}
_MAX_ARG_LENGTH = 100


def _argument_context(
    func: Callable[..., Any], args: tuple, kwargs: dict
) -> Dict[str, Any]:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    context: Dict[str, Any] = {}
    for name, value in bound.arguments.items():
        if name in _EXCLUDED_PARAMS:
            continue
        text = None if value is None else str(value)
        if text is not None and len(text) > _MAX_ARG_LENGTH:
            text = text[:_MAX_ARG_LENGTH] + "..."
        context[name] = text
    return context


def _log_failure(error: ServiceException, context: Dict[str, Any]) -> None:
    # Bad input is the caller's problem; everything else is ours
    level = logging.WARNING if isinstance(error, ValidationError) else logging.ERROR
    logger.log(
        level,
        "Service operation failed",
        error_type=error.__class__.__name__,
        error_message=error.message,
        error_context=error.context,
        **context,
    )


def service_error_handler(
    service_name: str,
    include_context: bool = True,
    default_error_type: Type[ServiceException] = ServiceException,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """
    Decorate an async service method with structured failure logging.

    ``ServiceException``s pass through unchanged, ``ValueError`` becomes
    ``ValidationError`` and anything else is wrapped in ``default_error_type``.
    Nothing is swallowed.

    :param service_name: Name of the service (e.g., "LeagueService")
    :param include_context: Whether to log the method arguments
    :param default_error_type: Exception type used to wrap unexpected errors

    :example:
        @service_error_handler("LeagueService")
        async def get_my_league(self, uid: str) -> MyLeagueResponse:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        operation_name = func.__name__

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            context: Dict[str, Any] = {
                "service": service_name,
                "operation": operation_name,
            }
            if include_context:
                context.update(_argument_context(func, args, kwargs))

            try:
                return await func(*args, **kwargs)
            except ServiceException as e:
                _log_failure(e, context)
                raise
            except ValueError as e:
                error: ServiceException = ValidationError(
                    str(e),
                    service=service_name,
                    operation=operation_name,
                    context=context,
                )
                _log_failure(error, context)
                raise error from e
            except Exception as e:
                error = default_error_type(
                    message=str(e),
                    service=service_name,
                    operation=operation_name,
                    context=context,
                    original_error=e,
                )
                _log_failure(error, context)
                raise error from e

        return wrapper

    return decorator
