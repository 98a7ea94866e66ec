"""
Domain exceptions shared by services and the callable boundary.

Every error carries the service and operation it came from plus a small
context dict, so one structured log line is enough to trace a failure.
The callable boundary decides what the caller sees:

- ``AuthenticationRequiredError`` -> UNAUTHENTICATED
- ``ValidationError`` -> INVALID_ARGUMENT
- anything else, ``StoreError`` included -> INTERNAL
"""

from typing import Any, Dict, Optional


class ServiceException(Exception):
    """Base class for errors raised by services and the store layer."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = dict(context or {})
        self.original_error = original_error

    @property
    def origin(self) -> Optional[str]:
        """``Service.operation`` when both are known."""
        if self.service and self.operation:
            return f"{self.service}.{self.operation}"
        return None

    def __str__(self) -> str:
        return f"[{self.origin}] {self.message}" if self.origin else self.message


class StoreError(ServiceException):
    """A document store read or commit failed.

    Transient and permanent failures are not told apart; nothing retries.
    """

    def __init__(self, message: str, path: Optional[str] = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        if path:
            self.context["path"] = path


class ValidationError(ServiceException):
    """Caller input was rejected."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        if field:
            self.context["field"] = field
        if value is not None:
            self.context["value"] = str(value)


class AuthenticationRequiredError(ServiceException):
    """The call carried no verifiable caller identity."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, service="Identity", operation="authenticate")


class InvalidPathError(StoreError, ValueError):
    """A document path could not be built from its segments.

    Path segments come from stored ids and caller uids, not from call input,
    so this is a store failure rather than a validation error.
    """
