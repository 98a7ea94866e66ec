"""Rate limiting for callable routes.

Routes are decorated at import time, so the limiter is module-level;
``configure_limiter`` applies the settings of the application being built.
The limit string is read on every request.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import Settings, get_global_settings

# key_func determines the key for rate limiting (by default, uses client IP)
limiter = Limiter(key_func=get_remote_address)

_callable_limit_value: str | None = None


def _callable_rate_limit() -> str:
    if _callable_limit_value is None:
        return get_global_settings().callable_rate_limit
    return _callable_limit_value


def configure_limiter(settings: Settings) -> Limiter:
    """Enable or disable the limiter and set the callable route limit."""
    global _callable_limit_value
    _callable_limit_value = settings.callable_rate_limit
    limiter.enabled = settings.rate_limit_enabled
    limiter.reset()
    return limiter


# Shared limit for every callable route
callable_limit = limiter.limit(_callable_rate_limit)
