"""Profile feature module."""

from .schemas import ProfileResponse
from .service import ProfileService
from .router import router as profile_router

__all__ = ["ProfileResponse", "ProfileService", "profile_router"]
