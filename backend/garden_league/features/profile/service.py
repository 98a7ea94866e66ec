"""Profile service.

Profiles have no backing documents: the response echoes the caller identity
and reports every counter as zero.
"""

import structlog

from garden_league.core.decorators import service_error_handler
from garden_league.features.auth.schemas import CallerIdentity
from .schemas import ProfileResponse

logger = structlog.get_logger(__name__)

DEFAULT_DISPLAY_NAME = "User"


class ProfileService:
    @service_error_handler("ProfileService")
    async def get_my_profile(self, caller: CallerIdentity) -> ProfileResponse:
        """Build the caller's profile from identity claims."""
        logger.info("Getting profile", uid=caller.uid)
        return ProfileResponse(
            uid=caller.uid,
            display_name=caller.display_name or DEFAULT_DISPLAY_NAME,
            email=caller.email or "",
        )
