"""Garden League API - authenticated callable endpoints for leagues, profiles and gardens."""

__version__ = "0.1.0"
