"""API router package for page composition."""

from .landing import api_create_landing_router
from .stats import api_create_stats_router

__all__ = ["api_create_landing_router", "api_create_stats_router"]
