"""API routes package."""

from .dependencies import get_matcher
from .extract_routes import router as extract_router
from .health_routes import router as health_router

__all__ = ["health_router", "extract_router", "get_matcher"]
