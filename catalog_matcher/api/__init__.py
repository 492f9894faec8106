"""API 엔드포인트 패키지 - export only."""

from .routes import extract_router, get_matcher, health_router

__all__ = ["health_router", "extract_router", "get_matcher"]
