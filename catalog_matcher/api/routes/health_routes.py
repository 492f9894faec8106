"""헬스 체크 엔드포인트"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from catalog_matcher import __version__
from catalog_matcher.core.config import settings
from catalog_matcher.engine import ProductMatcher
from catalog_matcher.schemas.extract_schema import HealthResponse

from .dependencies import get_optional_matcher

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(matcher: Optional[ProductMatcher] = Depends(get_optional_matcher)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 사전 적재 여부/크기
    """
    size = len(matcher.dictionary) if matcher is not None else 0

    return HealthResponse(
        status="ok" if matcher is not None else "degraded",
        dictionary_size=size,
        version=__version__,
        timestamp=datetime.now(),
    )


@router.get("/")
def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs",
    }
