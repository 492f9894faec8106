"""FastAPI 앱 팩토리"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_matcher.api import extract_router, health_router
from catalog_matcher.core.config import settings
from catalog_matcher.core.logging import logger
from catalog_matcher.engine import MatchPolicy, ProductMatcher
from catalog_matcher.repositories import load_dictionary


def build_policy() -> MatchPolicy:
    """설정값으로 매칭 정책 생성"""
    return MatchPolicy(
        token_similarity_threshold=settings.token_similarity_threshold,
        max_fuzzy_candidates=settings.max_fuzzy_candidates,
    )


def build_matcher(dict_path: Optional[str] = None) -> ProductMatcher:
    """사전 로드 + 매처 생성 (기동 시 1회)"""
    dictionary = load_dictionary(dict_path or settings.dict_path)
    return ProductMatcher(dictionary, build_policy())


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """본문 파싱/검증 실패 -> 400"""
    logger.warning(f"[API] Invalid request body on {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(status_code=400, content={"detail": "Invalid JSON body"})


def create_app(matcher: Optional[ProductMatcher] = None) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        matcher: 미리 만든 매처 (테스트/임베딩용). None이면 기동 시 settings.dict_path에서 로드

    Returns:
        FastAPI 앱 인스턴스
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """애플리케이션 생명주기"""
        logger.info("Starting application...")
        if app.state.matcher is None:
            # 로드 실패 시 예외를 그대로 올려 기동을 중단
            app.state.matcher = build_matcher()
        logger.info(f"Application started (dictionary size: {len(app.state.matcher.dictionary)})")
        yield
        logger.info("Shutting down application...")

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.matcher = matcher

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(extract_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
