"""FastAPI dependencies"""
from typing import Optional

from fastapi import HTTPException, Request

from catalog_matcher.engine import ProductMatcher


def get_optional_matcher(request: Request) -> Optional[ProductMatcher]:
    """app.state에 올려둔 매처 (기동 전이면 None)"""
    return getattr(request.app.state, "matcher", None)


def get_matcher(request: Request) -> ProductMatcher:
    """ProductMatcher 제공 - 사전이 아직 적재되지 않았으면 503"""
    matcher = get_optional_matcher(request)
    if matcher is None:
        raise HTTPException(status_code=503, detail="Dictionary not loaded")
    return matcher
