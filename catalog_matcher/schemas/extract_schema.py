"""Pydantic 스키마 정의"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ExtractionRequest(BaseModel):
    """추출 요청 - 원문 텍스트 한 건 (누락/null이면 빈 문자열, 길이 제한 없음)"""
    raw_text: Optional[str] = Field("", description="매핑할 원문 텍스트 (예: 마켓 상품 제목)")

    @field_validator("raw_text")
    @classmethod
    def null_as_empty(cls, v: Optional[str]) -> str:
        """null은 빈 문자열로 취급"""
        return "" if v is None else v


class ExtractionResponse(BaseModel):
    """추출 응답"""
    product: Optional[str] = Field(None, description="매칭된 상품명 (matched_fuzzy_max일 때만)")
    brand: Optional[str] = Field(None, description="매칭된 브랜드")
    category: Optional[str] = Field(None, description="매칭된 카테고리")
    status: str = Field(..., description="no_match | matched_fuzzy_max | unmatched_too_many_candidates")
    time_taken: str = Field(..., description="매칭 소요 시간 (예: '0.1234 ms')")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str = Field(..., description="ok | degraded")
    dictionary_size: int = Field(..., ge=0, description="적재된 사전 항목 수")
    version: str = Field(..., description="서비스 버전")
    timestamp: datetime = Field(..., description="응답 시각")
