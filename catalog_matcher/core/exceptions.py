"""커스텀 예외 정의 (Structured Exception Hierarchy)

매칭 코어(정규화 → 후보 필터 → 판정)는 예외를 던지지 않습니다.
예외는 사전 적재(ingestion)와 설정 검증 단계에서만 발생합니다.
"""
from typing import Any, Optional


class CatalogMatcherException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 사전 적재 관련 예외
class DictionaryException(CatalogMatcherException):
    """기준 사전 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "DICTIONARY_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DICTIONARY_ERROR", details)


class DictionaryNotFoundException(DictionaryException):
    """사전 파일을 찾을 수 없을 때"""
    def __init__(self, path: str, details: Optional[dict[str, Any]] = None):
        message = f"Dictionary file not found: {path}"
        super().__init__(message, "DICTIONARY_NOT_FOUND", details or {"path": path})


class DictionaryFormatException(DictionaryException):
    """CSV 디코딩/파싱 오류"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to parse dictionary {path}: {reason}"
        super().__init__(message, "DICTIONARY_FORMAT_ERROR",
                        details or {"path": path, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(CatalogMatcherException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidPolicyException(ValidationException):
    """매칭 정책 값이 허용 범위를 벗어남"""
    def __init__(self, field: str, value: Any, details: Optional[dict[str, Any]] = None):
        super().__init__(field, f"out of range (value: {value})", details)
