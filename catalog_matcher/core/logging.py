"""로깅 설정

- 서비스 전역 로거 하나("catalog_matcher")를 쓰고, 모듈은 [ingest]/[match]/[API] 태그로 구분합니다.
- production에서는 DEBUG를 INFO로 올리고 호출 위치 없이 짧게 출력합니다.
"""
import logging
import sys

from catalog_matcher.core.config import settings


LOGGER_NAME = "catalog_matcher"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_FORMATS = {
    "production": "%(asctime)s - %(levelname)s - %(message)s",
    "default": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
}


def resolve_log_level(level: str, environment: str) -> int:
    """설정 문자열 -> logging 레벨 (production에서는 최소 INFO)"""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    if environment == "production":
        resolved = max(resolved, logging.INFO)
    return resolved


def build_formatter(environment: str) -> logging.Formatter:
    fmt = _FORMATS["production"] if environment == "production" else _FORMATS["default"]
    return logging.Formatter(fmt=fmt, datefmt=_DATE_FORMAT)


def setup_logging(level: str = settings.log_level, environment: str = settings.environment) -> logging.Logger:
    """서비스 로거 초기화 (여러 번 호출해도 stdout 핸들러는 하나)"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(level, environment))

    handler = next((h for h in logger.handlers if getattr(h, "name", None) == LOGGER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(LOGGER_NAME)
        logger.addHandler(handler)
    handler.setFormatter(build_formatter(environment))

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """로깅용 문자열 반환 (빈 값 표시 + 길이 제한)

    Args:
        value: 로깅할 문자열
        max_length: 최대 길이

    Returns:
        로그에 남길 문자열
    """
    if not value:
        return "[empty]"

    # 개행은 한 줄 로그를 깨뜨리므로 공백으로 치환
    result = " ".join(value.split())

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result
