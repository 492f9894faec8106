"""Text normalization.

모든 비교(사전 항목, 요청 쿼리)는 같은 정규화 결과 위에서 이루어집니다.
정규화 결과는 항상 다음을 만족합니다:
- 소문자
- HTML 엔티티 없음
- "<숫자><단위>" 기술 스펙 토큰 없음 (64gb, 120hz, 5000mah ...)
- [a-z0-9] 이외 문자 없음
- 토큰 사이 공백 1칸, 앞뒤 공백 없음
"""

from __future__ import annotations

import html
import re
from functools import lru_cache

from catalog_matcher.utils.resource_loader import load_tech_units


DEFAULT_TECH_UNITS: tuple[str, ...] = ("gb", "tb", "hz", "mah", "fps", "mp")

# 경계는 정규화 이후에도 살아남는 문자 집합([a-z0-9]) 기준으로 판정한다.
# 그래야 normalize(normalize(x)) == normalize(x)가 유지된다.
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=1)
def _tech_unit_pattern() -> re.Pattern[str]:
    units = load_tech_units() or list(DEFAULT_TECH_UNITS)
    # 긴 단위를 먼저 시도 (mah vs ... 같은 접두 충돌 방지)
    alternation = "|".join(re.escape(u) for u in sorted(set(units), key=len, reverse=True))
    return re.compile(rf"(?<![a-z0-9])[0-9]+(?:{alternation})(?![a-z0-9])", re.IGNORECASE)


def decode_entities(text: str) -> str:
    """HTML/XML 문자 엔티티 디코딩 (&amp; -> &, &#39; -> ')"""
    return html.unescape(text)


def strip_tech_units(text: str) -> str:
    """
    숫자+기술 단위 토큰 제거

    예시:
    - "iphone 13 128gb" -> "iphone 13  "
    - "galaxy a53 5000mah 120hz" -> "galaxy a53    "
    """
    return _tech_unit_pattern().sub(" ", text)


def strip_symbols(text: str) -> str:
    """소문자/숫자/공백 이외 문자를 공백으로 치환"""
    return _NON_ALNUM.sub(" ", text)


def collapse_whitespace(text: str) -> str:
    """연속 공백을 1칸으로 줄이고 앞뒤 공백 제거"""
    return _WHITESPACE.sub(" ", text).strip()


def normalize(text: str) -> str:
    """
    비교용 정규화 텍스트 생성

    예시:
    - "Apple iPhone 13 Pro 128GB Unlocked" -> "apple iphone 13 pro unlocked"
    - "Galaxy S21 Ultra &amp; Case" -> "galaxy s21 ultra case"

    Args:
        text: 원본 텍스트 (빈 문자열 허용)

    Returns:
        정규화된 텍스트
    """
    if not text:
        return ""

    cleaned = decode_entities(text)
    cleaned = cleaned.lower()
    cleaned = strip_tech_units(cleaned)
    cleaned = strip_symbols(cleaned)
    return collapse_whitespace(cleaned)
