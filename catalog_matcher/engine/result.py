"""Match Result - Typed Matching Outcome

매칭 결과는 세 가지 중 하나입니다:
- NO_MATCH: 후보 없음 (페이로드 없음)
- MATCHED_FUZZY_MAX: 최고 유사도 후보 (product/brand/category)
- TOO_MANY_CANDIDATES: 후보가 너무 많아 판정 불가 (페이로드 없음)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .dictionary import DictionaryEntry


class MatchStatus(str, Enum):
    """매칭 상태 (값은 응답에 그대로 실리는 문자열)"""

    NO_MATCH = "no_match"
    MATCHED_FUZZY_MAX = "matched_fuzzy_max"
    TOO_MANY_CANDIDATES = "unmatched_too_many_candidates"


@dataclass(frozen=True)
class MatchResult:
    """매칭 결과 표준 포맷

    Attributes:
        status: 매칭 상태
        product: 선택된 항목의 원본 상품명 (MATCHED_FUZZY_MAX일 때만)
        brand: 선택된 항목의 브랜드
        category: 선택된 항목의 카테고리
    """

    status: MatchStatus
    product: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None

    @property
    def is_match(self) -> bool:
        return self.status is MatchStatus.MATCHED_FUZZY_MAX

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(status=MatchStatus.NO_MATCH)

    @classmethod
    def matched(cls, entry: "DictionaryEntry") -> "MatchResult":
        """선택된 사전 항목으로 결과 생성"""
        return cls(
            status=MatchStatus.MATCHED_FUZZY_MAX,
            product=entry.product,
            brand=entry.brand,
            category=entry.category,
        )

    @classmethod
    def too_many_candidates(cls) -> "MatchResult":
        return cls(status=MatchStatus.TOO_MANY_CANDIDATES)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
