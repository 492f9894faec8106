"""Match Policy - Tunable Decision Constants

- TOKEN_SIMILARITY_THRESHOLD: 서술 토큰 근사 일치 최소 점수 (90)
- MAX_FUZZY_CANDIDATES: 후보가 이 개수 이상이면 판정하지 않음 (10)
"""

from dataclasses import dataclass

from catalog_matcher.core.exceptions import InvalidPolicyException
from catalog_matcher.utils.text.matching.token_match import DEFAULT_TOKEN_SIMILARITY_THRESHOLD


TOKEN_SIMILARITY_THRESHOLD = DEFAULT_TOKEN_SIMILARITY_THRESHOLD
MAX_FUZZY_CANDIDATES = 10


@dataclass(frozen=True)
class MatchPolicy:
    """매칭 정책 설정"""

    token_similarity_threshold: int = TOKEN_SIMILARITY_THRESHOLD
    max_fuzzy_candidates: int = MAX_FUZZY_CANDIDATES

    def __post_init__(self):
        """설정 검증"""
        if not 0 <= self.token_similarity_threshold <= 100:
            raise InvalidPolicyException("token_similarity_threshold", self.token_similarity_threshold)
        if self.max_fuzzy_candidates <= 0:
            raise InvalidPolicyException("max_fuzzy_candidates", self.max_fuzzy_candidates)


DEFAULT_POLICY = MatchPolicy()
