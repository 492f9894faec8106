"""Engine Layer - Matching Core

- Dictionary / DictionaryEntry: 불변 기준 사전
- narrow_candidates / filter_candidates: 토큰 기반 후보 소거
- decide: 후보 집합 -> 결과 판정
- ProductMatcher / match: 원문 -> MatchResult
- MatchPolicy: 임계값 설정
"""

from .candidates import FilterOutcome, filter_candidates, narrow_candidates
from .decision import decide, score_candidates, select_best
from .dictionary import Dictionary, DictionaryEntry
from .matcher import ProductMatcher, Query, match
from .policy import DEFAULT_POLICY, MAX_FUZZY_CANDIDATES, TOKEN_SIMILARITY_THRESHOLD, MatchPolicy
from .result import MatchResult, MatchStatus

__all__ = [
    "ProductMatcher",
    "Query",
    "match",
    "Dictionary",
    "DictionaryEntry",
    "FilterOutcome",
    "narrow_candidates",
    "filter_candidates",
    "decide",
    "score_candidates",
    "select_best",
    "MatchPolicy",
    "DEFAULT_POLICY",
    "TOKEN_SIMILARITY_THRESHOLD",
    "MAX_FUZZY_CANDIDATES",
    "MatchResult",
    "MatchStatus",
]
