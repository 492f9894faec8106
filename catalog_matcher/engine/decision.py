"""Decision Engine - Candidate Set to Typed Result

후보 수 n에 따라:
- n == 0                      -> NO_MATCH
- 1 <= n < max_fuzzy_candidates -> 정규화 쿼리 전체와 유사도 최고 후보 (MATCHED_FUZZY_MAX)
- n >= max_fuzzy_candidates   -> TOO_MANY_CANDIDATES (정밀도 컷오프)

동점이면 사전 순서상 먼저 나온 후보를 선택합니다.
"""

from __future__ import annotations

from typing import Optional, Sequence

from catalog_matcher.utils.text import similarity_ratio

from .dictionary import DictionaryEntry
from .policy import MAX_FUZZY_CANDIDATES
from .result import MatchResult


def score_candidates(
    candidates: Sequence[DictionaryEntry], normalized_query: str
) -> list[tuple[DictionaryEntry, int]]:
    """후보별 (항목, 점수) 목록 - 입력 순서 유지"""
    return [(c, similarity_ratio(c.norm_product, normalized_query)) for c in candidates]


def select_best(
    candidates: Sequence[DictionaryEntry], normalized_query: str
) -> Optional[DictionaryEntry]:
    """최고 점수 후보 선택 (동점 시 앞선 후보)"""
    best: Optional[DictionaryEntry] = None
    best_score = -1
    for entry, score in score_candidates(candidates, normalized_query):
        # 엄격한 '>' 비교로 먼저 나온 후보가 동점에서 이긴다
        if score > best_score:
            best, best_score = entry, score
    return best


def decide(
    candidates: Sequence[DictionaryEntry],
    normalized_query: str,
    max_fuzzy_candidates: int = MAX_FUZZY_CANDIDATES,
) -> MatchResult:
    """후보 집합을 매칭 결과로 변환"""
    count = len(candidates)

    if count == 0:
        return MatchResult.no_match()

    if count >= max_fuzzy_candidates:
        return MatchResult.too_many_candidates()

    best = select_best(candidates, normalized_query)
    return MatchResult.matched(best)
