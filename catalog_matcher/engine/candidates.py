"""Candidate Filter - Sequential Elimination by Token Presence

쿼리 토큰을 왼쪽부터 하나씩 적용하며 후보를 좁힙니다.

- 토큰과 일치하는 후보가 하나라도 있으면 후보 집합을 그 부분집합으로 교체
- 모든 후보를 제거하는 토큰은 노이즈로 보고 무시 (후보 집합 유지)
- 후보가 정확히 1개가 되면 즉시 종료
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from catalog_matcher.core.logging import logger
from catalog_matcher.utils.text import token_matches

from .dictionary import DictionaryEntry
from .policy import TOKEN_SIMILARITY_THRESHOLD


@dataclass(frozen=True)
class FilterOutcome:
    """소거 단계 결과

    Attributes:
        candidates: 남은 후보 (사전 순서 유지)
        tokens_seen: 적용한 토큰 수 (조기 종료 시 전체보다 작음)
        tokens_committed: 후보 집합을 갱신한 토큰 수
        lexical_overlap: 쿼리 토큰 중 하나라도 후보와 일치했는지 (토큰이 없으면 True)
    """

    candidates: tuple[DictionaryEntry, ...]
    tokens_seen: int = 0
    tokens_committed: int = 0
    lexical_overlap: bool = True


def narrow_candidates(
    entries: Sequence[DictionaryEntry],
    tokens: Sequence[str],
    threshold: int = TOKEN_SIMILARITY_THRESHOLD,
) -> FilterOutcome:
    """후보 소거 + 진행 통계"""
    candidates = tuple(entries)
    seen = 0
    committed = 0

    for token in tokens:
        seen += 1
        filtered = tuple(e for e in candidates if token_matches(token, e.norm_product, threshold))

        if filtered:
            candidates = filtered
            committed += 1
        else:
            logger.debug(f"[match] token '{token}' would eliminate all {len(candidates)} candidates, ignored")

        if len(candidates) == 1:
            break

    overlap = committed > 0 or not tokens
    if not overlap:
        # 단일 항목 사전에서 조기 종료한 경우 남은 토큰도 확인
        overlap = any(
            token_matches(t, e.norm_product, threshold)
            for t in tokens[seen:]
            for e in candidates
        )

    return FilterOutcome(
        candidates=candidates,
        tokens_seen=seen,
        tokens_committed=committed,
        lexical_overlap=overlap,
    )


def filter_candidates(
    entries: Sequence[DictionaryEntry],
    tokens: Sequence[str],
    threshold: int = TOKEN_SIMILARITY_THRESHOLD,
) -> list[DictionaryEntry]:
    """토큰 순차 적용으로 남은 후보 목록 반환"""
    return list(narrow_candidates(entries, tokens, threshold).candidates)
