"""Product Matcher - Raw Text to Catalog Entry

파이프라인:
    raw text -> normalize -> tokenize -> 후보 소거(Dictionary) -> 판정 -> MatchResult

사전과 정책은 생성 시 주입되며 이후 변경되지 않습니다.
match()는 요청 로컬 데이터만 만들기 때문에 여러 스레드/요청에서 동시에 호출해도 안전합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from catalog_matcher.core.logging import logger, sanitize_for_log
from catalog_matcher.utils.text import normalize, tokenize

from .candidates import narrow_candidates
from .decision import decide
from .dictionary import Dictionary
from .policy import DEFAULT_POLICY, MatchPolicy
from .result import MatchResult


@dataclass(frozen=True)
class Query:
    """요청 단위 쿼리 (저장되지 않음)"""

    raw_text: str
    normalized: str
    tokens: tuple[str, ...]

    @classmethod
    def parse(cls, raw_text: str) -> "Query":
        normalized = normalize(raw_text)
        return cls(raw_text=raw_text, normalized=normalized, tokens=tuple(tokenize(normalized)))


def match(
    raw_text: str,
    dictionary: Dictionary,
    policy: MatchPolicy = DEFAULT_POLICY,
) -> MatchResult:
    """원문 한 건을 사전 항목으로 매핑

    항상 세 결과(NO_MATCH / MATCHED_FUZZY_MAX / TOO_MANY_CANDIDATES) 중 하나를 반환하며
    예외를 던지지 않습니다.
    """
    query = Query.parse(raw_text or "")

    outcome = narrow_candidates(dictionary, query.tokens, policy.token_similarity_threshold)

    if not outcome.lexical_overlap:
        # 어떤 토큰도 사전과 겹치지 않음 -> 후보 없음
        logger.debug(f"[match] no lexical overlap for '{sanitize_for_log(query.normalized)}'")
        return MatchResult.no_match()

    result = decide(outcome.candidates, query.normalized, policy.max_fuzzy_candidates)

    logger.debug(
        f"[match] '{sanitize_for_log(query.normalized)}' -> {result.status.value} "
        f"(candidates={len(outcome.candidates)}, tokens={outcome.tokens_seen}/{len(query.tokens)})"
    )
    return result


class ProductMatcher:
    """사전 + 정책을 보유한 매칭 서비스

    Usage:
        matcher = ProductMatcher(Dictionary.from_rows(rows))
        result = matcher.match("Apple iPhone 13 Pro 128GB Unlocked")
    """

    def __init__(self, dictionary: Dictionary, policy: Optional[MatchPolicy] = None):
        self._dictionary = dictionary
        self._policy = policy or DEFAULT_POLICY

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    def match(self, raw_text: str) -> MatchResult:
        return match(raw_text, self._dictionary, self._policy)
