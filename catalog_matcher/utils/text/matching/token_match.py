"""Token-vs-text matching."""

from __future__ import annotations

from ..core.tokenize import is_model_token, tokenize
from .similarity import similarity_ratio


DEFAULT_TOKEN_SIMILARITY_THRESHOLD = 90


def token_matches(
    token: str,
    target_normalized_text: str,
    threshold: int = DEFAULT_TOKEN_SIMILARITY_THRESHOLD,
) -> bool:
    """쿼리 토큰 하나가 대상 텍스트(정규화 완료)에 "존재"하는지 판정.

    - 모델 토큰(s21, m1, rtx4090): 대상 토큰 중 하나와 정확히 같아야 함.
      s21 vs s22 처럼 한 글자 차이도 다른 제품이므로 유사도는 보지 않는다.
    - 서술 토큰(ultra, wireless): 대상 토큰 중 하나와 similarity_ratio >= threshold
    """
    target_tokens = tokenize(target_normalized_text)

    if is_model_token(token):
        return token in target_tokens

    return any(similarity_ratio(token, t) >= threshold for t in target_tokens)
