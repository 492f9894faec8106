"""Text utilities.

Public API:
- core/      정규화(normalize) / 토큰화(tokenize, is_model_token)
- matching/  편집 거리 / 유사도 / 토큰 매칭
"""

from .core.cleaning import normalize
from .core.tokenize import Token, TokenKind, classify_token, is_model_token, tokenize, tokenize_classified
from .matching import edit_distance, similarity_ratio, token_matches

__all__ = [
    # core
    "normalize",
    "tokenize",
    "tokenize_classified",
    "classify_token",
    "is_model_token",
    "Token",
    "TokenKind",
    # matching
    "edit_distance",
    "similarity_ratio",
    "token_matches",
]
