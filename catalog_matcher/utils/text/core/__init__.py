"""Core text helpers (normalization + tokenization)."""

from .cleaning import normalize
from .tokenize import Token, TokenKind, classify_token, is_model_token, tokenize, tokenize_classified

__all__ = [
    "normalize",
    "tokenize",
    "tokenize_classified",
    "classify_token",
    "is_model_token",
    "Token",
    "TokenKind",
]
