"""Tokenization / token classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# 토큰 시작 위치에서 "영문자+ 숫자+" (a53, rtx4090, m1). 숫자 뒤 문자는 보지 않는다.
_MODEL_TOKEN = re.compile(r"[a-z]+[0-9]+")


class TokenKind(str, Enum):
    """토큰 종류"""

    MODEL = "model"  # 모델/SKU 식별자 - 정확히 일치해야 함
    DESCRIPTIVE = "descriptive"  # 서술어 - 근사 일치 허용


@dataclass(frozen=True)
class Token:
    text: str
    kind: TokenKind

    @property
    def is_model(self) -> bool:
        return self.kind is TokenKind.MODEL


def is_model_token(token: str) -> bool:
    return _MODEL_TOKEN.match(token) is not None


def classify_token(token: str) -> TokenKind:
    return TokenKind.MODEL if is_model_token(token) else TokenKind.DESCRIPTIVE


def tokenize(normalized_text: str) -> list[str]:
    """정규화 텍스트를 공백 기준으로 분리 (순서 유지, 빈 입력 -> [])"""
    if not normalized_text:
        return []
    return normalized_text.split()


def tokenize_classified(normalized_text: str) -> list[Token]:
    """토큰화 + 분류"""
    return [Token(text=t, kind=classify_token(t)) for t in tokenize(normalized_text)]
