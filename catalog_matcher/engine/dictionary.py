"""Reference Dictionary - Immutable Catalog Entries

기동 시 한 번 만들어진 뒤 읽기 전용으로만 쓰입니다.
매칭 엔진은 사전을 인자로 전달받으며, 전역 상태를 두지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from catalog_matcher.utils.text import normalize, tokenize


@dataclass(frozen=True)
class DictionaryEntry:
    """기준 사전 항목

    Attributes:
        product: 원본 상품명
        brand: 브랜드 (빈 문자열 허용)
        category: 카테고리 (빈 문자열 허용)
        norm_product: 정규화된 상품명
        token_len: 정규화된 상품명의 토큰 수
    """

    product: str
    brand: str
    category: str
    norm_product: str
    token_len: int

    @classmethod
    def build(cls, product: str, brand: str = "", category: str = "") -> "DictionaryEntry":
        """원본 필드로부터 정규화 형태를 계산해 항목 생성"""
        norm = normalize(product)
        return cls(
            product=product,
            brand=brand,
            category=category,
            norm_product=norm,
            token_len=len(tokenize(norm)),
        )


class Dictionary(Sequence[DictionaryEntry]):
    """순서가 있는 불변 항목 컬렉션

    순서는 동점 판정(사전 순서상 먼저 나온 항목 우선)에만 의미가 있습니다.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[DictionaryEntry] = ()):
        self._entries: tuple[DictionaryEntry, ...] = tuple(entries)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Dictionary":
        """(product, brand, category) 튜플 목록으로 사전 생성"""
        return cls(DictionaryEntry.build(p, b, c) for p, b, c in rows)

    @property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        return self._entries

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary(size={len(self._entries)})"
