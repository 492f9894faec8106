"""Similarity helpers."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """삽입/삭제/치환 비용 1의 Levenshtein 거리 (유니코드 코드 포인트 단위).

    빈 문자열과의 거리는 상대 문자열의 길이입니다.
    """
    return Levenshtein.distance(a, b, weights=(1, 1, 1))


def similarity_ratio(a: str, b: str) -> int:
    """두 문자열의 유사도 점수(0~100).

    round((len(a) + len(b) - dist) / (len(a) + len(b)) * 100), 반올림은 half-up.
    부동소수점 오차 없이 정수 연산으로 계산합니다.
    둘 다 빈 문자열이면 100.
    """
    total = len(a) + len(b)
    if total == 0:
        return 100

    kept = total - edit_distance(a, b)
    return (200 * kept + total) // (2 * total)
