"""기준 사전 CSV 적재

CSV 첫 행은 헤더입니다. product/brand/category 컬럼은 헤더 이름(대소문자 무시)으로 찾고,
없으면 0/1/2번째 컬럼을 사용합니다.

- category 컬럼까지 채워지지 않은 행은 버립니다.
- product가 비어 있는 행도 버립니다.
- 버린 행 수는 로그로만 남기며 매칭 엔진에는 전달되지 않습니다.
"""

from __future__ import annotations

import csv
import os
from typing import Iterable, Sequence

from catalog_matcher.core.exceptions import DictionaryFormatException, DictionaryNotFoundException
from catalog_matcher.core.logging import logger
from catalog_matcher.engine.dictionary import Dictionary, DictionaryEntry


DEFAULT_COLUMNS = {"product": 0, "brand": 1, "category": 2}


def resolve_columns(header: Sequence[str]) -> tuple[int, int, int]:
    """헤더에서 (product, brand, category) 인덱스 결정"""
    positions = {name.strip().lower(): idx for idx, name in enumerate(header)}
    product_idx, brand_idx, category_idx = (
        positions.get(name, default) for name, default in DEFAULT_COLUMNS.items()
    )
    return product_idx, brand_idx, category_idx


def parse_dictionary_rows(records: Iterable[Sequence[str]]) -> tuple[Dictionary, int]:
    """헤더 포함 레코드 목록을 사전으로 변환

    Returns:
        (사전, 버린 행 수)
    """
    rows = iter(records)
    header = next(rows, None)
    if header is None:
        return Dictionary(), 0

    product_idx, brand_idx, category_idx = resolve_columns(header)
    required = max(product_idx, brand_idx, category_idx)

    entries: list[DictionaryEntry] = []
    dropped = 0
    for row in rows:
        if len(row) <= required:
            dropped += 1
            continue

        product = row[product_idx]
        if not product.strip():
            dropped += 1
            continue

        entries.append(DictionaryEntry.build(product, row[brand_idx], row[category_idx]))

    return Dictionary(entries), dropped


def load_dictionary(path: str) -> Dictionary:
    """CSV 파일에서 기준 사전 로드 (기동 시 1회)

    Raises:
        DictionaryNotFoundException: 파일이 없음
        DictionaryFormatException: 디코딩/CSV 파싱 실패
    """
    if not os.path.isfile(path):
        raise DictionaryNotFoundException(path)

    logger.info(f"[ingest] Loading dictionary from: {path}")

    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            dictionary, dropped = parse_dictionary_rows(csv.reader(f))
    except UnicodeDecodeError as e:
        raise DictionaryFormatException(path, f"not valid UTF-8 ({e.reason})") from e
    except csv.Error as e:
        raise DictionaryFormatException(path, str(e)) from e

    if dropped:
        logger.info(f"[ingest] Dropped {dropped} rows with missing columns")

    if len(dictionary) == 0:
        logger.warning(f"[ingest] Dictionary is empty: {path}")
    else:
        logger.info(f"[ingest] Dictionary loaded with {len(dictionary)} items")

    return dictionary
