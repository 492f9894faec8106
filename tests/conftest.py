"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 사전/매처 주입
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "INFO")

from catalog_matcher.engine import Dictionary, ProductMatcher  # noqa: E402
from tests.fixtures import CATALOG_ROWS, PRO_LINEUP_ROWS  # noqa: E402


@pytest.fixture
def catalog() -> Dictionary:
    """3개 항목 기준 사전 (iPhone / Galaxy / MacBook)"""
    return Dictionary.from_rows(CATALOG_ROWS)


@pytest.fixture
def pro_lineup() -> Dictionary:
    """모두 'pro'를 포함한 12개 항목 사전"""
    return Dictionary.from_rows(PRO_LINEUP_ROWS)


@pytest.fixture
def matcher(catalog: Dictionary) -> ProductMatcher:
    return ProductMatcher(catalog)


@pytest.fixture
def dictionary_csv(tmp_path: Path):
    """CSV 문자열을 임시 파일로 기록하고 경로를 반환하는 팩토리"""

    def _write(content: str, name: str = "dictionary.csv") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
