"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진/네트워크 의존 없음
"""

from .catalog import CATALOG_ROWS, PRO_LINEUP_ROWS
from .queries import QUERIES

__all__ = [
    "CATALOG_ROWS",
    "PRO_LINEUP_ROWS",
    "QUERIES",
]
