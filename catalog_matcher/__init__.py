"""Catalog Matcher - 자유 형식 상품명을 기준 카탈로그 항목으로 매핑하는 서비스"""

__version__ = "1.0.0"
