"""리소스 파일(YAML) 로더 유틸리티"""
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

from catalog_matcher.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """패키지 resources/ 기준 리소스 절대 경로 반환"""
    # catalog_matcher/utils/resource_loader.py -> catalog_matcher/utils -> catalog_matcher
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_tech_units() -> list[str]:
    """정규화 시 제거할 기술 스펙 단위 목록 로드 (gb, hz, mah ...)"""
    data = load_yaml_resource("normalization/tech_units.yaml")
    return [str(u).lower() for u in data.get("units", []) if str(u).strip()]
