"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # 기준 사전 (CSV)
    dict_path: str = "barc_csv_file_here"

    # 서버
    host: str = "0.0.0.0"
    port: int = 8080

    # 매칭 정책
    # - token_similarity_threshold: 서술 토큰이 "일치"로 인정되는 최소 유사도 (0~100)
    # - max_fuzzy_candidates: 이 개수 이상 후보가 남으면 판정을 포기
    token_similarity_threshold: int = 90
    max_fuzzy_candidates: int = 10

    # API
    api_title: str = "카탈로그 매칭 서비스"
    api_version: str = "1.0.0"
    api_description: str = "자유 형식 상품명을 기준 사전의 상품/브랜드/카테고리로 매핑합니다."

    # 로깅
    log_level: str = "INFO"
    environment: str = "development"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("token_similarity_threshold")
    @classmethod
    def validate_token_similarity_threshold(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError("token_similarity_threshold must be between 0 and 100")
        return v

    @field_validator("max_fuzzy_candidates")
    @classmethod
    def validate_max_fuzzy_candidates(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_fuzzy_candidates must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level


settings = Settings()
