"""
애플리케이션 설정 모듈

Pydantic Settings를 활용한 환경변수 기반 설정 관리
- 타입 검증 자동화
- .env 파일 지원
- 환경별 설정 분리
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.auth.models import DEFAULT_ROLE_PERMISSIONS

logger = logging.getLogger(__name__)

# 프로젝트 루트 디렉토리 (src/config.py 기준으로 한 단계 상위)
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정

    환경변수 또는 .env 파일에서 값을 로드합니다.
    """

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # ============================================
    # 애플리케이션 설정
    # ============================================
    app_name: str = Field(default="Bale Access API", description="애플리케이션 이름")
    app_version: str = Field(default="0.1.0", description="애플리케이션 버전")
    debug: bool = Field(default=False, description="디버그 모드")
    environment: str = Field(default="development", description="실행 환경")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
        ],
        description="CORS 허용 오리진 목록",
    )

    # ============================================
    # 라우트 가드 설정
    # ============================================
    warehouse_route_prefix: str = Field(
        default="/warehouse",
        description="창고 범위 라우트 접두사",
    )
    restricted_page: str = Field(
        default="restricted",
        description="접근 거부 시 이동할 창고 하위 페이지",
    )

    # ============================================
    # 세션/역할 설정
    # ============================================
    default_role: str | None = Field(
        default=None,
        description="X-Role 헤더가 없을 때 사용할 역할 (None이면 권한 없는 익명 세션)",
    )
    role_permissions: dict[str, list[str]] = Field(
        default_factory=lambda: {
            role: list(perms) for role, perms in DEFAULT_ROLE_PERMISSIONS.items()
        },
        description="역할별 권한 패턴 목록 (JSON)",
    )

    # ============================================
    # 로깅 설정
    # ============================================
    log_level: str = Field(
        default="INFO",
        description="로깅 레벨",
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="로그 포맷",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """로그 레벨 유효성 검사"""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """환경 유효성 검사"""
        valid_envs = {"development", "staging", "production", "test"}
        lower_v = v.lower()
        if lower_v not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return lower_v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """CORS 오리진 목록 검증"""
        if "*" in v and len(v) > 1:
            raise ValueError(
                "CORS origins cannot mix wildcard '*' with specific origins. "
                "Use either '*' alone or specific origin URLs."
            )
        return v

    @field_validator("warehouse_route_prefix")
    @classmethod
    def validate_warehouse_route_prefix(cls, v: str) -> str:
        """접두사는 '/'로 시작하고 '/'로 끝나지 않아야 함"""
        if not v.startswith("/") or v.endswith("/"):
            raise ValueError(
                "warehouse_route_prefix must start with '/' and must not end with '/'"
            )
        return v

    @field_validator("restricted_page")
    @classmethod
    def validate_restricted_page(cls, v: str) -> str:
        """단일 경로 세그먼트만 허용"""
        if not v or "/" in v:
            raise ValueError("restricted_page must be a single non-empty path segment")
        return v

    @property
    def is_production(self) -> bool:
        """프로덕션 환경 여부"""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """개발 환경 여부"""
        return self.environment == "development"

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """프로덕션 환경 설정 검증"""
        if self.environment == "production":
            if self.default_role:
                logger.warning(
                    f"DEFAULT_ROLE is set to '{self.default_role}' in production. "
                    "Requests without a session role will be granted its permissions."
                )

            if self.debug:
                raise ValueError("debug must be disabled in production")

        if self.default_role and self.default_role not in self.role_permissions:
            raise ValueError(
                f"default_role '{self.default_role}' is not defined in role_permissions"
            )

        return self


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()
