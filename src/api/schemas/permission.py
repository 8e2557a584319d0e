"""
Permission API Schemas

권한 확인 API 요청/응답 스키마 정의
"""

from pydantic import BaseModel, Field


class PermissionCheckRequest(BaseModel):
    """권한 확인 요청"""

    permissions: list[str] = Field(
        ...,
        min_length=1,
        max_length=100,
        description="확인할 권한 목록",
        examples=[["inventory.products.read", "movement.outward.create"]],
    )
    require_all: bool = Field(
        default=False,
        description="True면 모두 필요 (AND), False면 하나만 필요 (OR)",
    )


class PermissionDecision(BaseModel):
    """개별 권한 판정"""

    permission: str = Field(description="요구 권한")
    allowed: bool = Field(description="보유 여부")


class PermissionCheckResponse(BaseModel):
    """권한 확인 응답"""

    allowed: bool = Field(description="종합 판정")
    require_all: bool = Field(description="AND 판정 여부")
    decisions: list[PermissionDecision] = Field(default=[], description="개별 판정")


class SessionResponse(BaseModel):
    """현재 세션 정보"""

    user_id: str = Field(description="사용자 ID")
    role: str | None = Field(default=None, description="역할")
    permissions: list[str] = Field(default=[], description="부여된 권한 패턴")


class HealthResponse(BaseModel):
    """헬스체크 응답"""

    status: str = Field(description="서비스 상태")
    version: str = Field(description="API 버전")
    registered_routes: int = Field(description="라우트 레지스트리 항목 수")
