"""
Route API Schemas

라우트 레지스트리 / 라우트 가드 응답 스키마 정의
"""

from pydantic import BaseModel, Field


class RouteConfigResponse(BaseModel):
    """레지스트리 항목"""

    path: str = Field(description="창고 하위 경로 키")
    permission: str = Field(description="요구 권한")
    display_name: str = Field(description="페이지 이름")
    description: str | None = Field(default=None, description="페이지 설명")


class RouteListResponse(BaseModel):
    """레지스트리 전체"""

    routes: list[RouteConfigResponse] = Field(default=[], description="라우트 목록")
    count: int = Field(description="라우트 수")


class RouteAccessResponse(BaseModel):
    """라우트 접근 판정"""

    pathname: str = Field(description="요청 경로")
    allowed: bool = Field(description="접근 허용 여부")
    redirect_to: str | None = Field(default=None, description="거부 시 이동할 경로")
    error: str | None = Field(default=None, description="설정 오류 코드")


class PageResponse(BaseModel):
    """허용된 창고 페이지 정보"""

    warehouse_slug: str = Field(description="창고 slug")
    path: str = Field(default="", description="창고 하위 경로 (루트면 빈 문자열)")
    display_name: str | None = Field(default=None, description="페이지 이름")
    description: str | None = Field(default=None, description="페이지 설명")
    permission: str | None = Field(default=None, description="요구 권한")


class RestrictedPageResponse(BaseModel):
    """접근 제한 안내"""

    warehouse_slug: str = Field(description="창고 slug")
    page: str | None = Field(default=None, description="접근이 거부된 페이지 이름")
    message: str = Field(description="안내 메시지")
