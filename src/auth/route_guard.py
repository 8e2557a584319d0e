"""
라우트 가드

창고 범위 URL을 라우트 레지스트리의 권한과 대조하여 접근 허용 여부와
리다이렉트 대상을 결정합니다. 상태가 없고 I/O도 없습니다.
"""

from collections.abc import Iterable
from urllib.parse import quote

from pydantic import BaseModel, Field

from src.auth.permissions import has_permission
from src.auth.route_config import get_route_config

WAREHOUSE_PREFIX = "/warehouse"
RESTRICTED_PAGE = "restricted"


class RouteAccessResult(BaseModel):
    """라우트 접근 판정 결과"""

    allowed: bool = Field(description="접근 허용 여부")
    redirect_to: str | None = Field(default=None, description="거부 시 이동할 경로")


def extract_route_key(
    pathname: str, warehouse_slug: str, prefix: str = WAREHOUSE_PREFIX
) -> str:
    """/warehouse/{slug}/ 이후의 경로 반환 (없으면 빈 문자열)"""
    parts = pathname.split(f"{prefix}/{warehouse_slug}/")
    if len(parts) < 2:
        return ""
    return parts[1]


def restricted_url(
    warehouse_slug: str,
    display_name: str | None = None,
    prefix: str = WAREHOUSE_PREFIX,
    restricted_page: str = RESTRICTED_PAGE,
) -> str:
    """접근 제한 안내 페이지 URL"""
    url = f"{prefix}/{warehouse_slug}/{restricted_page}"
    if display_name is None:
        return url
    return f"{url}?page={quote(display_name, safe='')}"


def check_route_access(
    pathname: str,
    warehouse_slug: str,
    granted: Iterable[str] | None,
    prefix: str = WAREHOUSE_PREFIX,
    restricted_page: str = RESTRICTED_PAGE,
) -> RouteAccessResult:
    """
    경로 접근 권한 확인

    창고 루트(또는 선택 화면)는 항상 허용됩니다. 그 외 경로는 레지스트리에서
    요구 권한을 찾아 부여된 권한 목록으로 평가합니다.

    Args:
        pathname: 전체 경로 (예: "/warehouse/acme/inventory")
        warehouse_slug: 창고 slug
        granted: 사용자에게 부여된 권한 패턴 목록

    Returns:
        RouteAccessResult

    Raises:
        RouteNotConfiguredError: 레지스트리에 없는 경로 (설정 오류, 호출 측에서 거부 처리)
    """
    route_key = extract_route_key(pathname, warehouse_slug, prefix)
    if not route_key:
        return RouteAccessResult(allowed=True)

    route = get_route_config(route_key)

    if not has_permission(route.permission, granted):
        return RouteAccessResult(
            allowed=False,
            redirect_to=restricted_url(
                warehouse_slug, route.display_name, prefix, restricted_page
            ),
        )

    return RouteAccessResult(allowed=True)
