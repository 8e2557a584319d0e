"""
Route Registry API Routes

라우트 레지스트리 조회 및 라우트 가드 판정 엔드포인트
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.schemas import RouteAccessResponse, RouteConfigResponse, RouteListResponse
from src.auth.models import SessionContext
from src.auth.route_config import list_route_configs
from src.auth.route_guard import check_route_access, restricted_url
from src.config import Settings, get_settings
from src.dependencies import get_session_context, require_permissions
from src.domain.exceptions import RouteNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/routes", tags=["routes"])


@router.get("", response_model=RouteListResponse)
async def list_routes(
    _session: Annotated[SessionContext, Depends(require_permissions("settings.read"))],
) -> RouteListResponse:
    """레지스트리 전체 조회 (settings.read 필요)"""
    routes = [
        RouteConfigResponse(path=path, **config.model_dump())
        for path, config in list_route_configs().items()
    ]
    return RouteListResponse(routes=routes, count=len(routes))


@router.get("/access", response_model=RouteAccessResponse)
async def route_access(
    session: Annotated[SessionContext, Depends(get_session_context)],
    settings: Annotated[Settings, Depends(get_settings)],
    pathname: str = Query(..., min_length=1, description="전체 경로"),
    warehouse_slug: str = Query(..., min_length=1, description="창고 slug"),
) -> RouteAccessResponse:
    """
    라우트 가드 판정

    레지스트리에 없는 경로는 설정 오류로 기록하고 거부합니다 (fail-closed).
    """
    try:
        result = check_route_access(
            pathname,
            warehouse_slug,
            session.permissions,
            prefix=settings.warehouse_route_prefix,
            restricted_page=settings.restricted_page,
        )
    except RouteNotConfiguredError as e:
        logger.error(f"Route guard configuration error: {e.message}")
        return RouteAccessResponse(
            pathname=pathname,
            allowed=False,
            redirect_to=restricted_url(
                warehouse_slug,
                prefix=settings.warehouse_route_prefix,
                restricted_page=settings.restricted_page,
            ),
            error=e.code,
        )

    return RouteAccessResponse(
        pathname=pathname,
        allowed=result.allowed,
        redirect_to=result.redirect_to,
    )
