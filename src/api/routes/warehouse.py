"""
Warehouse Page Routes

창고 범위 페이지 요청에 라우트 가드를 적용합니다.

- /{warehouse_slug}, /{warehouse_slug}/       → 항상 허용 (랜딩)
- /{warehouse_slug}/{restricted_page}?page=   → 접근 제한 안내
- /{warehouse_slug}/{page_path}               → 허용 시 페이지 정보, 거부 시 307 리다이렉트

접두사(/warehouse)는 main.py에서 설정값으로 부여됩니다.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse

from src.api.schemas import PageResponse, RestrictedPageResponse
from src.auth.models import SessionContext
from src.auth.route_config import get_route_config
from src.auth.route_guard import check_route_access, extract_route_key
from src.config import Settings, get_settings
from src.dependencies import get_session_context
from src.domain.exceptions import RouteNotConfiguredError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["warehouse"])


@router.get("/{warehouse_slug}", response_model=PageResponse)
async def warehouse_root(warehouse_slug: str) -> PageResponse:
    """창고 루트"""
    return PageResponse(warehouse_slug=warehouse_slug)


@router.get("/{warehouse_slug}/{page_path:path}", response_model=None)
async def warehouse_page(
    request: Request,
    warehouse_slug: str,
    page_path: str,
    session: Annotated[SessionContext, Depends(get_session_context)],
    settings: Annotated[Settings, Depends(get_settings)],
    page: str | None = Query(default=None, description="접근이 거부된 페이지 이름"),
) -> PageResponse | RestrictedPageResponse | RedirectResponse | JSONResponse:
    """창고 페이지 접근"""
    if page_path == settings.restricted_page:
        return RestrictedPageResponse(
            warehouse_slug=warehouse_slug,
            page=page,
            message=(
                f"You don't have permission to access {page or 'this page'}. "
                "Contact your administrator."
            ),
        )

    pathname = request.url.path
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
        return JSONResponse(
            status_code=403,
            content={"detail": {"message": e.message, "code": e.code}},
        )

    if not result.allowed:
        logger.info(
            f"Access denied: user={session.user_id} role={session.role} path={pathname}"
        )
        return RedirectResponse(url=result.redirect_to, status_code=307)

    route_key = extract_route_key(pathname, warehouse_slug, settings.warehouse_route_prefix)
    if not route_key:
        return PageResponse(warehouse_slug=warehouse_slug)

    route = get_route_config(route_key)
    return PageResponse(
        warehouse_slug=warehouse_slug,
        path=route_key,
        display_name=route.display_name,
        description=route.description,
        permission=route.permission,
    )
