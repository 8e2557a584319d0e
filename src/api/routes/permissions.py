"""
Permission API Routes

현재 세션의 권한 조회 및 권한 확인 엔드포인트
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.schemas import (
    HealthResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PermissionDecision,
    SessionResponse,
)
from src.auth.models import SessionContext
from src.auth.route_config import ROUTE_PERMISSIONS
from src.config import Settings, get_settings
from src.dependencies import get_session_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["permissions"])


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """헬스체크"""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        registered_routes=len(ROUTE_PERMISSIONS),
    )


@router.get("/permissions/me", response_model=SessionResponse)
async def my_permissions(
    session: Annotated[SessionContext, Depends(get_session_context)],
) -> SessionResponse:
    """현재 세션의 역할과 부여된 권한 패턴"""
    return SessionResponse(
        user_id=session.user_id,
        role=session.role,
        permissions=session.permissions,
    )


@router.post("/permissions/check", response_model=PermissionCheckResponse)
async def check_permissions(
    body: PermissionCheckRequest,
    session: Annotated[SessionContext, Depends(get_session_context)],
) -> PermissionCheckResponse:
    """
    권한 확인

    요청한 권한 각각의 판정과 함께 require_all 에 따른 종합 판정을 반환합니다.
    """
    decisions = [
        PermissionDecision(permission=perm, allowed=session.has_permission(perm))
        for perm in body.permissions
    ]
    if body.require_all:
        allowed = all(d.allowed for d in decisions)
    else:
        allowed = any(d.allowed for d in decisions)

    return PermissionCheckResponse(
        allowed=allowed,
        require_all=body.require_all,
        decisions=decisions,
    )
