"""
FastAPI 의존성 주입 모듈

FastAPI의 Depends 패턴을 활용한 의존성 주입을 관리합니다.

의존성 흐름:
    Settings -> SessionContext -> Permission Gate
"""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request

from src.auth.models import SessionContext
from src.config import Settings, get_settings
from src.domain.exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)

ROLE_HEADER = "X-Role"
USER_ID_HEADER = "X-User-ID"


# ============================================
# 세션 관련 의존성
# ============================================


async def get_session_context(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionContext:
    """
    현재 요청의 세션 컨텍스트를 반환

    세션 계층(외부)이 전달한 역할 헤더로 권한 목록을 구성합니다.
        X-Role 헤더 → 해당 역할의 권한 (알 수 없는 역할은 권한 없음)
        헤더 없음 → settings.default_role, 그것도 없으면 익명 세션 (권한 없음)
    """
    role = request.headers.get(ROLE_HEADER) or settings.default_role
    if not role:
        return SessionContext.anonymous()

    if role not in settings.role_permissions:
        logger.warning(f"Unknown role '{role}' requested; no permissions granted")

    return SessionContext.for_role(
        role,
        user_id=request.headers.get(USER_ID_HEADER),
        warehouse_slug=request.path_params.get("warehouse_slug"),
        mapping=settings.role_permissions,
    )


def require_permissions(
    *permissions: str, require_all: bool = False
) -> Callable[..., SessionContext]:
    """
    권한 게이트 의존성 생성

    Args:
        permissions: 요구 권한 목록
        require_all: True면 모두 필요 (AND), False면 하나만 필요 (OR)

    Raises:
        AuthorizationError: 권한 부족 (403)
    """
    if not permissions:
        raise ValidationError("At least one permission is required", field="permissions")

    async def permission_gate(
        session: Annotated[SessionContext, Depends(get_session_context)],
    ) -> SessionContext:
        if require_all:
            allowed = session.has_all_permissions(*permissions)
        else:
            allowed = session.has_any_permission(*permissions)

        if not allowed:
            required = ", ".join(permissions)
            raise AuthorizationError(
                f"You don't have permission to perform this action ({required})",
                permission=required,
            )
        return session

    return permission_gate
