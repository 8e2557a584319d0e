from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

from src.auth.permissions import (
    has_all_permissions,
    has_any_permission,
    has_permission,
)

# 기본 역할별 권한 매핑 (외부 역할 저장소가 없을 때 사용)
DEFAULT_ROLE_PERMISSIONS: dict[str, list[str]] = {
    "admin": ["*"],
    "staff": [
        "dashboard.read",
        "movement.*",
        "inventory.products.read",
        "inventory.qr_batches.*",
        "partners.read",
        "sales_orders.read",
    ],
}


def permissions_for_role(
    role: str | None, mapping: Mapping[str, list[str]] | None = None
) -> list[str]:
    """역할의 권한 패턴 목록 (알 수 없는 역할은 빈 목록)"""
    if not role:
        return []
    source = DEFAULT_ROLE_PERMISSIONS if mapping is None else mapping
    return list(source.get(role, []))


class SessionContext(BaseModel):
    """
    현재 창고/회사 컨텍스트의 사용자 세션 정보

    권한 목록은 세션(또는 창고 전환) 시점에 한 번 로드되며,
    화면/라우트마다 has_permission 계열 메서드로 평가합니다.
    """

    user_id: str
    role: str | None = None
    warehouse_slug: str | None = None
    permissions: list[str] = Field(default_factory=list)

    def has_permission(self, permission: str) -> bool:
        """단일 권한 보유 여부"""
        return has_permission(permission, self.permissions)

    def has_any_permission(self, *permissions: str) -> bool:
        return has_any_permission(self.permissions, *permissions)

    def has_all_permissions(self, *permissions: str) -> bool:
        return has_all_permissions(self.permissions, *permissions)

    @classmethod
    def for_role(
        cls,
        role: str | None,
        user_id: str | None = None,
        warehouse_slug: str | None = None,
        mapping: Mapping[str, list[str]] | None = None,
    ) -> SessionContext:
        """역할 이름으로 세션 컨텍스트 생성"""
        return cls(
            user_id=user_id or f"{role or 'anonymous'}_session",
            role=role,
            warehouse_slug=warehouse_slug,
            permissions=permissions_for_role(role, mapping),
        )

    @classmethod
    def anonymous(cls) -> SessionContext:
        """권한이 없는 익명 세션"""
        return cls(user_id="anonymous")
