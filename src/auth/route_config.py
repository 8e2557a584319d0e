"""
라우트 권한 레지스트리

/warehouse/{warehouse_slug}/ 이하 경로와 접근에 필요한 권한의 정적 매핑입니다.

- 접근 제어가 필요한 창고 라우트는 모두 여기에 정의되어야 합니다
- 부분 일치 없음: 각 라우트마다 정확한 키가 필요합니다
- /invite, /auth 등 창고 컨텍스트 밖의 공개 라우트는 포함하지 않습니다
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from src.domain.exceptions import RouteNotConfiguredError


class RouteConfig(BaseModel):
    """라우트 접근 설정"""

    model_config = ConfigDict(frozen=True)

    permission: str = Field(description="접근에 필요한 권한 (예: inventory.products.read)")
    display_name: str = Field(description="오류 메시지에 표시할 페이지 이름")
    description: str | None = Field(default=None, description="페이지 설명")


ROUTE_PERMISSIONS: Mapping[str, RouteConfig] = MappingProxyType(
    {
        # 메인 화면
        "dashboard": RouteConfig(
            permission="dashboard.read",
            display_name="Dashboard",
            description="View dashboard",
        ),
        "stock-flow": RouteConfig(
            permission="movement.read",
            display_name="Stock Flow",
            description="View goods inward and outward movements",
        ),
        "inventory": RouteConfig(
            permission="inventory.products.read",
            display_name="Inventory",
            description="View and manage product inventory",
        ),
        "partners": RouteConfig(
            permission="partners.read",
            display_name="Partners",
            description="View and manage business partners",
        ),
        "sales-orders": RouteConfig(
            permission="sales_orders.read",
            display_name="Sales Orders",
            description="View and manage sales orders",
        ),
        "qr-codes": RouteConfig(
            permission="inventory.qr_batches.read",
            display_name="QR Codes",
            description="View and manage QR code batches",
        ),
        "staff": RouteConfig(
            permission="users.read",
            display_name="Staff Management",
            description="View and manage staff members",
        ),
        "reports": RouteConfig(
            permission="reports.read",
            display_name="Reports",
            description="View business reports and analytics",
        ),
        "settings": RouteConfig(
            permission="settings.read",
            display_name="Settings",
            description="Manage warehouse and company settings",
        ),
        # 생성 플로우
        "goods-inward/create": RouteConfig(
            permission="movement.inward.create",
            display_name="Create Goods Inward",
            description="Record incoming inventory",
        ),
        "goods-outward/create": RouteConfig(
            permission="movement.outward.create",
            display_name="Create Goods Outward",
            description="Dispatch inventory",
        ),
        "sales-orders/create": RouteConfig(
            permission="sales_orders.create",
            display_name="Create Sales Order",
            description="Create new customer orders",
        ),
        "qr-codes/create": RouteConfig(
            permission="inventory.qr_batches.create",
            display_name="Create QR Codes",
            description="Generate QR code labels for inventory",
        ),
    }
)


def get_route_config(path: str) -> RouteConfig:
    """
    정확히 일치하는 라우트 설정 조회

    Raises:
        RouteNotConfiguredError: 레지스트리에 없는 경로
    """
    config = ROUTE_PERMISSIONS.get(path)
    if config is None:
        raise RouteNotConfiguredError(path)
    return config


def list_route_configs() -> dict[str, RouteConfig]:
    """등록된 전체 라우트 설정 (복사본)"""
    return dict(ROUTE_PERMISSIONS)
