"""
API Schemas Package
"""

from src.api.schemas.permission import (
    HealthResponse,
    PermissionCheckRequest,
    PermissionCheckResponse,
    PermissionDecision,
    SessionResponse,
)
from src.api.schemas.route import (
    PageResponse,
    RestrictedPageResponse,
    RouteAccessResponse,
    RouteConfigResponse,
    RouteListResponse,
)

__all__ = [
    # Permission
    "PermissionCheckRequest",
    "PermissionCheckResponse",
    "PermissionDecision",
    "SessionResponse",
    "HealthResponse",
    # Route
    "RouteConfigResponse",
    "RouteListResponse",
    "RouteAccessResponse",
    "PageResponse",
    "RestrictedPageResponse",
]
