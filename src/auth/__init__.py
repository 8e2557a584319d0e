from src.auth.models import SessionContext, permissions_for_role
from src.auth.permissions import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    matches_wildcard,
)
from src.auth.route_config import RouteConfig, get_route_config
from src.auth.route_guard import RouteAccessResult, check_route_access

__all__ = [
    "RouteAccessResult",
    "RouteConfig",
    "SessionContext",
    "check_route_access",
    "get_route_config",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "matches_wildcard",
    "permissions_for_role",
]
