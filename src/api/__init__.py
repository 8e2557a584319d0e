"""
API Package
"""

from .routes.permissions import router as permissions_router
from .routes.route_registry import router as route_registry_router
from .routes.warehouse import router as warehouse_router

__all__ = [
    "permissions_router",
    "route_registry_router",
    "warehouse_router",
]
