# cablequote/routers/__init__.py

from .auth import router as auth_router
from .billing import router as billing_router
from .inventory import router as inventory_router
from .reports import router as reports_router

__all__ = [
    "auth_router",
    "billing_router",
    "inventory_router",
    "reports_router",
]
