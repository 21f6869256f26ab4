# cablequote/utils/check_roles.py
from fastapi import HTTPException
from typing import Callable
from functools import wraps

from cablequote.schemas.user_schemas import UserRole

# Role groups shared by the routers
ALL_ROLES = [role.value for role in UserRole]
QUOTATION_WRITERS = [UserRole.ADMIN.value, UserRole.SALES_PERSON.value]
PRODUCT_WRITERS = [UserRole.ADMIN.value, UserRole.MANAGEMENT.value, UserRole.SCM.value]
MASTER_WRITERS = [UserRole.ADMIN.value, UserRole.MANAGEMENT.value]
STOCK_WRITERS = [UserRole.ADMIN.value, UserRole.SCM.value]
CHALLAN_WRITERS = [UserRole.ADMIN.value, UserRole.SCM.value]
ADMIN_ONLY = [UserRole.ADMIN.value]


def has_role(user, *roles: str) -> bool:
    return user is not None and (user.role or "").lower() in [r.lower() for r in roles]


def require_role(roles: list[str]):
    """Decorator to validate user role; expects user to be passed by route."""
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, _user, **kwargs):
            if _user is None:
                raise HTTPException(status_code=401, detail="User not authenticated")
            if not has_role(_user, *roles):
                raise HTTPException(status_code=403, detail="Permission denied")
            return await func(*args, _user=_user, **kwargs)
        return wrapper
    return decorator
