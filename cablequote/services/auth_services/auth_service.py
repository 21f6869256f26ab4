# cablequote/services/auth_services/auth_service.py
import logging
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES
from cablequote.core.security import create_access_token, hash_password, verify_password
from cablequote.models.user_models import User
from cablequote.schemas.user_schemas import PasswordChange, UserRole

logger = logging.getLogger(__name__)


async def authenticate_user(db: AsyncSession, name: str, password: str) -> User:
    user = await db.get(User, name)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed login for %r", name)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive.")
    return user


async def create_token(db: AsyncSession, user: User) -> str:
    """
    Issue an access token and stamp the login time.
    The token carries token_version so logout invalidates it immediately.
    """
    expire_minutes = (
        ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES
        if user.role == UserRole.ADMIN.value
        else ACCESS_TOKEN_EXPIRE_MINUTES
    )

    access_token = create_access_token(
        {"sub": user.name, "role": user.role},
        token_version=user.token_version,
        expires_delta=timedelta(minutes=expire_minutes),
    )

    user.last_login = datetime.now(timezone.utc)
    await db.commit()
    logger.info("User %s logged in", user.name)
    return access_token


async def logout_user(db: AsyncSession, name: str):
    user = await db.get(User, name)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user.token_version += 1
    await db.commit()
    logger.info("User %s logged out", name)
    return {"msg": "Logged out successfully"}


async def change_password(db: AsyncSession, user: User, data: PasswordChange):
    if not verify_password(data.current_password, user.password_hash):
        raise HTTPException(status_code=400, detail="Current password is incorrect")

    user.password_hash = hash_password(data.new_password)
    # Existing sessions must log in again with the new password
    user.token_version += 1
    await db.commit()
    logger.info("User %s changed password", user.name)
    return {"msg": "Password changed successfully. Please log in again."}
