# cablequote/services/auth_services/user_service.py
import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.core.security import hash_password
from cablequote.models.user_models import User
from cablequote.schemas.user_schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


# ---------------------------
# CREATE USER
# ---------------------------
async def create_user(db: AsyncSession, user_data: UserCreate, current_user):
    if await db.get(User, user_data.name):
        raise HTTPException(status_code=400, detail="User name already exists")

    new_user = User(
        name=user_data.name,
        password_hash=hash_password(user_data.password),
        role=user_data.role.value,
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    logger.info("%s created user %s (%s)", current_user.name, new_user.name, new_user.role)
    return new_user


# ---------------------------
# LIST ALL USERS
# ---------------------------
async def list_users(db: AsyncSession):
    result = await db.execute(select(User).order_by(User.name))
    return result.scalars().all()


# ---------------------------
# GET USER BY NAME
# ---------------------------
async def get_user(db: AsyncSession, name: str):
    user = await db.get(User, name)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# ---------------------------
# UPDATE USER
# ---------------------------
async def update_user(db: AsyncSession, name: str, user_data: UserUpdate, current_user):
    """
    Change role, password or active flag. Any change to credentials or
    role invalidates the user's outstanding tokens.
    """
    target_user = await get_user(db, name)
    changes = []

    if user_data.password:
        target_user.password_hash = hash_password(user_data.password)
        changes.append("password")
    if user_data.role is not None and user_data.role.value != target_user.role:
        changes.append(f"role {target_user.role} -> {user_data.role.value}")
        target_user.role = user_data.role.value
    if user_data.is_active is not None and user_data.is_active != target_user.is_active:
        if not user_data.is_active and target_user.name == current_user.name:
            raise HTTPException(status_code=400, detail="You cannot deactivate yourself")
        changes.append("activated" if user_data.is_active else "deactivated")
        target_user.is_active = user_data.is_active

    if changes:
        target_user.token_version += 1
        await db.commit()
        await db.refresh(target_user)
        logger.info("%s updated user %s: %s", current_user.name, name, ", ".join(changes))
    return target_user


# ---------------------------
# DELETE USER
# ---------------------------
async def delete_user(db: AsyncSession, name: str, current_user):
    target_user = await get_user(db, name)
    if target_user.name == current_user.name:
        raise HTTPException(status_code=400, detail="You cannot delete yourself")

    await db.delete(target_user)
    await db.commit()
    logger.info("%s deleted user %s", current_user.name, name)
    return target_user
