# cablequote/routers/auth/users.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from cablequote.core.db import get_db
from cablequote.schemas.user_schemas import (
    UserCreate, UserUpdate, UserResponse, UsersListResponse, MessageResponse
)
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ADMIN_ONLY
from cablequote.services.auth_services.user_service import (
    create_user, list_users, get_user, update_user, delete_user
)

router = APIRouter(prefix="/users", tags=["Users CRUD"])

# ---------------------------
# CREATE USER
# ---------------------------
@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@require_role(ADMIN_ONLY)
async def create_user_route(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    _user = Depends(get_current_user)
):
    new_user = await create_user(db, user_data, _user)
    return {"msg": f"User '{new_user.name}' created successfully.", "data": new_user}


# ---------------------------
# LIST ALL USERS
# ---------------------------
@router.get("/", response_model=UsersListResponse)
@require_role(ADMIN_ONLY)
async def list_users_route(db: AsyncSession = Depends(get_db), _user = Depends(get_current_user)):
    users = await list_users(db)
    return {"msg": f"{len(users)} users fetched successfully.", "data": users}


# ---------------------------
# GET SINGLE USER
# ---------------------------
@router.get("/{name}", response_model=UserResponse)
@require_role(ADMIN_ONLY)
async def get_user_route(name: str, db: AsyncSession = Depends(get_db), _user = Depends(get_current_user)):
    target_user = await get_user(db, name)
    return {"msg": f"User '{name}' fetched successfully.", "data": target_user}


# ---------------------------
# UPDATE USER
# ---------------------------
@router.put("/{name}", response_model=UserResponse)
@require_role(ADMIN_ONLY)
async def update_user_route(name: str, user_data: UserUpdate, db: AsyncSession = Depends(get_db), _user = Depends(get_current_user)):
    updated_user = await update_user(db, name, user_data, _user)
    return {"msg": f"User '{updated_user.name}' updated successfully.", "data": updated_user}


# ---------------------------
# DELETE USER
# ---------------------------
@router.delete("/{name}", response_model=MessageResponse)
@require_role(ADMIN_ONLY)
async def delete_user_route(name: str, db: AsyncSession = Depends(get_db), _user = Depends(get_current_user)):
    deleted_user = await delete_user(db, name, _user)
    return {"msg": f"User '{deleted_user.name}' deleted successfully."}
