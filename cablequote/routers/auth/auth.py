# cablequote/routers/auth/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from cablequote.core.db import get_db
from cablequote.schemas.user_schemas import UserLogin, TokenResponse, MessageResponse, PasswordChange, UserOut
from cablequote.services.auth_services.auth_service import authenticate_user, create_token, logout_user, change_password
from cablequote.utils.get_user import get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])

@router.post("/login", response_model=TokenResponse)
async def login(data: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await authenticate_user(db, data.name, data.password)
    access_token = await create_token(db, user)
    return TokenResponse(access_token=access_token, role=user.role)

@router.post("/logout", response_model=MessageResponse)
async def logout(db: AsyncSession = Depends(get_db), current_user = Depends(get_current_user)):
    """
    Logs out the user by invalidating every token issued so far.
    """
    return await logout_user(db, current_user.name)

@router.post("/change-password", response_model=MessageResponse)
async def change_password_route(
    data: PasswordChange,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user),
):
    return await change_password(db, current_user, data)

@router.get("/me", response_model=UserOut)
async def me(current_user = Depends(get_current_user)):
    return current_user
