# cablequote/schemas/user_schemas.py
import enum
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class UserRole(str, enum.Enum):
    ADMIN = "Admin"
    SALES_PERSON = "Sales Person"
    MANAGEMENT = "Management"
    SCM = "SCM"
    VIEWER = "Viewer"


class UserLogin(BaseModel):
    name: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: Optional[str] = None

class UserBase(BaseModel):
    name: str
    role: UserRole

class UserCreate(UserBase):
    password: str = Field(..., min_length=4)

class UserUpdate(BaseModel):
    password: Optional[str] = Field(None, min_length=4)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None

class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=4)

class UserOut(BaseModel):
    name: str
    role: str
    is_active: bool
    last_login: Optional[datetime] = None

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    msg: str

class UserResponse(BaseModel):
    msg: str
    data: Optional[UserOut] = None

class UsersListResponse(BaseModel):
    msg: str
    data: List[UserOut]
