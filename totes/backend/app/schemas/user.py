"""
User management, RBAC and auth schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime


# =====================================================
# Permission / Role / User Type Schemas
# =====================================================

class PermissionResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class RoleResponse(BaseModel):
    """Role with the codes of its permissions"""
    id: int
    name: str
    description: Optional[str] = None
    permissions: List[int] = []

    @classmethod
    def from_model(cls, role) -> "RoleResponse":
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            permissions=sorted(p.id for p in role.permissions),
        )


class UserTypeResponse(BaseModel):
    """User type with the ids of its roles"""
    id: int
    name: str
    description: Optional[str] = None
    roles: List[int] = []

    @classmethod
    def from_model(cls, user_type) -> "UserTypeResponse":
        return cls(
            id=user_type.id,
            name=user_type.name,
            description=user_type.description,
            roles=sorted(r.id for r in user_type.roles),
        )


class ExistsResponse(BaseModel):
    exists: bool


class UserStateTypeResponse(BaseModel):
    id: int
    description: str

    class Config:
        from_attributes = True


# =====================================================
# User Schemas
# =====================================================

class UserCreate(BaseModel):
    """Schema for creating a new user"""
    email: EmailStr
    password: str = Field(..., description="Min 8 characters, at least one letter and one digit")
    user_type_id: int
    user_state_type_id: Optional[int] = Field(None, description="Defaults to ACTIVE")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "seller@example.com",
                "password": "s3cretpass",
                "user_type_id": 2,
            }
        }


class UserUpdate(BaseModel):
    """Schema for updating user details; password is optional"""
    email: EmailStr
    user_type_id: int
    password: Optional[str] = None


class UserStateUpdate(BaseModel):
    user_state_type_id: int


class UserResponse(BaseModel):
    id: int
    email: str
    user_type_id: int
    user_state_type_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HasPermissionResponse(BaseModel):
    user_id: int
    permission_id: int
    has_permission: bool


class UserLogResponse(BaseModel):
    id: int
    user_email: str
    log: str
    ip_address: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# =====================================================
# Auth Schemas
# =====================================================

class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class MeResponse(BaseModel):
    user: UserResponse
    permissions: List[int]
