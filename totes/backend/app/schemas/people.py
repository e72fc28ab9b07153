"""
Employee, customer, identifier type and comment schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class IdentifierTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


# =====================================================
# Employee Schemas
# =====================================================

class EmployeeBase(BaseModel):
    names: str = Field(..., min_length=1)
    last_names: str = Field(..., min_length=1)
    personal_id: str = Field(..., min_length=1, description="Document number, unique")
    identifier_type_id: int
    residential_address: Optional[str] = None
    phone_numbers: Optional[str] = None
    user_id: Optional[int] = Field(None, description="Linked login user, at most one employee per user")


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(EmployeeBase):
    pass


class EmployeeResponse(EmployeeBase):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# =====================================================
# Customer Schemas
# =====================================================

class CustomerBase(BaseModel):
    customer_name: str = Field(..., min_length=1)
    lastname: Optional[str] = None
    customer_id: str = Field(..., min_length=1, description="Personal/tax document number, unique")
    identifier_type_id: int
    email: EmailStr
    phone_numbers: Optional[str] = None
    address: Optional[str] = None
    is_business: bool = False


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    pass


class CustomerResponse(CustomerBase):
    id: int
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# =====================================================
# Comment Schemas
# =====================================================

class CommentBase(BaseModel):
    name: str = Field(..., min_length=1)
    lastname: Optional[str] = None
    email: EmailStr
    phone_number: Optional[str] = None
    comment: str = Field(..., min_length=1)


class CommentCreate(CommentBase):
    pass


class CommentUpdate(CommentBase):
    pass


class CommentResponse(CommentBase):
    id: int
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
