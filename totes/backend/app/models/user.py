"""
User, UserStateType and UserLog models
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from app.database import Base


class UserStateType(Base):
    """User lifecycle state (ACTIVE, INACTIVE, BLOCKED)"""
    __tablename__ = "user_state_types"

    id = Column(Integer, primary_key=True, autoincrement=False)
    description = Column(String(50), nullable=False, unique=True)


class User(Base):
    """
    User model

    Only users in the ACTIVE state can log in or call protected endpoints.
    Effective permissions come from user_type -> roles -> permissions.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    user_type_id = Column(Integer, ForeignKey("user_types.id"), nullable=False)
    user_state_type_id = Column(Integer, ForeignKey("user_state_types.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user_type = relationship("UserType", back_populates="users")
    user_state_type = relationship("UserStateType")
    employee = relationship("Employee", back_populates="user", uselist=False)


class UserLog(Base):
    """Audit trail: one row per handler step (attempt, denial, failure, success)"""
    __tablename__ = "user_logs"

    id = Column(Integer, primary_key=True)
    user_email = Column(String(255), nullable=False, index=True)
    log = Column(Text, nullable=False)
    ip_address = Column(String(64))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
