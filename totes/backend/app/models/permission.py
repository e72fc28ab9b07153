"""
Permission, Role and UserType models for RBAC.

A user has one user type; a user type groups roles; a role groups permissions.
"""
from sqlalchemy import Column, Integer, String, Text, Table, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from app.database import Base


role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column("permission_id", Integer, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True),
)

user_type_roles = Table(
    "user_type_roles",
    Base.metadata,
    Column("user_type_id", Integer, ForeignKey("user_types.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Permission(Base):
    """Permission; the primary key is the permission code (e.g. 9001)"""
    __tablename__ = "permissions"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)

    roles = relationship("Role", secondary=role_permissions, back_populates="permissions")


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    permissions = relationship("Permission", secondary=role_permissions, back_populates="roles")
    user_types = relationship("UserType", secondary=user_type_roles, back_populates="roles")


class UserType(Base):
    __tablename__ = "user_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(Text)

    roles = relationship("Role", secondary=user_type_roles, back_populates="user_types")
    users = relationship("User", back_populates="user_type")
