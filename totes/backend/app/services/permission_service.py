"""
RBAC services: permissions, roles and user types.

A user holds permission P iff some role of the user's type contains P.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Permission, Role, User, UserType, role_permissions, user_type_roles
from app.services.query_helpers import contains_ci, id_prefix


class PermissionService:

    @staticmethod
    def user_has_permission(db: Session, user: User, permission_id: int) -> bool:
        """Single join query: user_type_roles -> role_permissions."""
        row = (
            db.query(role_permissions.c.permission_id)
            .join(user_type_roles, user_type_roles.c.role_id == role_permissions.c.role_id)
            .filter(
                user_type_roles.c.user_type_id == user.user_type_id,
                role_permissions.c.permission_id == permission_id,
            )
            .first()
        )
        return row is not None

    @staticmethod
    def user_permission_codes(db: Session, user: User) -> List[int]:
        rows = (
            db.query(role_permissions.c.permission_id)
            .join(user_type_roles, user_type_roles.c.role_id == role_permissions.c.role_id)
            .filter(user_type_roles.c.user_type_id == user.user_type_id)
            .distinct()
            .all()
        )
        return sorted(r[0] for r in rows)

    @staticmethod
    def get_by_id(db: Session, permission_id: int) -> Optional[Permission]:
        return db.query(Permission).filter(Permission.id == permission_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Permission]:
        return db.query(Permission).order_by(Permission.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Permission]:
        return db.query(Permission).filter(id_prefix(Permission.id, query)).order_by(Permission.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Permission]:
        return db.query(Permission).filter(contains_ci(Permission.name, query)).order_by(Permission.id).all()


class RoleService:

    @staticmethod
    def get_by_id(db: Session, role_id: int) -> Optional[Role]:
        return db.query(Role).filter(Role.id == role_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Role]:
        return db.query(Role).order_by(Role.id).all()

    @staticmethod
    def exists(db: Session, role_id: int) -> bool:
        return db.query(Role.id).filter(Role.id == role_id).first() is not None

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Role]:
        return db.query(Role).filter(id_prefix(Role.id, query)).order_by(Role.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Role]:
        return db.query(Role).filter(contains_ci(Role.name, query)).order_by(Role.id).all()


class UserTypeService:

    @staticmethod
    def get_by_id(db: Session, user_type_id: int) -> Optional[UserType]:
        return db.query(UserType).filter(UserType.id == user_type_id).first()

    @staticmethod
    def get_all(db: Session) -> List[UserType]:
        return db.query(UserType).order_by(UserType.id).all()

    @staticmethod
    def exists(db: Session, user_type_id: int) -> bool:
        return db.query(UserType.id).filter(UserType.id == user_type_id).first() is not None

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[UserType]:
        return db.query(UserType).filter(id_prefix(UserType.id, query)).order_by(UserType.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[UserType]:
        return db.query(UserType).filter(contains_ci(UserType.name, query)).order_by(UserType.id).all()
