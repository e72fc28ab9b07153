"""
Startup/Initialization Service

Runs on application startup:
1. Create tables (create_all, no migrations)
2. Seed reference data: user states, identifier types, item types, order states
3. Sync the permissions table with permission_config
4. Ensure the ADMINISTRATOR role (all permissions) and the ADMIN user type
5. Create the first administrator from ADMIN_EMAIL / ADMIN_PASSWORD when there are no users

Every step is idempotent; rows that already exist are left alone.
"""
import logging
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.config import settings
from app.database import Base, SessionLocal, engine
from app.models import (
    IdentifierType, ItemType, OrderStateType, Permission, Role, User, UserStateType, UserType,
)
from app.permission_config import ALL_PERMISSIONS
from app.services.purchase_order_service import (
    ORDER_STATE_CANCELLED, ORDER_STATE_PAID, ORDER_STATE_PENDING,
)
from app.services.user_service import (
    USER_STATE_ACTIVE, USER_STATE_BLOCKED, USER_STATE_INACTIVE, UserService,
)

logger = logging.getLogger(__name__)

ADMIN_ROLE_NAME = "ADMINISTRATOR"
ADMIN_USER_TYPE_NAME = "ADMIN"

USER_STATES = {
    USER_STATE_ACTIVE: "ACTIVE",
    USER_STATE_INACTIVE: "INACTIVE",
    USER_STATE_BLOCKED: "BLOCKED",
}
ORDER_STATES = {
    ORDER_STATE_PENDING: "PENDING",
    ORDER_STATE_PAID: "PAID",
    ORDER_STATE_CANCELLED: "CANCELLED",
}
IDENTIFIER_TYPES = ["CC", "NIT", "CE", "PASSPORT"]
ITEM_TYPES = ["PRODUCT", "SERVICE"]


class StartupService:
    """Schema creation and reference data seeding"""

    @staticmethod
    def _seed_fixed_ids(db: Session, model, rows: Dict[int, str]) -> None:
        existing = {r.id for r in db.query(model.id).all()}
        for row_id, description in rows.items():
            if row_id not in existing:
                db.add(model(id=row_id, description=description))

    @staticmethod
    def _seed_names(db: Session, model, names) -> None:
        existing = {r.name for r in db.query(model.name).all()}
        for name in names:
            if name not in existing:
                db.add(model(name=name))

    @staticmethod
    def sync_permissions(db: Session) -> int:
        """Insert missing permission codes. Returns how many were added."""
        existing = {r.id for r in db.query(Permission.id).all()}
        added = 0
        for code, name in sorted(ALL_PERMISSIONS.items()):
            if code not in existing:
                db.add(Permission(id=code, name=name, description=name.replace("_", " ")))
                added += 1
        return added

    @staticmethod
    def ensure_admin_role(db: Session) -> UserType:
        """ADMINISTRATOR role holding every permission, attached to the ADMIN user type."""
        role = db.query(Role).filter(Role.name == ADMIN_ROLE_NAME).first()
        if not role:
            role = Role(name=ADMIN_ROLE_NAME, description="Full access")
            db.add(role)
        db.flush()
        held = {p.id for p in role.permissions}
        missing = db.query(Permission).filter(~Permission.id.in_(held)).all() if held else db.query(Permission).all()
        role.permissions.extend(missing)

        user_type = db.query(UserType).filter(UserType.name == ADMIN_USER_TYPE_NAME).first()
        if not user_type:
            user_type = UserType(name=ADMIN_USER_TYPE_NAME, description="Administrators")
            db.add(user_type)
        if role not in user_type.roles:
            user_type.roles.append(role)
        db.flush()
        return user_type

    @staticmethod
    def seed(db: Session) -> None:
        StartupService._seed_fixed_ids(db, UserStateType, USER_STATES)
        StartupService._seed_fixed_ids(db, OrderStateType, ORDER_STATES)
        StartupService._seed_names(db, IdentifierType, IDENTIFIER_TYPES)
        StartupService._seed_names(db, ItemType, ITEM_TYPES)
        db.flush()
        added = StartupService.sync_permissions(db)
        db.flush()
        StartupService.ensure_admin_role(db)
        db.commit()
        if added:
            logger.info("Seeded %d permission(s)", added)

    @staticmethod
    def ensure_admin_user(db: Session) -> Optional[User]:
        """Create the first administrator when the users table is empty and ADMIN_PASSWORD is set."""
        if db.query(func.count(User.id)).scalar():
            return None
        if not settings.ADMIN_PASSWORD:
            logger.warning("No users exist and ADMIN_PASSWORD is not set; no administrator created")
            return None
        user_type = db.query(UserType).filter(UserType.name == ADMIN_USER_TYPE_NAME).first()
        if not user_type:
            user_type = StartupService.ensure_admin_role(db)
            db.commit()
        user = UserService.create(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, user_type.id)
        logger.info("Created initial administrator %s", user.email)
        return user


def init_db() -> None:
    """Create tables and seed reference data."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        StartupService.seed(db)
        StartupService.ensure_admin_user(db)
    finally:
        db.close()
