"""
User service: account CRUD, state changes and credential checks
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import User, UserStateType, UserType
from app.services.errors import ConflictError, NotFoundError
from app.services.query_helpers import contains_ci, id_prefix
from app.utils.auth_internal import hash_password, validate_new_password, verify_password

logger = logging.getLogger(__name__)

# Seeded user_state_types ids
USER_STATE_ACTIVE = 1
USER_STATE_INACTIVE = 2
USER_STATE_BLOCKED = 3


class UserService:

    @staticmethod
    def get_by_id(db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == (email or "").strip().lower()).first()

    @staticmethod
    def get_all(db: Session) -> List[User]:
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[User]:
        return db.query(User).filter(id_prefix(User.id, query)).order_by(User.id).all()

    @staticmethod
    def search_by_email(db: Session, query: str) -> List[User]:
        return db.query(User).filter(contains_ci(User.email, query)).order_by(User.id).all()

    @staticmethod
    def _check_user_type(db: Session, user_type_id: int) -> None:
        if not db.query(UserType.id).filter(UserType.id == user_type_id).first():
            raise ValueError(f"User type {user_type_id} does not exist")

    @staticmethod
    def _check_state_type(db: Session, state_id: int) -> None:
        if not db.query(UserStateType.id).filter(UserStateType.id == state_id).first():
            raise ValueError(f"User state type {state_id} does not exist")

    @staticmethod
    def create(
        db: Session,
        email: str,
        password: str,
        user_type_id: int,
        user_state_type_id: Optional[int] = None,
    ) -> User:
        email = email.strip().lower()
        if UserService.get_by_email(db, email):
            raise ConflictError(f"A user with email {email} already exists")
        error = validate_new_password(password)
        if error:
            raise ValueError(error)
        UserService._check_user_type(db, user_type_id)
        state_id = user_state_type_id or USER_STATE_ACTIVE
        UserService._check_state_type(db, state_id)

        user = User(
            email=email,
            password_hash=hash_password(password),
            user_type_id=user_type_id,
            user_state_type_id=state_id,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created user %s (type %s)", user.email, user_type_id)
        return user

    @staticmethod
    def update(
        db: Session,
        user_id: int,
        email: str,
        user_type_id: int,
        password: Optional[str] = None,
    ) -> User:
        user = UserService.get_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        email = email.strip().lower()
        other = UserService.get_by_email(db, email)
        if other and other.id != user.id:
            raise ConflictError(f"A user with email {email} already exists")
        UserService._check_user_type(db, user_type_id)
        if password:
            error = validate_new_password(password)
            if error:
                raise ValueError(error)
            user.password_hash = hash_password(password)
        user.email = email
        user.user_type_id = user_type_id
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_state(db: Session, user_id: int, user_state_type_id: int) -> User:
        user = UserService.get_by_id(db, user_id)
        if not user:
            raise NotFoundError("User not found")
        UserService._check_state_type(db, user_state_type_id)
        user.user_state_type_id = user_state_type_id
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[User]:
        """Return the user if credentials match and the account is ACTIVE, else None."""
        user = UserService.get_by_email(db, email)
        if not user or not verify_password(password, user.password_hash):
            return None
        if user.user_state_type_id != USER_STATE_ACTIVE:
            logger.info("Login refused for %s: account state %s", user.email, user.user_state_type_id)
            return None
        return user
