"""
Authentication API: login with email + password, and the current user.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import client_ip, get_current_user
from app.models import User
from app.schemas.user import LoginRequest, LoginResponse, MeResponse, UserResponse
from app.services.log_service import LogService
from app.services.permission_service import PermissionService
from app.services.user_service import UserService
from app.utils.auth_internal import create_access_token

logger = logging.getLogger(__name__)
router = APIRouter()


def _register(db: Session, email: str, message: str, ip_address) -> None:
    try:
        LogService.register(db, email, message, ip_address)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Could not register login log for %s: %s", email, e)


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Exchange email + password for a bearer token. Only ACTIVE users may log in."""
    email = (body.email or "").strip().lower()
    ip_address = client_ip(request)
    user = UserService.authenticate(db, email, body.password)
    if not user:
        _register(db, email, "Failed login attempt", ip_address)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = create_access_token(user.id, user.email)
    _register(db, user.email, "User logged in", ip_address)
    db.refresh(user)
    return LoginResponse(access_token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=MeResponse)
def me(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Current user and the permission codes they hold."""
    return MeResponse(
        user=UserResponse.model_validate(user),
        permissions=PermissionService.user_permission_codes(db, user),
    )
