"""
Request dependencies: authentication, permission checks and the audit log.

Every protected handler declares

    audit: AuditContext = Depends(require_permission(PERMISSION_X, "DoSomething"))

which, in order:
  1. resolves the caller from the Bearer token (401 if missing/invalid/not active),
  2. checks the permission code against the caller's user type roles
     (logs the denial and returns 403 if missing),
  3. writes the "Attempting to ..." log (500 if the audit write fails),
  4. hands the handler an AuditContext with the session, user and a log() helper.
"""
import logging
import re
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User
from app.services.errors import ConflictError, NotFoundError
from app.services.log_service import LogService
from app.services.permission_service import PermissionService
from app.services.user_service import USER_STATE_ACTIVE
from app.utils.auth_internal import CLAIM_SUB, decode_access_token

logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> Optional[str]:
    auth = request.headers.get("Authorization")
    return (auth[7:].strip() if auth and auth.startswith("Bearer ") else None) or None


def client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Require valid access token for an ACTIVE user. Raises 401 otherwise."""
    token = _bearer_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        user_id = int(payload[CLAIM_SUB])
    except (ValueError, TypeError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = db.query(User).filter(User.id == user_id).first()
    if not user or user.user_state_type_id != USER_STATE_ACTIVE:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def _split_action(action: str) -> str:
    """GetItemByID -> 'get item by id' for human-readable log lines."""
    words = re.findall(r"[A-Z]+(?=[A-Z][a-z]|$)|[A-Z]?[a-z]+|\d+", action)
    return " ".join(w.lower() for w in words) or action


class AuditContext:
    """Per-request handle given to handlers after the permission check passed."""

    def __init__(
        self,
        db: Session,
        user: User,
        action: str,
        ip_address: Optional[str] = None,
        user_email: Optional[str] = None,
    ):
        self.db = db
        self.user = user
        # Captured up front; a rollback expires the instance.
        self.user_email = user_email or user.email
        self.action = action
        self.ip_address = ip_address

    def log(self, message: str) -> None:
        """Best-effort audit write; failures go to the application log only."""
        try:
            LogService.register(self.db, self.user_email, message, self.ip_address)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("Could not register user log (%s) for %s: %s", self.action, self.user_email, e)

    def fail(self, status_code: int, detail: str, message: Optional[str] = None) -> HTTPException:
        """Log the failure and return the HTTPException for the caller to raise."""
        self.log(message or f"{self.action} failed: {detail}")
        return HTTPException(status_code=status_code, detail=detail)

    def service_error(self, error: ValueError) -> HTTPException:
        """Map a service error to 404/409/400, logging it."""
        if isinstance(error, NotFoundError):
            code = status.HTTP_404_NOT_FOUND
        elif isinstance(error, ConflictError):
            code = status.HTTP_409_CONFLICT
        else:
            code = status.HTTP_400_BAD_REQUEST
        return self.fail(code, str(error))


def require_permission(permission_id: int, action: str) -> Callable[..., AuditContext]:
    """Build the dependency that gates one handler behind one permission code."""

    def dependency(
        request: Request,
        user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> AuditContext:
        ip_address = client_ip(request)
        email = user.email
        if not PermissionService.user_has_permission(db, user, permission_id):
            try:
                LogService.register(db, email, f"Permission denied for {action}", ip_address)
            except SQLAlchemyError as e:
                db.rollback()
                logger.warning("Could not register denial log for %s: %s", email, e)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Permission denied")

        try:
            LogService.register(db, email, f"Attempting to {_split_action(action)}", ip_address)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Error registering log for %s (%s): %s", email, action, e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error registering log",
            )
        return AuditContext(db, user, action, ip_address, user_email=email)

    return dependency
