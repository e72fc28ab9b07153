"""
User log (audit trail) service
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import UserLog


class LogService:
    """Writes and reads the user_logs audit table"""

    @staticmethod
    def register(db: Session, user_email: str, message: str, ip_address: Optional[str] = None) -> UserLog:
        """Insert one log row and commit. Raises SQLAlchemyError if the write fails."""
        entry = UserLog(user_email=user_email, log=message, ip_address=ip_address)
        db.add(entry)
        db.commit()
        return entry

    @staticmethod
    def get_logs_for_user(db: Session, user_email: str) -> List[UserLog]:
        return (
            db.query(UserLog)
            .filter(UserLog.user_email == (user_email or "").strip().lower())
            .order_by(UserLog.id.desc())
            .all()
        )
