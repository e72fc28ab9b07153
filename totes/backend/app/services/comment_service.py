"""
Comment service
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models import Comment
from app.schemas.people import CommentBase
from app.services.errors import NotFoundError
from app.services.query_helpers import contains_ci, id_prefix


class CommentService:

    @staticmethod
    def get_by_id(db: Session, comment_id: int) -> Optional[Comment]:
        return db.query(Comment).filter(Comment.id == comment_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Comment]:
        return db.query(Comment).order_by(Comment.id.desc()).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Comment]:
        return db.query(Comment).filter(id_prefix(Comment.id, query)).order_by(Comment.id).all()

    @staticmethod
    def search_by_email(db: Session, query: str) -> List[Comment]:
        return db.query(Comment).filter(contains_ci(Comment.email, query)).order_by(Comment.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Comment]:
        return (
            db.query(Comment)
            .filter(or_(contains_ci(Comment.name, query), contains_ci(Comment.lastname, query)))
            .order_by(Comment.id)
            .all()
        )

    @staticmethod
    def create(db: Session, data: CommentBase) -> Comment:
        values = data.model_dump()
        values["email"] = data.email.lower()
        comment = Comment(**values)
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment

    @staticmethod
    def update(db: Session, comment_id: int, data: CommentBase) -> Comment:
        comment = CommentService.get_by_id(db, comment_id)
        if not comment:
            raise NotFoundError("Comment not found")
        for key, value in data.model_dump().items():
            setattr(comment, key, value)
        comment.email = data.email.lower()
        db.commit()
        db.refresh(comment)
        return comment
