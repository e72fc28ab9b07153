"""
Read-only lookups for seeded reference tables
(user state types, identifier types, item types, order state types).
"""
from typing import List, Optional, Type

from sqlalchemy.orm import Session

from app.database import Base


class CatalogService:

    @staticmethod
    def get_all(db: Session, model: Type[Base]) -> List:
        return db.query(model).order_by(model.id).all()

    @staticmethod
    def get_by_id(db: Session, model: Type[Base], record_id: int) -> Optional[Base]:
        return db.query(model).filter(model.id == record_id).first()
