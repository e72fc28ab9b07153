"""
Employee service
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models import Employee, IdentifierType, User
from app.schemas.people import EmployeeBase
from app.services.errors import ConflictError, NotFoundError
from app.services.query_helpers import contains_ci, id_prefix


class EmployeeService:

    @staticmethod
    def get_by_id(db: Session, employee_id: int) -> Optional[Employee]:
        return db.query(Employee).filter(Employee.id == employee_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Employee]:
        return db.query(Employee).order_by(Employee.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Employee]:
        return db.query(Employee).filter(id_prefix(Employee.id, query)).order_by(Employee.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Employee]:
        return (
            db.query(Employee)
            .filter(or_(contains_ci(Employee.names, query), contains_ci(Employee.last_names, query)))
            .order_by(Employee.names.asc())
            .all()
        )

    @staticmethod
    def _validate(db: Session, data: EmployeeBase, employee_id: Optional[int] = None) -> None:
        if not db.query(IdentifierType.id).filter(IdentifierType.id == data.identifier_type_id).first():
            raise ValueError(f"Identifier type {data.identifier_type_id} does not exist")
        dup = db.query(Employee.id).filter(Employee.personal_id == data.personal_id)
        if employee_id is not None:
            dup = dup.filter(Employee.id != employee_id)
        if dup.first():
            raise ConflictError(f"An employee with personal id {data.personal_id} already exists")
        if data.user_id is not None:
            if not db.query(User.id).filter(User.id == data.user_id).first():
                raise NotFoundError(f"User {data.user_id} not found")
            linked = db.query(Employee.id).filter(Employee.user_id == data.user_id)
            if employee_id is not None:
                linked = linked.filter(Employee.id != employee_id)
            if linked.first():
                raise ConflictError(f"User {data.user_id} is already linked to another employee")

    @staticmethod
    def create(db: Session, data: EmployeeBase) -> Employee:
        EmployeeService._validate(db, data)
        employee = Employee(**data.model_dump())
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def update(db: Session, employee_id: int, data: EmployeeBase) -> Employee:
        employee = EmployeeService.get_by_id(db, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        EmployeeService._validate(db, data, employee_id=employee_id)
        for key, value in data.model_dump().items():
            setattr(employee, key, value)
        db.commit()
        db.refresh(employee)
        return employee

    @staticmethod
    def delete(db: Session, employee_id: int) -> None:
        employee = EmployeeService.get_by_id(db, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        db.delete(employee)
        db.commit()
