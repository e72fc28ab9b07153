"""
Customer service
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import Customer, IdentifierType
from app.schemas.people import CustomerBase
from app.services.errors import ConflictError, NotFoundError
from app.services.query_helpers import contains_ci, id_prefix


class CustomerService:

    @staticmethod
    def get_by_id(db: Session, customer_id: int) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.id == customer_id).first()

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[Customer]:
        return db.query(Customer).filter(Customer.email == (email or "").strip().lower()).first()

    @staticmethod
    def get_by_customer_id(db: Session, personal_id: str) -> Optional[Customer]:
        """Lookup by personal/tax document number."""
        return db.query(Customer).filter(Customer.customer_id == (personal_id or "").strip()).first()

    @staticmethod
    def get_all(db: Session) -> List[Customer]:
        return db.query(Customer).order_by(Customer.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Customer]:
        return db.query(Customer).filter(id_prefix(Customer.id, query)).order_by(Customer.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Customer]:
        return db.query(Customer).filter(contains_ci(Customer.customer_name, query)).order_by(Customer.customer_name).all()

    @staticmethod
    def search_by_lastname(db: Session, query: str) -> List[Customer]:
        return db.query(Customer).filter(contains_ci(Customer.lastname, query)).order_by(Customer.lastname).all()

    @staticmethod
    def _validate(db: Session, data: CustomerBase, customer_pk: Optional[int] = None) -> None:
        if not db.query(IdentifierType.id).filter(IdentifierType.id == data.identifier_type_id).first():
            raise ValueError(f"Identifier type {data.identifier_type_id} does not exist")
        same_doc = db.query(Customer.id).filter(Customer.customer_id == data.customer_id.strip())
        same_email = db.query(Customer.id).filter(Customer.email == data.email.lower())
        if customer_pk is not None:
            same_doc = same_doc.filter(Customer.id != customer_pk)
            same_email = same_email.filter(Customer.id != customer_pk)
        if same_doc.first():
            raise ConflictError(f"A customer with document {data.customer_id} already exists")
        if same_email.first():
            raise ConflictError(f"A customer with email {data.email} already exists")

    @staticmethod
    def _values(data: CustomerBase) -> dict:
        values = data.model_dump()
        values["email"] = data.email.lower()
        values["customer_id"] = data.customer_id.strip()
        return values

    @staticmethod
    def create(db: Session, data: CustomerBase) -> Customer:
        CustomerService._validate(db, data)
        customer = Customer(**CustomerService._values(data))
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def update(db: Session, customer_pk: int, data: CustomerBase) -> Customer:
        customer = CustomerService.get_by_id(db, customer_pk)
        if not customer:
            raise NotFoundError("Customer not found")
        CustomerService._validate(db, data, customer_pk=customer_pk)
        for key, value in CustomerService._values(data).items():
            setattr(customer, key, value)
        db.commit()
        db.refresh(customer)
        return customer
