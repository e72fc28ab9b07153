"""
Identifier types, employees, customers and customer comments
"""
from sqlalchemy import Column, Integer, String, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from app.database import Base


class IdentifierType(Base):
    """Kind of personal document (CC, NIT, CE, PASSPORT)"""
    __tablename__ = "identifier_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    names = Column(String(255), nullable=False)
    last_names = Column(String(255), nullable=False)
    personal_id = Column(String(50), nullable=False, unique=True)
    identifier_type_id = Column(Integer, ForeignKey("identifier_types.id"), nullable=False)
    residential_address = Column(Text)
    phone_numbers = Column(String(255))
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), unique=True, nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    identifier_type = relationship("IdentifierType")
    user = relationship("User", back_populates="employee")


class Customer(Base):
    """Customer; customer_id is the personal/tax document number, id is internal"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    customer_name = Column(String(255), nullable=False)
    lastname = Column(String(255))
    customer_id = Column(String(50), nullable=False, unique=True)
    identifier_type_id = Column(Integer, ForeignKey("identifier_types.id"), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone_numbers = Column(String(255))
    address = Column(Text)
    is_business = Column(Boolean, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    identifier_type = relationship("IdentifierType")
    appointments = relationship("Appointment", back_populates="customer")


class Comment(Base):
    """Comment left by a visitor or customer (contact form)"""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    lastname = Column(String(255))
    email = Column(String(255), nullable=False, index=True)
    phone_number = Column(String(50))
    comment = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
