"""
Discount and tax types applied to purchase orders and invoices
"""
from sqlalchemy import Column, Integer, String, Boolean, Numeric
from app.database import Base


class DiscountType(Base):
    """Discount: value is a percentage of the subtotal when is_percentage, else a fixed amount"""
    __tablename__ = "discount_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    value = Column(Numeric(20, 4), nullable=False)
    is_percentage = Column(Boolean, nullable=False, default=True)


class TaxType(Base):
    """Tax: value is a percentage of the discounted base when is_percentage, else a fixed amount"""
    __tablename__ = "tax_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)
    value = Column(Numeric(20, 4), nullable=False)
    is_percentage = Column(Boolean, nullable=False, default=True)
