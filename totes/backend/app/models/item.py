"""
Item models: catalog items, their types, additional expenses and price history
"""
from sqlalchemy import Column, Integer, String, Boolean, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from app.database import Base


class ItemType(Base):
    """PRODUCT or SERVICE"""
    __tablename__ = "item_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)


class Item(Base):
    """
    Sellable item (product or service)

    stock is a whole-unit count; it only goes down through invoicing
    (purchase order paid, direct invoice) and external sales.
    item_state False hides the item from sale without deleting it.
    """
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    stock = Column(Integer, nullable=False, default=0)
    selling_price = Column(Numeric(20, 4), nullable=False)
    purchase_price = Column(Numeric(20, 4), nullable=False, default=0)
    item_state = Column(Boolean, nullable=False, default=True)
    item_type_id = Column(Integer, ForeignKey("item_types.id"), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    item_type = relationship("ItemType")
    additional_expenses = relationship("AdditionalExpense", back_populates="item", cascade="all, delete-orphan")
    historical_prices = relationship(
        "HistoricalItemPrice",
        back_populates="item",
        cascade="all, delete-orphan",
        order_by="HistoricalItemPrice.id",
    )


class AdditionalExpense(Base):
    """Extra cost attached to an item (shipping, packaging, ...)"""
    __tablename__ = "additional_expenses"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False)
    expense = Column(Numeric(20, 4), nullable=False)
    description = Column(Text)

    item = relationship("Item", back_populates="additional_expenses")


class HistoricalItemPrice(Base):
    """Selling price snapshot, appended whenever an item's selling price changes"""
    __tablename__ = "historical_item_prices"

    id = Column(Integer, primary_key=True)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    price = Column(Numeric(20, 4), nullable=False)
    modified_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    item = relationship("Item", back_populates="historical_prices")
