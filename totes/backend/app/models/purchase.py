"""
Purchase order models
"""
from sqlalchemy import Column, Integer, String, Numeric, Table, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.types import TIMESTAMP
from app.database import Base


purchase_order_discounts = Table(
    "purchase_order_discounts",
    Base.metadata,
    Column("purchase_order_id", Integer, ForeignKey("purchase_orders.id", ondelete="CASCADE"), primary_key=True),
    Column("discount_type_id", Integer, ForeignKey("discount_types.id"), primary_key=True),
)

purchase_order_taxes = Table(
    "purchase_order_taxes",
    Base.metadata,
    Column("purchase_order_id", Integer, ForeignKey("purchase_orders.id", ondelete="CASCADE"), primary_key=True),
    Column("tax_type_id", Integer, ForeignKey("tax_types.id"), primary_key=True),
)


class OrderStateType(Base):
    """PENDING, PAID, CANCELLED"""
    __tablename__ = "order_state_types"

    id = Column(Integer, primary_key=True, autoincrement=False)
    description = Column(String(50), nullable=False, unique=True)


class PurchaseOrder(Base):
    """
    Customer purchase order.

    Created PENDING. PENDING -> PAID generates an Invoice and takes the stock;
    PENDING -> CANCELLED closes it. PAID and CANCELLED are terminal.
    """
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True)
    date_time = Column(TIMESTAMP(timezone=True), nullable=False)
    seller_id = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True)
    responsible_id = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    subtotal = Column(Numeric(20, 4), nullable=False, default=0)
    total = Column(Numeric(20, 4), nullable=False, default=0)
    order_state_id = Column(Integer, ForeignKey("order_state_types.id"), nullable=False)

    # Relationships
    order_state = relationship("OrderStateType")
    customer = relationship("Customer")
    seller = relationship("Employee", foreign_keys=[seller_id])
    responsible = relationship("Employee", foreign_keys=[responsible_id])
    items = relationship("PurchaseOrderItem", back_populates="purchase_order", cascade="all, delete-orphan")
    discounts = relationship("DiscountType", secondary=purchase_order_discounts)
    taxes = relationship("TaxType", secondary=purchase_order_taxes)
    invoice = relationship("Invoice", back_populates="purchase_order", uselist=False)


class PurchaseOrderItem(Base):
    """Purchase order line: amount units of an item"""
    __tablename__ = "purchase_order_items"

    id = Column(Integer, primary_key=True)
    purchase_order_id = Column(Integer, ForeignKey("purchase_orders.id", ondelete="CASCADE"), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    amount = Column(Integer, nullable=False)

    purchase_order = relationship("PurchaseOrder", back_populates="items")
    item = relationship("Item")
