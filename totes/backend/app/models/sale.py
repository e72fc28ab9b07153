"""
Sales models: invoices and external sales
"""
from sqlalchemy import Column, Integer, String, Numeric, Text, Table, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.types import TIMESTAMP
from app.database import Base


invoice_discounts = Table(
    "invoice_discounts",
    Base.metadata,
    Column("invoice_id", Integer, ForeignKey("invoices.id", ondelete="CASCADE"), primary_key=True),
    Column("discount_type_id", Integer, ForeignKey("discount_types.id"), primary_key=True),
)

invoice_taxes = Table(
    "invoice_taxes",
    Base.metadata,
    Column("invoice_id", Integer, ForeignKey("invoices.id", ondelete="CASCADE"), primary_key=True),
    Column("tax_type_id", Integer, ForeignKey("tax_types.id"), primary_key=True),
)


class Invoice(Base):
    """
    Sales invoice.

    Either issued directly or generated when a purchase order is paid
    (purchase_order_id set, one invoice per order). Stock is taken at issue time.
    """
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    enterprise_data = Column(Text, nullable=False)
    date_time = Column(TIMESTAMP(timezone=True), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    purchase_order_id = Column(Integer, ForeignKey("purchase_orders.id"), unique=True, nullable=True)
    subtotal = Column(Numeric(20, 4), nullable=False)
    total = Column(Numeric(20, 4), nullable=False)

    # Relationships
    customer = relationship("Customer")
    purchase_order = relationship("PurchaseOrder", back_populates="invoice")
    items = relationship("InvoiceItem", back_populates="invoice", cascade="all, delete-orphan")
    discounts = relationship("DiscountType", secondary=invoice_discounts)
    taxes = relationship("TaxType", secondary=invoice_taxes)


class InvoiceItem(Base):
    """Invoice line; unit_price is the item's selling price when invoiced"""
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    unit_price = Column(Numeric(20, 4), nullable=False)

    invoice = relationship("Invoice", back_populates="items")
    item = relationship("Item")


class ExternalSale(Base):
    """Sale made outside the purchase-order flow (fair, marketplace, phone order)"""
    __tablename__ = "external_sales"

    id = Column(Integer, primary_key=True)
    date_time = Column(TIMESTAMP(timezone=True), nullable=False)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    unit_price = Column(Numeric(20, 4), nullable=False)
    total = Column(Numeric(20, 4), nullable=False)
    user_email = Column(String(255), nullable=False)
    notes = Column(Text)

    item = relationship("Item")
