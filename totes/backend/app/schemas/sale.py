"""
Invoice and external sale schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from app.schemas.billing import BillingItem


class InvoiceCreate(BaseModel):
    """Direct invoice (not coming from a purchase order)"""
    customer_id: int
    items: List[BillingItem] = Field(..., min_length=1)
    discounts: List[int] = []
    taxes: List[int] = []


class InvoiceItemResponse(BaseModel):
    item_id: int
    amount: int
    unit_price: Decimal

    class Config:
        from_attributes = True


class InvoiceResponse(BaseModel):
    id: int
    enterprise_data: str
    date_time: datetime
    customer_id: int
    purchase_order_id: Optional[int] = None
    subtotal: Decimal
    total: Decimal
    items: List[InvoiceItemResponse] = []
    discounts: List[int] = []
    taxes: List[int] = []

    @classmethod
    def from_model(cls, invoice) -> "InvoiceResponse":
        return cls(
            id=invoice.id,
            enterprise_data=invoice.enterprise_data,
            date_time=invoice.date_time,
            customer_id=invoice.customer_id,
            purchase_order_id=invoice.purchase_order_id,
            subtotal=invoice.subtotal,
            total=invoice.total,
            items=[InvoiceItemResponse.model_validate(line) for line in invoice.items],
            discounts=sorted(d.id for d in invoice.discounts),
            taxes=sorted(t.id for t in invoice.taxes),
        )


# =====================================================
# External Sale Schemas
# =====================================================

class ExternalSaleCreate(BaseModel):
    item_id: int
    amount: int = Field(..., gt=0)
    unit_price: Optional[Decimal] = Field(None, ge=0, description="Defaults to the item's selling price")
    notes: Optional[str] = None


class ExternalSaleResponse(BaseModel):
    id: int
    date_time: datetime
    item_id: int
    amount: int
    unit_price: Decimal
    total: Decimal
    user_email: str
    notes: Optional[str] = None

    class Config:
        from_attributes = True
