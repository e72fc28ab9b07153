"""
Purchase order schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from app.schemas.billing import BillingItem
from app.schemas.sale import InvoiceResponse


class OrderStateTypeResponse(BaseModel):
    id: int
    description: str

    class Config:
        from_attributes = True


class PurchaseOrderCreate(BaseModel):
    """Create purchase order request; the order starts PENDING"""
    items: List[BillingItem] = Field(..., min_length=1)
    discounts: List[int] = []
    taxes: List[int] = []
    customer_id: Optional[int] = None
    seller_id: Optional[int] = None
    responsible_id: Optional[int] = None


class PurchaseOrderUpdate(BaseModel):
    """Full update of a PENDING order"""
    seller_id: Optional[int] = None
    customer_id: Optional[int] = None
    responsible_id: Optional[int] = None
    date_time: Optional[datetime] = None
    items: List[BillingItem] = Field(..., min_length=1)
    discounts: List[int] = []
    taxes: List[int] = []


class PurchaseOrderStateUpdate(BaseModel):
    order_state_id: int


class PurchaseOrderResponse(BaseModel):
    id: int
    date_time: datetime
    seller_id: Optional[int] = None
    customer_id: Optional[int] = None
    responsible_id: Optional[int] = None
    subtotal: Decimal
    total: Decimal
    order_state_id: int
    items: List[BillingItem] = []
    discounts: List[int] = []
    taxes: List[int] = []

    @classmethod
    def from_model(cls, order) -> "PurchaseOrderResponse":
        return cls(
            id=order.id,
            date_time=order.date_time,
            seller_id=order.seller_id,
            customer_id=order.customer_id,
            responsible_id=order.responsible_id,
            subtotal=order.subtotal,
            total=order.total,
            order_state_id=order.order_state_id,
            items=[BillingItem(item_id=line.item_id, amount=line.amount) for line in order.items],
            discounts=sorted(d.id for d in order.discounts),
            taxes=sorted(t.id for t in order.taxes),
        )


class PurchaseOrderStateChangeResponse(BaseModel):
    """invoice is set only when the transition generated one (-> PAID)"""
    purchase_order: PurchaseOrderResponse
    invoice: Optional[InvoiceResponse] = None
