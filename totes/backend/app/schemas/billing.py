"""
Billing schemas: line items, discount/tax types and calculation results
"""
from pydantic import BaseModel, Field, model_validator
from typing import List
from decimal import Decimal


class BillingItem(BaseModel):
    """One line: amount units of item_id"""
    item_id: int
    amount: int = Field(..., gt=0)


class BillingRequest(BaseModel):
    items: List[BillingItem] = Field(..., min_length=1)
    discounts: List[int] = []
    taxes: List[int] = []


class SubtotalResponse(BaseModel):
    subtotal: Decimal


class TotalResponse(BaseModel):
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal


class AdjustmentTypeBase(BaseModel):
    """Shared shape of discount and tax types"""
    name: str = Field(..., min_length=1, max_length=100)
    value: Decimal = Field(..., ge=0)
    is_percentage: bool = True

    @model_validator(mode="after")
    def _percentage_within_100(self):
        if self.is_percentage and self.value > 100:
            raise ValueError("Percentage value must be between 0 and 100")
        return self


class DiscountTypeCreate(AdjustmentTypeBase):
    pass


class DiscountTypeResponse(AdjustmentTypeBase):
    id: int

    class Config:
        from_attributes = True


class TaxTypeCreate(AdjustmentTypeBase):
    pass


class TaxTypeResponse(AdjustmentTypeBase):
    id: int

    class Config:
        from_attributes = True
