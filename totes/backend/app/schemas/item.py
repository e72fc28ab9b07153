"""
Item schemas
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class ItemTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ItemBase(BaseModel):
    """Item base schema"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    stock: int = Field(0, ge=0, description="Units on hand")
    selling_price: Decimal = Field(..., ge=0)
    purchase_price: Decimal = Field(Decimal("0"), ge=0)
    item_type_id: int


class ItemCreate(ItemBase):
    """Create item request; new items start active"""
    item_state: bool = True


class ItemUpdate(ItemBase):
    """Full update; a changed selling_price is appended to the price history"""
    pass


class ItemStateUpdate(BaseModel):
    item_state: bool


class ItemResponse(ItemBase):
    id: int
    item_state: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StockCheckResponse(BaseModel):
    item_id: int
    stock: int
    requested: int
    available: bool


# =====================================================
# Additional Expense Schemas
# =====================================================

class AdditionalExpenseBase(BaseModel):
    name: str = Field(..., min_length=1)
    item_id: int
    expense: Decimal = Field(..., ge=0)
    description: Optional[str] = None


class AdditionalExpenseCreate(AdditionalExpenseBase):
    pass


class AdditionalExpenseUpdate(AdditionalExpenseBase):
    pass


class AdditionalExpenseResponse(AdditionalExpenseBase):
    id: int

    class Config:
        from_attributes = True


class HistoricalItemPriceResponse(BaseModel):
    id: int
    item_id: int
    price: Decimal
    modified_at: Optional[datetime] = None

    class Config:
        from_attributes = True
