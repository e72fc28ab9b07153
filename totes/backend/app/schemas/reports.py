"""
Report schemas
"""
from datetime import date
from decimal import Decimal
from typing import List

from pydantic import BaseModel


class TopItem(BaseModel):
    item_id: int
    name: str
    amount: int


class SalesReportResponse(BaseModel):
    """Sales between start_date and end_date (both inclusive)"""
    start_date: date
    end_date: date
    invoice_count: int
    invoice_total: Decimal
    external_sale_count: int
    external_sale_total: Decimal
    grand_total: Decimal
    top_items: List[TopItem] = []
