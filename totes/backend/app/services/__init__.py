"""
Business logic services for Totes
"""
from .billing_service import BillingService
from .invoice_service import InvoiceService
from .purchase_order_service import PurchaseOrderService

__all__ = [
    "BillingService",
    "InvoiceService",
    "PurchaseOrderService",
]
