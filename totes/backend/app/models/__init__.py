"""
Database models for Totes
"""
from app.database import Base

# Import all models
from .permission import Permission, Role, UserType, role_permissions, user_type_roles
from .user import User, UserStateType, UserLog
from .people import IdentifierType, Employee, Customer, Comment
from .item import ItemType, Item, AdditionalExpense, HistoricalItemPrice
from .appointment import Appointment
from .billing import DiscountType, TaxType
from .purchase import OrderStateType, PurchaseOrder, PurchaseOrderItem
from .sale import Invoice, InvoiceItem, ExternalSale

__all__ = [
    "Base",
    "Permission",
    "Role",
    "UserType",
    "role_permissions",
    "user_type_roles",
    "User",
    "UserStateType",
    "UserLog",
    "IdentifierType",
    "Employee",
    "Customer",
    "Comment",
    "ItemType",
    "Item",
    "AdditionalExpense",
    "HistoricalItemPrice",
    "Appointment",
    "DiscountType",
    "TaxType",
    "OrderStateType",
    "PurchaseOrder",
    "PurchaseOrderItem",
    "Invoice",
    "InvoiceItem",
    "ExternalSale",
]
