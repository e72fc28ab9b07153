"""
Pydantic schemas for request/response validation
"""
from .user import (
    PermissionResponse, RoleResponse, UserTypeResponse, ExistsResponse, UserStateTypeResponse,
    UserCreate, UserUpdate, UserStateUpdate, UserResponse, HasPermissionResponse, UserLogResponse,
    LoginRequest, LoginResponse, MeResponse,
)
from .people import (
    IdentifierTypeResponse,
    EmployeeCreate, EmployeeUpdate, EmployeeResponse,
    CustomerCreate, CustomerUpdate, CustomerResponse,
    CommentCreate, CommentUpdate, CommentResponse,
)
from .item import (
    ItemTypeResponse, ItemCreate, ItemUpdate, ItemStateUpdate, ItemResponse, StockCheckResponse,
    AdditionalExpenseCreate, AdditionalExpenseUpdate, AdditionalExpenseResponse,
    HistoricalItemPriceResponse,
)
from .appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse, HourlyCountsResponse
from .billing import (
    BillingItem, BillingRequest, SubtotalResponse, TotalResponse,
    DiscountTypeCreate, DiscountTypeResponse, TaxTypeCreate, TaxTypeResponse,
)
from .sale import InvoiceCreate, InvoiceResponse, ExternalSaleCreate, ExternalSaleResponse
from .purchase import (
    OrderStateTypeResponse, PurchaseOrderCreate, PurchaseOrderUpdate, PurchaseOrderStateUpdate,
    PurchaseOrderResponse, PurchaseOrderStateChangeResponse,
)
from .reports import SalesReportResponse, TopItem

__all__ = [
    # Users & RBAC
    "PermissionResponse",
    "RoleResponse",
    "UserTypeResponse",
    "ExistsResponse",
    "UserStateTypeResponse",
    "UserCreate",
    "UserUpdate",
    "UserStateUpdate",
    "UserResponse",
    "HasPermissionResponse",
    "UserLogResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    # People
    "IdentifierTypeResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    # Items
    "ItemTypeResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemStateUpdate",
    "ItemResponse",
    "StockCheckResponse",
    "AdditionalExpenseCreate",
    "AdditionalExpenseUpdate",
    "AdditionalExpenseResponse",
    "HistoricalItemPriceResponse",
    # Appointments
    "AppointmentCreate",
    "AppointmentUpdate",
    "AppointmentResponse",
    "HourlyCountsResponse",
    # Billing
    "BillingItem",
    "BillingRequest",
    "SubtotalResponse",
    "TotalResponse",
    "DiscountTypeCreate",
    "DiscountTypeResponse",
    "TaxTypeCreate",
    "TaxTypeResponse",
    # Sales
    "InvoiceCreate",
    "InvoiceResponse",
    "ExternalSaleCreate",
    "ExternalSaleResponse",
    # Purchase orders
    "OrderStateTypeResponse",
    "PurchaseOrderCreate",
    "PurchaseOrderUpdate",
    "PurchaseOrderStateUpdate",
    "PurchaseOrderResponse",
    "PurchaseOrderStateChangeResponse",
    # Reports
    "SalesReportResponse",
    "TopItem",
]
