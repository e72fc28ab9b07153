"""
API routes for Totes
"""
from .auth import router as auth_router
from .permissions import (
    router as permissions_router,
    roles_router,
    user_types_router,
)
from .users import (
    router as users_router,
    user_state_types_router,
    user_logs_router,
)
from .people import (
    employees_router,
    customers_router,
    comments_router,
    identifier_types_router,
)
from .items import (
    router as items_router,
    item_types_router,
    additional_expenses_router,
    historical_prices_router,
)
from .appointments import router as appointments_router
from .billing import (
    router as billing_router,
    discount_types_router,
    tax_types_router,
)
from .purchase_orders import (
    router as purchase_orders_router,
    order_state_types_router,
)
from .sales import invoices_router, external_sales_router
from .reports import router as reports_router

__all__ = [
    "auth_router",
    "permissions_router",
    "roles_router",
    "user_types_router",
    "users_router",
    "user_state_types_router",
    "user_logs_router",
    "employees_router",
    "customers_router",
    "comments_router",
    "identifier_types_router",
    "items_router",
    "item_types_router",
    "additional_expenses_router",
    "historical_prices_router",
    "appointments_router",
    "billing_router",
    "discount_types_router",
    "tax_types_router",
    "purchase_orders_router",
    "order_state_types_router",
    "invoices_router",
    "external_sales_router",
    "reports_router",
]
