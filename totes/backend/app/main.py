"""
Totes - Main FastAPI Application
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Back-office API for a retail business: catalog, customers, appointments and sales",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@app.on_event("startup")
def initialize_database():
    """Create tables and seed reference data, permissions and the first administrator."""
    from app.services.startup_service import init_db
    init_db()
    logger.info("Database initialized (%s)", "sqlite" if settings.is_sqlite else "postgresql")


# Import and include routers
from app.api import (
    auth_router,
    permissions_router,
    roles_router,
    user_types_router,
    users_router,
    user_state_types_router,
    user_logs_router,
    employees_router,
    customers_router,
    comments_router,
    identifier_types_router,
    items_router,
    item_types_router,
    additional_expenses_router,
    historical_prices_router,
    appointments_router,
    billing_router,
    discount_types_router,
    tax_types_router,
    purchase_orders_router,
    order_state_types_router,
    invoices_router,
    external_sales_router,
    reports_router,
)

app.include_router(auth_router, prefix="/api/auth", tags=["Authentication"])
app.include_router(permissions_router, prefix="/api/permissions", tags=["Permissions"])
app.include_router(roles_router, prefix="/api/roles", tags=["Roles"])
app.include_router(user_types_router, prefix="/api/user-types", tags=["User Types"])
app.include_router(users_router, prefix="/api/users", tags=["User Management"])
app.include_router(user_state_types_router, prefix="/api/user-state-types", tags=["User State Types"])
app.include_router(user_logs_router, prefix="/api/user-logs", tags=["User Logs"])
app.include_router(employees_router, prefix="/api/employees", tags=["Employees"])
app.include_router(customers_router, prefix="/api/customers", tags=["Customers"])
app.include_router(comments_router, prefix="/api/comments", tags=["Comments"])
app.include_router(identifier_types_router, prefix="/api/identifier-types", tags=["Identifier Types"])
app.include_router(items_router, prefix="/api/items", tags=["Items"])
app.include_router(item_types_router, prefix="/api/item-types", tags=["Item Types"])
app.include_router(additional_expenses_router, prefix="/api/additional-expenses", tags=["Additional Expenses"])
app.include_router(historical_prices_router, prefix="/api/historical-item-prices", tags=["Historical Item Prices"])
app.include_router(appointments_router, prefix="/api/appointments", tags=["Appointments"])
app.include_router(billing_router, prefix="/api/billing", tags=["Billing"])
app.include_router(discount_types_router, prefix="/api/discount-types", tags=["Discount Types"])
app.include_router(tax_types_router, prefix="/api/tax-types", tags=["Tax Types"])
app.include_router(purchase_orders_router, prefix="/api/purchase-orders", tags=["Purchase Orders"])
app.include_router(order_state_types_router, prefix="/api/order-state-types", tags=["Order State Types"])
app.include_router(invoices_router, prefix="/api/invoices", tags=["Invoices"])
app.include_router(external_sales_router, prefix="/api/external-sales", tags=["External Sales"])
app.include_router(reports_router, prefix="/api/reports", tags=["Reports"])
