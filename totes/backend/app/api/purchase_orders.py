"""
Purchase orders and order state types API routes
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.dependencies import AuditContext, require_permission
from app.models import OrderStateType
from app.permission_config import (
    PERMISSION_CREATE_PURCHASE_ORDER,
    PERMISSION_GET_ALL_ORDER_STATE_TYPES,
    PERMISSION_GET_ALL_PURCHASE_ORDERS,
    PERMISSION_GET_ORDER_STATE_TYPE_BY_ID,
    PERMISSION_GET_PURCHASE_ORDER_BY_ID,
    PERMISSION_GET_PURCHASE_ORDERS_BY_CUSTOMER_ID,
    PERMISSION_GET_PURCHASE_ORDERS_BY_SELLER_ID,
    PERMISSION_GET_PURCHASE_ORDERS_BY_STATE_ID,
    PERMISSION_SEARCH_PURCHASE_ORDERS_BY_ID,
    PERMISSION_UPDATE_PURCHASE_ORDER,
    PERMISSION_UPDATE_PURCHASE_ORDER_STATE,
)
from app.schemas.purchase import (
    OrderStateTypeResponse,
    PurchaseOrderCreate,
    PurchaseOrderResponse,
    PurchaseOrderStateChangeResponse,
    PurchaseOrderStateUpdate,
    PurchaseOrderUpdate,
)
from app.schemas.sale import InvoiceResponse
from app.services.catalog_service import CatalogService
from app.services.purchase_order_service import PurchaseOrderService

router = APIRouter()
order_state_types_router = APIRouter()


def _responses(orders) -> List[PurchaseOrderResponse]:
    return [PurchaseOrderResponse.from_model(o) for o in orders]


@router.get("/", response_model=List[PurchaseOrderResponse])
def get_all_purchase_orders(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_PURCHASE_ORDERS, "GetAllPurchaseOrders")),
):
    orders = _responses(PurchaseOrderService.get_all(audit.db))
    audit.log("Purchase orders retrieved")
    return orders


@router.get("/search-by-id", response_model=List[PurchaseOrderResponse])
def search_purchase_orders_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_PURCHASE_ORDERS_BY_ID, "SearchPurchaseOrdersByID")),
):
    if not query.strip():
        raise audit.fail(400, "id is required")
    orders = _responses(PurchaseOrderService.search_by_id(audit.db, query))
    if not orders:
        raise audit.fail(404, "No purchase orders found")
    audit.log(f"Purchase orders searched by id '{query}'")
    return orders


@router.get("/customer/{customer_id}", response_model=List[PurchaseOrderResponse])
def get_purchase_orders_by_customer(
    customer_id: int,
    audit: AuditContext = Depends(
        require_permission(PERMISSION_GET_PURCHASE_ORDERS_BY_CUSTOMER_ID, "GetPurchaseOrdersByCustomerID")
    ),
):
    orders = _responses(PurchaseOrderService.get_by_customer(audit.db, customer_id))
    if not orders:
        raise audit.fail(404, "No purchase orders found")
    audit.log(f"Purchase orders of customer {customer_id} retrieved")
    return orders


@router.get("/seller/{seller_id}", response_model=List[PurchaseOrderResponse])
def get_purchase_orders_by_seller(
    seller_id: int,
    audit: AuditContext = Depends(
        require_permission(PERMISSION_GET_PURCHASE_ORDERS_BY_SELLER_ID, "GetPurchaseOrdersBySellerID")
    ),
):
    orders = _responses(PurchaseOrderService.get_by_seller(audit.db, seller_id))
    audit.log(f"Purchase orders of seller {seller_id} retrieved")
    return orders


@router.get("/state/{state_id}", response_model=List[PurchaseOrderResponse])
def get_purchase_orders_by_state(
    state_id: int,
    audit: AuditContext = Depends(
        require_permission(PERMISSION_GET_PURCHASE_ORDERS_BY_STATE_ID, "GetPurchaseOrdersByStateID")
    ),
):
    orders = _responses(PurchaseOrderService.get_by_state(audit.db, state_id))
    if not orders:
        raise audit.fail(404, "No purchase orders found")
    audit.log(f"Purchase orders in state {state_id} retrieved")
    return orders


@router.post("/", response_model=PurchaseOrderResponse, status_code=status.HTTP_201_CREATED)
def create_purchase_order(
    body: PurchaseOrderCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_PURCHASE_ORDER, "CreatePurchaseOrder")),
):
    """Create a PENDING order priced with the billing calculation."""
    try:
        order = PurchaseOrderService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    response = PurchaseOrderResponse.from_model(order)
    audit.log(f"Purchase order {order.id} created")
    return response


@router.patch("/{order_id}/state", response_model=PurchaseOrderStateChangeResponse)
def update_purchase_order_state(
    order_id: int,
    body: PurchaseOrderStateUpdate,
    audit: AuditContext = Depends(
        require_permission(PERMISSION_UPDATE_PURCHASE_ORDER_STATE, "UpdatePurchaseOrderState")
    ),
):
    """PENDING -> PAID issues the invoice and takes the stock; PENDING -> CANCELLED closes the order."""
    try:
        order, invoice = PurchaseOrderService.change_state(audit.db, order_id, body.order_state_id)
    except ValueError as e:
        raise audit.service_error(e)
    response = PurchaseOrderStateChangeResponse(
        purchase_order=PurchaseOrderResponse.from_model(order),
        invoice=InvoiceResponse.from_model(invoice) if invoice is not None else None,
    )
    if invoice is not None:
        audit.log(f"Purchase order {order_id} paid, invoice {invoice.id} issued")
    else:
        audit.log(f"Purchase order {order_id} state set to {body.order_state_id}")
    return response


@router.put("/{order_id}", response_model=PurchaseOrderResponse)
def update_purchase_order(
    order_id: int,
    body: PurchaseOrderUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_PURCHASE_ORDER, "UpdatePurchaseOrder")),
):
    try:
        order = PurchaseOrderService.update(audit.db, order_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    response = PurchaseOrderResponse.from_model(order)
    audit.log(f"Purchase order {order_id} updated")
    return response


@router.get("/{order_id}", response_model=PurchaseOrderResponse)
def get_purchase_order(
    order_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_PURCHASE_ORDER_BY_ID, "GetPurchaseOrderByID")),
):
    order = PurchaseOrderService.get_by_id(audit.db, order_id)
    if not order:
        raise audit.fail(404, "Purchase order not found")
    response = PurchaseOrderResponse.from_model(order)
    audit.log(f"Purchase order {order_id} retrieved")
    return response


# =====================================================
# Order state types
# =====================================================

@order_state_types_router.get("/", response_model=List[OrderStateTypeResponse])
def get_all_order_state_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_ORDER_STATE_TYPES, "GetAllOrderStateTypes")),
):
    states = CatalogService.get_all(audit.db, OrderStateType)
    audit.log("Order state types retrieved")
    return states


@order_state_types_router.get("/{state_id}", response_model=OrderStateTypeResponse)
def get_order_state_type(
    state_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ORDER_STATE_TYPE_BY_ID, "GetOrderStateTypeByID")),
):
    state = CatalogService.get_by_id(audit.db, OrderStateType, state_id)
    if not state:
        raise audit.fail(404, "Order state type not found")
    audit.log(f"Order state type {state_id} retrieved")
    return state
