"""
Items API routes: items, item types, additional expenses and price history
"""
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.dependencies import AuditContext, require_permission
from app.models import ItemType
from app.permission_config import (
    PERMISSION_CHECK_ITEM_STOCK,
    PERMISSION_CREATE_ADDITIONAL_EXPENSE,
    PERMISSION_CREATE_ITEM,
    PERMISSION_DELETE_ADDITIONAL_EXPENSE,
    PERMISSION_GET_ADDITIONAL_EXPENSE_BY_ID,
    PERMISSION_GET_ALL_ADDITIONAL_EXPENSE,
    PERMISSION_GET_ALL_ITEMS,
    PERMISSION_GET_HISTORICAL_ITEM_PRICE,
    PERMISSION_GET_ITEM_BY_ID,
    PERMISSION_GET_ITEM_TYPES,
    PERMISSION_GET_ITEM_TYPES_BY_ID,
    PERMISSION_SEARCH_ITEMS_BY_ID,
    PERMISSION_SEARCH_ITEMS_BY_NAME,
    PERMISSION_UPDATE_ADDITIONAL_EXPENSE,
    PERMISSION_UPDATE_ITEM,
    PERMISSION_UPDATE_ITEM_STATE,
)
from app.schemas.item import (
    AdditionalExpenseCreate,
    AdditionalExpenseResponse,
    AdditionalExpenseUpdate,
    HistoricalItemPriceResponse,
    ItemCreate,
    ItemResponse,
    ItemStateUpdate,
    ItemTypeResponse,
    ItemUpdate,
    StockCheckResponse,
)
from app.services.catalog_service import CatalogService
from app.services.items_service import AdditionalExpenseService, HistoricalItemPriceService, ItemService

router = APIRouter()
item_types_router = APIRouter()
additional_expenses_router = APIRouter()
historical_prices_router = APIRouter()


@router.get("/", response_model=List[ItemResponse])
def get_all_items(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_ITEMS, "GetAllItems")),
):
    items = ItemService.get_all(audit.db)
    audit.log("Items retrieved")
    return items


@router.get("/search-by-id", response_model=List[ItemResponse])
def search_items_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_ITEMS_BY_ID, "SearchItemsByID")),
):
    items = ItemService.search_by_id(audit.db, query)
    audit.log(f"Items searched by id '{query}'")
    return items


@router.get("/search-by-name", response_model=List[ItemResponse])
def search_items_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_ITEMS_BY_NAME, "SearchItemsByName")),
):
    items = ItemService.search_by_name(audit.db, name)
    audit.log(f"Items searched by name '{name}'")
    return items


@router.post("/", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    body: ItemCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_ITEM, "CreateItem")),
):
    """Create item; its selling price becomes the first price history entry."""
    try:
        item = ItemService.create_item(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Item {item.id} created")
    return item


@router.get("/{item_id}/stock", response_model=StockCheckResponse)
def check_item_stock(
    item_id: int,
    quantity: int = Query(..., gt=0),
    audit: AuditContext = Depends(require_permission(PERMISSION_CHECK_ITEM_STOCK, "CheckItemStock")),
):
    try:
        result = ItemService.check_stock(audit.db, item_id, quantity)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Stock of item {item_id} checked for {quantity}: {result['available']}")
    return result


@router.patch("/{item_id}/state", response_model=ItemResponse)
def update_item_state(
    item_id: int,
    body: ItemStateUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_ITEM_STATE, "UpdateItemState")),
):
    try:
        item = ItemService.update_state(audit.db, item_id, body.item_state)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Item {item_id} state set to {body.item_state}")
    return item


@router.put("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: int,
    body: ItemUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_ITEM, "UpdateItem")),
):
    try:
        item = ItemService.update_item(audit.db, item_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Item {item_id} updated")
    return item


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(
    item_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ITEM_BY_ID, "GetItemByID")),
):
    item = ItemService.get_item(audit.db, item_id)
    if not item:
        raise audit.fail(404, "Item not found")
    audit.log(f"Item {item_id} retrieved")
    return item


# =====================================================
# Item types
# =====================================================

@item_types_router.get("/", response_model=List[ItemTypeResponse])
def get_item_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ITEM_TYPES, "GetItemTypes")),
):
    item_types = CatalogService.get_all(audit.db, ItemType)
    audit.log("Item types retrieved")
    return item_types


@item_types_router.get("/{item_type_id}", response_model=ItemTypeResponse)
def get_item_type(
    item_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ITEM_TYPES_BY_ID, "GetItemTypesByID")),
):
    item_type = CatalogService.get_by_id(audit.db, ItemType, item_type_id)
    if not item_type:
        raise audit.fail(404, "Item type not found")
    audit.log(f"Item type {item_type_id} retrieved")
    return item_type


# =====================================================
# Additional expenses
# =====================================================

@additional_expenses_router.get("/", response_model=List[AdditionalExpenseResponse])
def get_all_additional_expenses(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_ADDITIONAL_EXPENSE, "GetAllAdditionalExpense")),
):
    expenses = AdditionalExpenseService.get_all(audit.db)
    audit.log("Additional expenses retrieved")
    return expenses


@additional_expenses_router.post("/", response_model=AdditionalExpenseResponse, status_code=status.HTTP_201_CREATED)
def create_additional_expense(
    body: AdditionalExpenseCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_ADDITIONAL_EXPENSE, "CreateAdditionalExpense")),
):
    try:
        expense = AdditionalExpenseService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Additional expense {expense.id} created for item {body.item_id}")
    return expense


@additional_expenses_router.put("/{expense_id}", response_model=AdditionalExpenseResponse)
def update_additional_expense(
    expense_id: int,
    body: AdditionalExpenseUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_ADDITIONAL_EXPENSE, "UpdateAdditionalExpense")),
):
    try:
        expense = AdditionalExpenseService.update(audit.db, expense_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Additional expense {expense_id} updated")
    return expense


@additional_expenses_router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_additional_expense(
    expense_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_DELETE_ADDITIONAL_EXPENSE, "DeleteAdditionalExpense")),
):
    try:
        AdditionalExpenseService.delete(audit.db, expense_id)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Additional expense {expense_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@additional_expenses_router.get("/{expense_id}", response_model=AdditionalExpenseResponse)
def get_additional_expense(
    expense_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ADDITIONAL_EXPENSE_BY_ID, "GetAdditionalExpenseByID")),
):
    expense = AdditionalExpenseService.get_by_id(audit.db, expense_id)
    if not expense:
        raise audit.fail(404, "Additional expense not found")
    audit.log(f"Additional expense {expense_id} retrieved")
    return expense


# =====================================================
# Historical item prices
# =====================================================

@historical_prices_router.get("/{item_id}", response_model=List[HistoricalItemPriceResponse])
def get_historical_item_prices(
    item_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_HISTORICAL_ITEM_PRICE, "GetHistoricalItemPrice")),
):
    """Selling price history of an item, oldest first."""
    prices = HistoricalItemPriceService.get_for_item(audit.db, item_id)
    if not prices:
        raise audit.fail(404, "No historical prices found")
    audit.log(f"Price history of item {item_id} retrieved")
    return prices
