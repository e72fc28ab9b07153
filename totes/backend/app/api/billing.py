"""
Billing calculator and discount/tax type API routes
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.dependencies import AuditContext, require_permission
from app.permission_config import (
    PERMISSION_CALCULATE_SUBTOTAL,
    PERMISSION_CALCULATE_TOTAL,
    PERMISSION_CREATE_DISCOUNT_TYPE,
    PERMISSION_CREATE_TAX_TYPE,
    PERMISSION_GET_ALL_DISCOUNT_TYPES,
    PERMISSION_GET_ALL_TAX_TYPES,
    PERMISSION_GET_DISCOUNT_TYPE_BY_ID,
    PERMISSION_GET_TAX_TYPE_BY_ID,
)
from app.schemas.billing import (
    BillingRequest,
    DiscountTypeCreate,
    DiscountTypeResponse,
    SubtotalResponse,
    TaxTypeCreate,
    TaxTypeResponse,
    TotalResponse,
)
from app.services.billing_service import BillingService, DiscountTypeService, TaxTypeService

router = APIRouter()
discount_types_router = APIRouter()
tax_types_router = APIRouter()


@router.post("/subtotal", response_model=SubtotalResponse)
def calculate_subtotal(
    body: BillingRequest,
    audit: AuditContext = Depends(require_permission(PERMISSION_CALCULATE_SUBTOTAL, "CalculateSubtotal")),
):
    """Sum of selling price x amount; discounts and taxes are ignored here."""
    try:
        result = BillingService.calculate(audit.db, body.items)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Subtotal calculated: {result.subtotal}")
    return SubtotalResponse(subtotal=result.subtotal)


@router.post("/total", response_model=TotalResponse)
def calculate_total(
    body: BillingRequest,
    audit: AuditContext = Depends(require_permission(PERMISSION_CALCULATE_TOTAL, "CalculateTotal")),
):
    try:
        result = BillingService.calculate(audit.db, body.items, body.discounts, body.taxes)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Total calculated: {result.total}")
    return TotalResponse(subtotal=result.subtotal, discount=result.discount, tax=result.tax, total=result.total)


# =====================================================
# Discount types
# =====================================================

@discount_types_router.get("/", response_model=List[DiscountTypeResponse])
def get_all_discount_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_DISCOUNT_TYPES, "GetAllDiscountTypes")),
):
    discount_types = DiscountTypeService.get_all(audit.db)
    audit.log("Discount types retrieved")
    return discount_types


@discount_types_router.post("/", response_model=DiscountTypeResponse, status_code=status.HTTP_201_CREATED)
def create_discount_type(
    body: DiscountTypeCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_DISCOUNT_TYPE, "CreateDiscountType")),
):
    try:
        discount_type = DiscountTypeService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Discount type {discount_type.id} created")
    return discount_type


@discount_types_router.get("/{discount_type_id}", response_model=DiscountTypeResponse)
def get_discount_type(
    discount_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_DISCOUNT_TYPE_BY_ID, "GetDiscountTypeByID")),
):
    discount_type = DiscountTypeService.get_by_id(audit.db, discount_type_id)
    if not discount_type:
        raise audit.fail(404, "Discount type not found")
    audit.log(f"Discount type {discount_type_id} retrieved")
    return discount_type


# =====================================================
# Tax types
# =====================================================

@tax_types_router.get("/", response_model=List[TaxTypeResponse])
def get_all_tax_types(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_TAX_TYPES, "GetAllTaxTypes")),
):
    tax_types = TaxTypeService.get_all(audit.db)
    audit.log("Tax types retrieved")
    return tax_types


@tax_types_router.post("/", response_model=TaxTypeResponse, status_code=status.HTTP_201_CREATED)
def create_tax_type(
    body: TaxTypeCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_TAX_TYPE, "CreateTaxType")),
):
    try:
        tax_type = TaxTypeService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Tax type {tax_type.id} created")
    return tax_type


@tax_types_router.get("/{tax_type_id}", response_model=TaxTypeResponse)
def get_tax_type(
    tax_type_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_TAX_TYPE_BY_ID, "GetTaxTypeByID")),
):
    tax_type = TaxTypeService.get_by_id(audit.db, tax_type_id)
    if not tax_type:
        raise audit.fail(404, "Tax type not found")
    audit.log(f"Tax type {tax_type_id} retrieved")
    return tax_type
