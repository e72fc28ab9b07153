"""
Invoices and external sales API routes
"""
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.dependencies import AuditContext, require_permission
from app.permission_config import (
    PERMISSION_CREATE_EXTERNAL_SALE,
    PERMISSION_CREATE_INVOICE,
    PERMISSION_GET_ALL_EXTERNAL_SALES,
    PERMISSION_GET_ALL_INVOICES,
    PERMISSION_GET_EXTERNAL_SALE_BY_ID,
    PERMISSION_GET_INVOICE_BY_ID,
    PERMISSION_SEARCH_INVOICE_BY_CUSTOMER_PERSONAL_ID,
    PERMISSION_SEARCH_INVOICE_BY_ID,
)
from app.schemas.sale import ExternalSaleCreate, ExternalSaleResponse, InvoiceCreate, InvoiceResponse
from app.services.external_sale_service import ExternalSaleService
from app.services.invoice_pdf_service import build_invoice_pdf
from app.services.invoice_service import InvoiceService

invoices_router = APIRouter()
external_sales_router = APIRouter()


@invoices_router.get("/", response_model=List[InvoiceResponse])
def get_all_invoices(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_INVOICES, "GetAllInvoices")),
):
    invoices = [InvoiceResponse.from_model(i) for i in InvoiceService.get_all(audit.db)]
    audit.log("Invoices retrieved")
    return invoices


@invoices_router.get("/search-by-id", response_model=List[InvoiceResponse])
def search_invoices_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_INVOICE_BY_ID, "SearchInvoiceByID")),
):
    invoices = [InvoiceResponse.from_model(i) for i in InvoiceService.search_by_id(audit.db, query)]
    audit.log(f"Invoices searched by id '{query}'")
    return invoices


@invoices_router.get("/search-by-customer", response_model=List[InvoiceResponse])
def search_invoices_by_customer(
    customer_document: str = Query("", alias="customer_id"),
    audit: AuditContext = Depends(
        require_permission(PERMISSION_SEARCH_INVOICE_BY_CUSTOMER_PERSONAL_ID, "SearchInvoiceByCustomerPersonalID")
    ),
):
    """Invoices whose customer's document number starts with customer_id."""
    invoices = [
        InvoiceResponse.from_model(i)
        for i in InvoiceService.search_by_customer_document(audit.db, customer_document)
    ]
    audit.log(f"Invoices searched by customer document '{customer_document}'")
    return invoices


@invoices_router.post("/", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
def create_invoice(
    body: InvoiceCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_INVOICE, "CreateInvoice")),
):
    """Issue an invoice directly; stock is taken for every line."""
    try:
        invoice = InvoiceService.create(audit.db, body.customer_id, body.items, body.discounts, body.taxes)
    except ValueError as e:
        raise audit.service_error(e)
    response = InvoiceResponse.from_model(invoice)
    audit.log(f"Invoice {invoice.id} created")
    return response


@invoices_router.get("/{invoice_id}/pdf")
def get_invoice_pdf(
    invoice_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_INVOICE_BY_ID, "GetInvoiceByID")),
):
    invoice = InvoiceService.get_by_id(audit.db, invoice_id)
    if not invoice:
        raise audit.fail(404, "Invoice not found")
    pdf_bytes = build_invoice_pdf(invoice)
    audit.log(f"Invoice {invoice_id} PDF generated")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="invoice-{invoice_id}.pdf"'},
    )


@invoices_router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(
    invoice_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_INVOICE_BY_ID, "GetInvoiceByID")),
):
    invoice = InvoiceService.get_by_id(audit.db, invoice_id)
    if not invoice:
        raise audit.fail(404, "Invoice not found")
    response = InvoiceResponse.from_model(invoice)
    audit.log(f"Invoice {invoice_id} retrieved")
    return response


# =====================================================
# External sales
# =====================================================

@external_sales_router.get("/", response_model=List[ExternalSaleResponse])
def get_all_external_sales(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_EXTERNAL_SALES, "GetAllExternalSales")),
):
    sales = ExternalSaleService.get_all(audit.db)
    audit.log("External sales retrieved")
    return sales


@external_sales_router.post("/", response_model=ExternalSaleResponse, status_code=status.HTTP_201_CREATED)
def create_external_sale(
    body: ExternalSaleCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_EXTERNAL_SALE, "CreateExternalSale")),
):
    try:
        sale = ExternalSaleService.create(audit.db, body, audit.user_email)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"External sale {sale.id} created")
    return sale


@external_sales_router.get("/{sale_id}", response_model=ExternalSaleResponse)
def get_external_sale(
    sale_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_EXTERNAL_SALE_BY_ID, "GetExternalSaleByID")),
):
    sale = ExternalSaleService.get_by_id(audit.db, sale_id)
    if not sale:
        raise audit.fail(404, "External sale not found")
    audit.log(f"External sale {sale_id} retrieved")
    return sale
