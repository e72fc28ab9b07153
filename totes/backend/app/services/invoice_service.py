"""
Invoice service.

An invoice is issued either directly (POST /invoices) or when a purchase
order is paid. Both paths go through issue(): same billing calculation,
stock taken at issue time, unit prices frozen from the items' selling price.
"""
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.models import Customer, Invoice, InvoiceItem
from app.schemas.billing import BillingItem
from app.services.billing_service import BillingResult, BillingService
from app.services.errors import NotFoundError
from app.services.query_helpers import id_prefix

logger = logging.getLogger(__name__)


class InvoiceService:

    @staticmethod
    def get_by_id(db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id.desc()).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Invoice]:
        return db.query(Invoice).filter(id_prefix(Invoice.id, query)).order_by(Invoice.id).all()

    @staticmethod
    def search_by_customer_document(db: Session, document: str) -> List[Invoice]:
        """Invoices whose customer's personal/tax document starts with document."""
        return (
            db.query(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(Customer.customer_id.startswith((document or "").strip(), autoescape=True))
            .order_by(Invoice.id.desc())
            .all()
        )

    @staticmethod
    def issue(
        db: Session,
        customer_id: int,
        billing: BillingResult,
        purchase_order_id: Optional[int] = None,
    ) -> Invoice:
        """
        Take stock and add the invoice to the session. Does not commit;
        raises ConflictError (nothing changed) when stock is short.
        """
        if not db.query(Customer.id).filter(Customer.id == customer_id).first():
            raise NotFoundError(f"Customer {customer_id} not found")
        BillingService.take_stock(billing.lines)
        invoice = Invoice(
            enterprise_data=settings.ENTERPRISE_DATA,
            date_time=datetime.now(timezone.utc),
            customer_id=customer_id,
            purchase_order_id=purchase_order_id,
            subtotal=billing.subtotal,
            total=billing.total,
        )
        invoice.items = [
            InvoiceItem(item_id=item.id, amount=amount, unit_price=item.selling_price)
            for item, amount in billing.lines
        ]
        invoice.discounts = list(billing.discounts)
        invoice.taxes = list(billing.taxes)
        db.add(invoice)
        return invoice

    @staticmethod
    def create(
        db: Session,
        customer_id: int,
        lines: Iterable[BillingItem],
        discount_ids: Optional[Iterable[int]] = None,
        tax_ids: Optional[Iterable[int]] = None,
    ) -> Invoice:
        billing = BillingService.calculate(db, lines, discount_ids, tax_ids)
        try:
            invoice = InvoiceService.issue(db, customer_id, billing)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(invoice)
        logger.info("Issued invoice %s for customer %s, total %s", invoice.id, customer_id, invoice.total)
        return invoice

    @staticmethod
    def breakdown(invoice: Invoice) -> dict:
        """Discount and tax amounts of an issued invoice, recomputed from its stored subtotal."""
        discount, tax, total = BillingService.adjust(invoice.subtotal, invoice.discounts, invoice.taxes)
        return {"subtotal": invoice.subtotal, "discount": discount, "tax": tax, "total": total}
