"""
Purchase order service: creation, edits while PENDING, and the state machine

    PENDING -> PAID       (issues the invoice and takes the stock)
    PENDING -> CANCELLED

PAID and CANCELLED are terminal.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.models import Customer, Employee, Invoice, OrderStateType, PurchaseOrder, PurchaseOrderItem
from app.schemas.purchase import PurchaseOrderCreate, PurchaseOrderUpdate
from app.services.billing_service import BillingResult, BillingService
from app.services.errors import ConflictError, NotFoundError
from app.services.invoice_service import InvoiceService
from app.services.query_helpers import id_prefix

logger = logging.getLogger(__name__)

# Seeded order_state_types ids
ORDER_STATE_PENDING = 1
ORDER_STATE_PAID = 2
ORDER_STATE_CANCELLED = 3

ALLOWED_TRANSITIONS = {
    ORDER_STATE_PENDING: {ORDER_STATE_PAID, ORDER_STATE_CANCELLED},
    ORDER_STATE_PAID: set(),
    ORDER_STATE_CANCELLED: set(),
}


class PurchaseOrderService:

    @staticmethod
    def get_by_id(db: Session, order_id: int) -> Optional[PurchaseOrder]:
        return db.query(PurchaseOrder).filter(PurchaseOrder.id == order_id).first()

    @staticmethod
    def get_all(db: Session) -> List[PurchaseOrder]:
        return db.query(PurchaseOrder).order_by(PurchaseOrder.id.desc()).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[PurchaseOrder]:
        return db.query(PurchaseOrder).filter(id_prefix(PurchaseOrder.id, query)).order_by(PurchaseOrder.id).all()

    @staticmethod
    def get_by_customer(db: Session, customer_id: int) -> List[PurchaseOrder]:
        return (
            db.query(PurchaseOrder)
            .filter(PurchaseOrder.customer_id == customer_id)
            .order_by(PurchaseOrder.id.desc())
            .all()
        )

    @staticmethod
    def get_by_seller(db: Session, seller_id: int) -> List[PurchaseOrder]:
        return (
            db.query(PurchaseOrder)
            .filter(PurchaseOrder.seller_id == seller_id)
            .order_by(PurchaseOrder.id.desc())
            .all()
        )

    @staticmethod
    def get_by_state(db: Session, state_id: int) -> List[PurchaseOrder]:
        return (
            db.query(PurchaseOrder)
            .filter(PurchaseOrder.order_state_id == state_id)
            .order_by(PurchaseOrder.id.desc())
            .all()
        )

    @staticmethod
    def _check_parties(
        db: Session,
        customer_id: Optional[int],
        seller_id: Optional[int],
        responsible_id: Optional[int],
    ) -> None:
        if customer_id is not None and not db.query(Customer.id).filter(Customer.id == customer_id).first():
            raise NotFoundError(f"Customer {customer_id} not found")
        for label, employee_id in (("Seller", seller_id), ("Responsible", responsible_id)):
            if employee_id is not None and not db.query(Employee.id).filter(Employee.id == employee_id).first():
                raise NotFoundError(f"{label} employee {employee_id} not found")

    @staticmethod
    def _apply_billing(order: PurchaseOrder, billing: BillingResult) -> None:
        order.subtotal = billing.subtotal
        order.total = billing.total
        order.items = [PurchaseOrderItem(item_id=item.id, amount=amount) for item, amount in billing.lines]
        order.discounts = list(billing.discounts)
        order.taxes = list(billing.taxes)

    @staticmethod
    def create(db: Session, data: PurchaseOrderCreate) -> PurchaseOrder:
        PurchaseOrderService._check_parties(db, data.customer_id, data.seller_id, data.responsible_id)
        billing = BillingService.calculate(db, data.items, data.discounts, data.taxes)
        order = PurchaseOrder(
            date_time=datetime.now(timezone.utc),
            customer_id=data.customer_id,
            seller_id=data.seller_id,
            responsible_id=data.responsible_id,
            order_state_id=ORDER_STATE_PENDING,
        )
        PurchaseOrderService._apply_billing(order, billing)
        db.add(order)
        db.commit()
        db.refresh(order)
        logger.info("Created purchase order %s, total %s", order.id, order.total)
        return order

    @staticmethod
    def update(db: Session, order_id: int, data: PurchaseOrderUpdate) -> PurchaseOrder:
        order = PurchaseOrderService.get_by_id(db, order_id)
        if not order:
            raise NotFoundError("Purchase order not found")
        if order.order_state_id != ORDER_STATE_PENDING:
            raise ConflictError("Only PENDING purchase orders can be updated")
        PurchaseOrderService._check_parties(db, data.customer_id, data.seller_id, data.responsible_id)
        billing = BillingService.calculate(db, data.items, data.discounts, data.taxes)

        order.customer_id = data.customer_id
        order.seller_id = data.seller_id
        order.responsible_id = data.responsible_id
        if data.date_time is not None:
            order.date_time = data.date_time
        PurchaseOrderService._apply_billing(order, billing)
        db.commit()
        db.refresh(order)
        return order

    @staticmethod
    def change_state(db: Session, order_id: int, new_state_id: int) -> Tuple[PurchaseOrder, Optional[Invoice]]:
        """
        Move the order to new_state_id. Returns (order, invoice); invoice is
        only set for PENDING -> PAID. On any error the order is left unchanged.
        """
        order = PurchaseOrderService.get_by_id(db, order_id)
        if not order:
            raise NotFoundError("Purchase order not found")
        if not db.query(OrderStateType.id).filter(OrderStateType.id == new_state_id).first():
            raise NotFoundError(f"Order state {new_state_id} not found")
        if order.order_state_id == new_state_id:
            logger.warning("Purchase order %s is already in state %s", order.id, new_state_id)
            raise ConflictError("Purchase order is already in that state")
        if new_state_id not in ALLOWED_TRANSITIONS.get(order.order_state_id, set()):
            logger.warning(
                "Rejected purchase order %s transition %s -> %s", order.id, order.order_state_id, new_state_id
            )
            raise ConflictError(
                f"Cannot change purchase order state from {order.order_state_id} to {new_state_id}"
            )

        invoice = None
        try:
            if new_state_id == ORDER_STATE_PAID:
                if order.customer_id is None:
                    raise ConflictError("A purchase order needs a customer before it can be paid")
                lines = [(line.item, line.amount) for line in order.items]
                billing = BillingService.compute(lines, list(order.discounts), list(order.taxes))
                invoice = InvoiceService.issue(db, order.customer_id, billing, purchase_order_id=order.id)
                order.subtotal = billing.subtotal
                order.total = billing.total
            order.order_state_id = new_state_id
            db.commit()
        except Exception:
            db.rollback()
            raise

        db.refresh(order)
        if invoice is not None:
            db.refresh(invoice)
            logger.info("Purchase order %s paid, invoice %s issued", order.id, invoice.id)
        return order, invoice
