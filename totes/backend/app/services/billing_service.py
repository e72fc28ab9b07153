"""
Billing: subtotal, discounts, taxes and totals for a set of item lines.

Used by the /billing calculator, purchase orders and invoices so all three
price the same lines the same way.

    subtotal = sum(selling_price * amount)
    discount = sum(discounts), capped at subtotal; percentages apply to subtotal
    tax      = sum(taxes); percentages apply to (subtotal - discount)
    total    = subtotal - discount + tax

Amounts are rounded to 2 decimals, half-up.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.models import DiscountType, Item, TaxType
from app.schemas.billing import AdjustmentTypeBase, BillingItem
from app.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal("100")


def money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


def _adjustment(base: Decimal, value, is_percentage: bool) -> Decimal:
    value = Decimal(str(value or 0))
    if is_percentage:
        return money(base * value / HUNDRED)
    return money(value)


@dataclass
class BillingResult:
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    lines: List[Tuple[Item, int]] = field(default_factory=list)
    discounts: List[DiscountType] = field(default_factory=list)
    taxes: List[TaxType] = field(default_factory=list)


class BillingService:

    @staticmethod
    def resolve_items(db: Session, lines: Iterable[BillingItem]) -> List[Tuple[Item, int]]:
        """Load the items for lines; repeated item ids are merged into one line."""
        amounts: Dict[int, int] = {}
        for line in lines:
            amounts[line.item_id] = amounts.get(line.item_id, 0) + line.amount
        if not amounts:
            raise ValueError("At least one item is required")
        items = {i.id: i for i in db.query(Item).filter(Item.id.in_(list(amounts))).all()}
        missing = sorted(set(amounts) - set(items))
        if missing:
            raise NotFoundError(f"Item(s) not found: {', '.join(str(m) for m in missing)}")
        return [(items[item_id], amount) for item_id, amount in amounts.items()]

    @staticmethod
    def resolve_discounts(db: Session, ids: Optional[Iterable[int]]) -> List[DiscountType]:
        wanted = sorted(set(ids or []))
        if not wanted:
            return []
        found = db.query(DiscountType).filter(DiscountType.id.in_(wanted)).all()
        missing = sorted(set(wanted) - {d.id for d in found})
        if missing:
            raise NotFoundError(f"Discount type(s) not found: {', '.join(str(m) for m in missing)}")
        return found

    @staticmethod
    def resolve_taxes(db: Session, ids: Optional[Iterable[int]]) -> List[TaxType]:
        wanted = sorted(set(ids or []))
        if not wanted:
            return []
        found = db.query(TaxType).filter(TaxType.id.in_(wanted)).all()
        missing = sorted(set(wanted) - {t.id for t in found})
        if missing:
            raise NotFoundError(f"Tax type(s) not found: {', '.join(str(m) for m in missing)}")
        return found

    @staticmethod
    def adjust(subtotal, discounts: List[DiscountType], taxes: List[TaxType]) -> Tuple[Decimal, Decimal, Decimal]:
        """(discount, tax, total) for an already computed subtotal."""
        subtotal = money(subtotal)
        discount = sum((_adjustment(subtotal, d.value, d.is_percentage) for d in discounts), Decimal("0"))
        discount = min(money(discount), subtotal)
        taxable = subtotal - discount
        tax = money(sum((_adjustment(taxable, t.value, t.is_percentage) for t in taxes), Decimal("0")))
        return discount, tax, money(taxable + tax)

    @staticmethod
    def compute(
        lines: List[Tuple[Item, int]],
        discounts: List[DiscountType],
        taxes: List[TaxType],
    ) -> BillingResult:
        subtotal = money(sum(
            (Decimal(str(item.selling_price)) * amount for item, amount in lines),
            Decimal("0"),
        ))
        discount, tax, total = BillingService.adjust(subtotal, discounts, taxes)
        return BillingResult(
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            total=total,
            lines=lines,
            discounts=discounts,
            taxes=taxes,
        )

    @staticmethod
    def calculate(
        db: Session,
        lines: Iterable[BillingItem],
        discount_ids: Optional[Iterable[int]] = None,
        tax_ids: Optional[Iterable[int]] = None,
    ) -> BillingResult:
        return BillingService.compute(
            BillingService.resolve_items(db, lines),
            BillingService.resolve_discounts(db, discount_ids),
            BillingService.resolve_taxes(db, tax_ids),
        )

    @staticmethod
    def take_stock(lines: List[Tuple[Item, int]]) -> None:
        """
        Decrement stock for every line. Checks all lines first so nothing is
        touched when one is short. Caller commits.
        """
        short = [item for item, amount in lines if (item.stock or 0) < amount]
        if short:
            names = ", ".join(f"{i.name} (id {i.id}, stock {i.stock})" for i in short)
            logger.warning("Stock check failed: %s", names)
            raise ConflictError(f"Insufficient stock for: {names}")
        for item, amount in lines:
            item.stock = item.stock - amount


class _AdjustmentTypeService:
    model = None
    label = ""

    @classmethod
    def get_by_id(cls, db: Session, type_id: int):
        return db.query(cls.model).filter(cls.model.id == type_id).first()

    @classmethod
    def get_all(cls, db: Session) -> List:
        return db.query(cls.model).order_by(cls.model.id).all()

    @classmethod
    def create(cls, db: Session, data: AdjustmentTypeBase):
        if db.query(cls.model.id).filter(cls.model.name == data.name).first():
            raise ConflictError(f"{cls.label} '{data.name}' already exists")
        record = cls.model(**data.model_dump())
        db.add(record)
        db.commit()
        db.refresh(record)
        return record


class DiscountTypeService(_AdjustmentTypeService):
    model = DiscountType
    label = "Discount type"


class TaxTypeService(_AdjustmentTypeService):
    model = TaxType
    label = "Tax type"
