"""
External sales: single-item sales registered outside the purchase order flow
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import ExternalSale
from app.schemas.sale import ExternalSaleCreate
from app.services.billing_service import BillingService, money
from app.services.errors import NotFoundError
from app.services.items_service import ItemService

logger = logging.getLogger(__name__)


class ExternalSaleService:

    @staticmethod
    def get_by_id(db: Session, sale_id: int) -> Optional[ExternalSale]:
        return db.query(ExternalSale).filter(ExternalSale.id == sale_id).first()

    @staticmethod
    def get_all(db: Session) -> List[ExternalSale]:
        return db.query(ExternalSale).order_by(ExternalSale.id.desc()).all()

    @staticmethod
    def create(db: Session, data: ExternalSaleCreate, user_email: str) -> ExternalSale:
        item = ItemService.get_item(db, data.item_id)
        if not item:
            raise NotFoundError(f"Item {data.item_id} not found")
        unit_price = data.unit_price if data.unit_price is not None else Decimal(str(item.selling_price))

        BillingService.take_stock([(item, data.amount)])
        sale = ExternalSale(
            date_time=datetime.now(timezone.utc),
            item_id=item.id,
            amount=data.amount,
            unit_price=unit_price,
            total=money(unit_price * data.amount),
            user_email=user_email,
            notes=data.notes,
        )
        db.add(sale)
        db.commit()
        db.refresh(sale)
        logger.info("External sale %s: %s x item %s by %s", sale.id, data.amount, item.id, user_email)
        return sale
