"""
Items service: catalog items, additional expenses and selling price history.

Every selling price an item has had is kept in historical_item_prices:
one row on create, one more each time an update changes selling_price.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import AdditionalExpense, HistoricalItemPrice, Item, ItemType
from app.schemas.item import AdditionalExpenseBase, ItemCreate, ItemUpdate
from app.services.errors import NotFoundError
from app.services.query_helpers import contains_ci, id_prefix

logger = logging.getLogger(__name__)


def _record_price(db: Session, item: Item, price: Decimal) -> None:
    db.add(HistoricalItemPrice(item_id=item.id, price=price))


class ItemService:
    """Service for managing items"""

    @staticmethod
    def get_item(db: Session, item_id: int) -> Optional[Item]:
        return db.query(Item).filter(Item.id == item_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Item]:
        return db.query(Item).order_by(Item.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Item]:
        return db.query(Item).filter(id_prefix(Item.id, query)).order_by(Item.id).all()

    @staticmethod
    def search_by_name(db: Session, query: str) -> List[Item]:
        return db.query(Item).filter(contains_ci(Item.name, query)).order_by(Item.name.asc()).all()

    @staticmethod
    def _check_item_type(db: Session, item_type_id: int) -> None:
        if not db.query(ItemType.id).filter(ItemType.id == item_type_id).first():
            raise ValueError(f"Item type {item_type_id} does not exist")

    @staticmethod
    def create_item(db: Session, data: ItemCreate) -> Item:
        ItemService._check_item_type(db, data.item_type_id)
        item = Item(**data.model_dump())
        db.add(item)
        db.flush()
        _record_price(db, item, item.selling_price)
        db.commit()
        db.refresh(item)
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    @staticmethod
    def update_item(db: Session, item_id: int, data: ItemUpdate) -> Item:
        item = ItemService.get_item(db, item_id)
        if not item:
            raise NotFoundError("Item not found")
        ItemService._check_item_type(db, data.item_type_id)

        price_changed = Decimal(str(item.selling_price)) != Decimal(str(data.selling_price))
        for key, value in data.model_dump().items():
            setattr(item, key, value)
        if price_changed:
            _record_price(db, item, data.selling_price)
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def update_state(db: Session, item_id: int, item_state: bool) -> Item:
        item = ItemService.get_item(db, item_id)
        if not item:
            raise NotFoundError("Item not found")
        item.item_state = item_state
        db.commit()
        db.refresh(item)
        return item

    @staticmethod
    def check_stock(db: Session, item_id: int, quantity: int) -> dict:
        item = ItemService.get_item(db, item_id)
        if not item:
            raise NotFoundError("Item not found")
        if quantity <= 0:
            raise ValueError("quantity must be greater than zero")
        return {
            "item_id": item.id,
            "stock": item.stock,
            "requested": quantity,
            "available": item.stock >= quantity,
        }


class AdditionalExpenseService:

    @staticmethod
    def get_by_id(db: Session, expense_id: int) -> Optional[AdditionalExpense]:
        return db.query(AdditionalExpense).filter(AdditionalExpense.id == expense_id).first()

    @staticmethod
    def get_all(db: Session) -> List[AdditionalExpense]:
        return db.query(AdditionalExpense).order_by(AdditionalExpense.id).all()

    @staticmethod
    def _check_item(db: Session, item_id: int) -> None:
        if not ItemService.get_item(db, item_id):
            raise NotFoundError(f"Item {item_id} not found")

    @staticmethod
    def create(db: Session, data: AdditionalExpenseBase) -> AdditionalExpense:
        AdditionalExpenseService._check_item(db, data.item_id)
        expense = AdditionalExpense(**data.model_dump())
        db.add(expense)
        db.commit()
        db.refresh(expense)
        return expense

    @staticmethod
    def update(db: Session, expense_id: int, data: AdditionalExpenseBase) -> AdditionalExpense:
        expense = AdditionalExpenseService.get_by_id(db, expense_id)
        if not expense:
            raise NotFoundError("Additional expense not found")
        AdditionalExpenseService._check_item(db, data.item_id)
        for key, value in data.model_dump().items():
            setattr(expense, key, value)
        db.commit()
        db.refresh(expense)
        return expense

    @staticmethod
    def delete(db: Session, expense_id: int) -> None:
        expense = AdditionalExpenseService.get_by_id(db, expense_id)
        if not expense:
            raise NotFoundError("Additional expense not found")
        db.delete(expense)
        db.commit()


class HistoricalItemPriceService:

    @staticmethod
    def get_for_item(db: Session, item_id: int) -> List[HistoricalItemPrice]:
        """Price history of an item, oldest first."""
        return (
            db.query(HistoricalItemPrice)
            .filter(HistoricalItemPrice.item_id == item_id)
            .order_by(HistoricalItemPrice.id.asc())
            .all()
        )
