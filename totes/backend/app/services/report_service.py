"""
Sales report over a date range (both ends inclusive).
"""
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import ExternalSale, Invoice, InvoiceItem, Item
from app.services.billing_service import money

TOP_ITEMS_LIMIT = 10


def _bounds(start_date: date, end_date: date):
    start = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
    end = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
    return start, end


class ReportService:

    @staticmethod
    def sales(db: Session, start_date: date, end_date: date) -> dict:
        if start_date > end_date:
            raise ValueError("start_date must be on or before end_date")
        start, end = _bounds(start_date, end_date)

        invoice_count, invoice_total = (
            db.query(func.count(Invoice.id), func.coalesce(func.sum(Invoice.total), 0))
            .filter(Invoice.date_time >= start, Invoice.date_time < end)
            .one()
        )
        sale_count, sale_total = (
            db.query(func.count(ExternalSale.id), func.coalesce(func.sum(ExternalSale.total), 0))
            .filter(ExternalSale.date_time >= start, ExternalSale.date_time < end)
            .one()
        )

        amounts: Dict[int, int] = {}
        invoiced = (
            db.query(InvoiceItem.item_id, func.sum(InvoiceItem.amount))
            .join(Invoice, InvoiceItem.invoice_id == Invoice.id)
            .filter(Invoice.date_time >= start, Invoice.date_time < end)
            .group_by(InvoiceItem.item_id)
            .all()
        )
        sold_outside = (
            db.query(ExternalSale.item_id, func.sum(ExternalSale.amount))
            .filter(ExternalSale.date_time >= start, ExternalSale.date_time < end)
            .group_by(ExternalSale.item_id)
            .all()
        )
        for item_id, amount in list(invoiced) + list(sold_outside):
            amounts[item_id] = amounts.get(item_id, 0) + int(amount or 0)

        ranked = sorted(amounts.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_ITEMS_LIMIT]
        names = {}
        if ranked:
            names = dict(db.query(Item.id, Item.name).filter(Item.id.in_([k for k, _ in ranked])).all())

        invoice_total = money(Decimal(str(invoice_total)))
        sale_total = money(Decimal(str(sale_total)))
        return {
            "start_date": start_date,
            "end_date": end_date,
            "invoice_count": invoice_count,
            "invoice_total": invoice_total,
            "external_sale_count": sale_count,
            "external_sale_total": sale_total,
            "grand_total": invoice_total + sale_total,
            "top_items": [
                {"item_id": item_id, "name": names.get(item_id, ""), "amount": amount}
                for item_id, amount in ranked
            ],
        }
