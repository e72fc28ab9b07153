"""
On-demand PDF for a sales invoice. Builds the document and returns bytes for download.
"""
from decimal import Decimal
from io import BytesIO
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from app.models import Invoice
from app.services.invoice_service import InvoiceService


def _doc_styles():
    styles = getSampleStyleSheet()
    return {
        "company_name": ParagraphStyle(
            name="CompanyName", parent=styles["Normal"],
            fontSize=13, fontName="Helvetica-Bold", spaceAfter=4,
        ),
        "detail": ParagraphStyle(
            name="Detail", parent=styles["Normal"],
            fontSize=11, spaceAfter=2,
        ),
        "heading": ParagraphStyle(
            name="Heading", parent=styles["Heading1"],
            fontSize=14, spaceAfter=8, alignment=1,
        ),
    }


def _items_table(flow, rows: List[Dict[str, Any]]) -> None:
    data = [["Item", "Qty", "Unit Price", "Total"]]
    for row in rows:
        data.append([
            row["name"] or "-",
            str(row["amount"]),
            f"{row['unit_price']:,.2f}",
            f"{row['line_total']:,.2f}",
        ])
    if len(data) == 1:
        data.append(["-", "-", "-", "-"])
    t = Table(data, colWidths=[80 * mm, 25 * mm, 35 * mm, 35 * mm], repeatRows=1)
    t.setStyle(TableStyle([
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E8E8E8")),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
    ]))
    flow.append(t)


def build_invoice_pdf(invoice: Invoice) -> bytes:
    """Build A4 PDF for an invoice. Returns bytes for download."""
    rows = []
    for line in invoice.items:
        unit_price = Decimal(str(line.unit_price))
        rows.append({
            "name": line.item.name if line.item else f"Item {line.item_id}",
            "amount": line.amount,
            "unit_price": unit_price,
            "line_total": unit_price * line.amount,
        })
    totals = InvoiceService.breakdown(invoice)
    customer = invoice.customer

    buf = BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, leftMargin=15*mm, rightMargin=15*mm, topMargin=15*mm, bottomMargin=15*mm)
    st = _doc_styles()
    flow = []
    for i, line in enumerate((invoice.enterprise_data or "").splitlines() or [""]):
        flow.append(Paragraph(escape(line), st["company_name"] if i == 0 else st["detail"]))
    flow.append(Spacer(1, 6 * mm))
    flow.append(Paragraph("SALES INVOICE", st["heading"]))
    flow.append(Paragraph(f"No. {invoice.id}", st["detail"]))
    if invoice.purchase_order_id:
        flow.append(Paragraph(f"Purchase order: {invoice.purchase_order_id}", st["detail"]))
    flow.append(Spacer(1, 4 * mm))

    info = [["Date:", invoice.date_time.strftime("%Y-%m-%d %H:%M")]]
    if customer:
        full_name = " ".join(p for p in [customer.customer_name, customer.lastname] if p)
        info.append(["Customer:", full_name])
        info.append(["Document:", customer.customer_id])
        info.append(["Email:", customer.email])
    t_info = Table(info, colWidths=[28*mm, 100*mm])
    t_info.setStyle(TableStyle([("FONTNAME", (0, 0), (-1, -1), "Helvetica"), ("FONTSIZE", (0, 0), (-1, -1), 10), ("BOTTOMPADDING", (0, 0), (-1, -1), 2), ("TOPPADDING", (0, 0), (-1, -1), 2)]))
    flow.append(t_info)
    flow.append(Spacer(1, 6 * mm))

    _items_table(flow, rows)
    flow.append(Spacer(1, 4 * mm))
    flow.append(Paragraph(f"<b>Subtotal: {totals['subtotal']:,.2f}</b>", st["detail"]))
    if invoice.discounts:
        names = escape(", ".join(d.name for d in invoice.discounts))
        flow.append(Paragraph(f"Discounts ({names}): -{totals['discount']:,.2f}", st["detail"]))
    if invoice.taxes:
        names = escape(", ".join(t.name for t in invoice.taxes))
        flow.append(Paragraph(f"Taxes ({names}): {totals['tax']:,.2f}", st["detail"]))
    flow.append(Paragraph(f"<b>Total: {Decimal(str(invoice.total)):,.2f}</b>", st["detail"]))
    doc.build(flow)
    return buf.getvalue()
