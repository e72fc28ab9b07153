"""
Reports API routes
"""
from datetime import date

from fastapi import APIRouter, Depends, Query

from app.dependencies import AuditContext, require_permission
from app.permission_config import PERMISSION_VIEW_SALES_REPORT
from app.schemas.reports import SalesReportResponse
from app.services.report_service import ReportService

router = APIRouter()


@router.get("/sales", response_model=SalesReportResponse)
def sales_report(
    start_date: date = Query(...),
    end_date: date = Query(...),
    audit: AuditContext = Depends(require_permission(PERMISSION_VIEW_SALES_REPORT, "ViewSalesReport")),
):
    """Invoice and external sale totals plus the top sold items, both dates inclusive."""
    try:
        report = ReportService.sales(audit.db, start_date, end_date)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Sales report {start_date} to {end_date} generated")
    return report
