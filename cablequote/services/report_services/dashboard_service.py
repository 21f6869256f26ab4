# cablequote/services/report_services/dashboard_service.py
import logging
from datetime import date
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.customer_models import SalesPerson
from cablequote.schemas.pricing_schemas import DateRange
from cablequote.schemas.report_schemas import (
    CalendarResponse,
    Dashboard,
    DashboardResponse,
    QuotationReportResponse,
)
from cablequote.services.billing_services.quotation_service import (
    fetch_quotations,
    own_sales_person_id,
    quotation_out,
)
from cablequote.services.pricing_services import (
    aggregate_by_sales_person,
    aggregate_by_status,
    calendar_month,
    daily_values,
    quotation_value,
)

logger = logging.getLogger(__name__)


async def get_dashboard(
    db: AsyncSession,
    current_user,
    date_range: DateRange = DateRange.ALL,
    reference_date: Optional[date] = None,
) -> DashboardResponse:
    """Status summary, per sales person breakdown and daily value series."""
    quotations = await fetch_quotations(db, current_user, date_range=date_range, reference_date=reference_date)

    query = select(SalesPerson).order_by(SalesPerson.name)
    own_id = await own_sales_person_id(db, current_user)
    if own_id is not None:
        query = query.where(SalesPerson.id == own_id)
    sales_persons = (await db.execute(query)).scalars().all()

    return DashboardResponse(
        message="Dashboard computed successfully",
        data=Dashboard(
            range=date_range,
            summary=aggregate_by_status(quotations),
            sales_persons=aggregate_by_sales_person(quotations, sales_persons),
            daily_values=daily_values(quotations),
        ),
    )


async def get_calendar(db: AsyncSession, current_user, year: int, month: int) -> CalendarResponse:
    if not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail="Month must be between 1 and 12")

    quotations = await fetch_quotations(db, current_user)
    return CalendarResponse(
        message="Calendar computed successfully",
        data=calendar_month(quotations, year, month),
    )


async def get_quotation_report(
    db: AsyncSession,
    current_user,
    date_range: DateRange = DateRange.ALL,
    status: Optional[str] = None,
    reference_date: Optional[date] = None,
) -> QuotationReportResponse:
    quotations = await fetch_quotations(
        db, current_user, status=status, date_range=date_range, reference_date=reference_date
    )
    return QuotationReportResponse(
        message="Quotation report generated successfully",
        range=date_range,
        total=len(quotations),
        total_value=sum((quotation_value(q) for q in quotations), 0),
        data=[quotation_out(q) for q in quotations],
    )
