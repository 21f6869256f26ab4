# cablequote/routers/reports/dashboard.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.db import get_db
from cablequote.schemas.pricing_schemas import DateRange, QuotationStatus
from cablequote.schemas.report_schemas import CalendarResponse, DashboardResponse, QuotationReportResponse
from cablequote.services.report_services import dashboard_service
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES

router = APIRouter(tags=["Reports"])


@router.get("/dashboard", response_model=DashboardResponse)
@require_role(ALL_ROLES)
async def dashboard_route(
    date_range: DateRange = Query(DateRange.ALL, alias="range"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await dashboard_service.get_dashboard(db, _user, date_range)


@router.get("/calendar", response_model=CalendarResponse)
@require_role(ALL_ROLES)
async def calendar_route(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    today = date.today()
    return await dashboard_service.get_calendar(db, _user, year or today.year, month or today.month)


@router.get("/quotations", response_model=QuotationReportResponse)
@require_role(ALL_ROLES)
async def quotation_report_route(
    date_range: DateRange = Query(DateRange.ALL, alias="range"),
    status: Optional[QuotationStatus] = Query(None),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await dashboard_service.get_quotation_report(
        db, _user, date_range, status.value if status else None
    )
