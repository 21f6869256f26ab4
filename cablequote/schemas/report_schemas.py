# cablequote/schemas/report_schemas.py
from decimal import Decimal
from pydantic import BaseModel
from typing import List

from cablequote.schemas.pricing_schemas import (
    CalendarMonth,
    DailyValue,
    DateRange,
    Money,
    SalesPersonSummary,
    StatusSummary,
)
from cablequote.schemas.quotation_schemas import QuotationOut


class Dashboard(BaseModel):
    range: DateRange
    summary: StatusSummary
    sales_persons: List[SalesPersonSummary] = []
    daily_values: List[DailyValue] = []

class DashboardResponse(BaseModel):
    message: str
    data: Dashboard

class CalendarResponse(BaseModel):
    message: str
    data: CalendarMonth

class QuotationReportResponse(BaseModel):
    message: str
    range: DateRange
    total: int = 0
    total_value: Money = Decimal("0")
    data: List[QuotationOut] = []
