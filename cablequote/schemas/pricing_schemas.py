# cablequote/schemas/pricing_schemas.py
import enum
from datetime import date
from decimal import Decimal
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, computed_field

# Decimal in Python, plain number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

OPEN_ENDED = date(9999, 12, 31)


# --------------------------
# Enums
# --------------------------
class PriceSource(str, enum.Enum):
    LIST = "LP"
    SPECIAL = "SP"


class QuotationStatus(str, enum.Enum):
    OPEN = "Open"
    PO_RECEIVED = "PO received"
    PARTIAL_PO_RECEIVED = "Partial PO Received"
    EXPIRED = "Expired"
    LOST = "Lost"


class DateRange(str, enum.Enum):
    ALL = "all"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class DemandStatus(str, enum.Enum):
    DUE = "Due"
    SCHEDULED = "Scheduled"


# --------------------------
# Price bands
# --------------------------
class PriceBand(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    list_price: Money = Decimal("0")
    special_price: Money = Decimal("0")
    valid_from: date
    valid_to: date = OPEN_ENDED


class PriceResolution(BaseModel):
    unit_price: Money = Decimal("0")
    price_source: PriceSource = PriceSource.LIST
    found: bool = False
    band: Optional[PriceBand] = None


# --------------------------
# Line and document totals
# --------------------------
class LinePricing(BaseModel):
    net_unit_price: Money
    line_amount: Money
    freight_per_unit: Money
    freight_amount: Money


class DocumentTotals(BaseModel):
    total_quantity_ordered: Money = Decimal("0")
    total_quantity_requested: Money = Decimal("0")
    total_amount: Money = Decimal("0")
    total_freight: Money = Decimal("0")

    @computed_field
    @property
    def grand_total(self) -> Money:
        return self.total_amount + self.total_freight


# --------------------------
# Status aggregation
# --------------------------
class StatusBucket(BaseModel):
    count: int = 0
    value: Money = Decimal("0")


def _empty_status_buckets() -> Dict[str, StatusBucket]:
    return {status.value: StatusBucket() for status in QuotationStatus}


class StatusSummary(BaseModel):
    total: StatusBucket = Field(default_factory=StatusBucket)
    per_status: Dict[str, StatusBucket] = Field(default_factory=_empty_status_buckets)


class SalesPersonSummary(StatusSummary):
    sales_person_id: int
    name: str


class DailyValue(BaseModel):
    quotation_date: date
    value: Money


class CalendarDay(BaseModel):
    day: int
    quotes: List[int] = []
    reminders: List[int] = []


class CalendarMonth(BaseModel):
    year: int
    month: int
    days: List[CalendarDay] = []


# --------------------------
# Stock / demand
# --------------------------
class FreeStock(BaseModel):
    free_stock: Money
    shortage: Money


class MatchedOrder(BaseModel):
    order_id: Optional[str] = None
    order_no: Optional[str] = None
    party_name: Optional[str] = None
    item_name: Optional[str] = None
    part_no: Optional[str] = None
    balance_qty: Money = Decimal("0")
    due_on: Optional[date] = None
    status: DemandStatus


class StockCheckRow(BaseModel):
    stock_id: Optional[str] = None
    description: Optional[str] = None
    quantity: Money = Decimal("0")
    immediate_demand: Money = Decimal("0")
    scheduled_demand: Money = Decimal("0")
    free_stock: Money = Decimal("0")
    shortage: Money = Decimal("0")
    orders: List[MatchedOrder] = []


class StockCheckResult(BaseModel):
    rows: List[StockCheckRow] = []
    total_shortage: Money = Decimal("0")
