# cablequote/schemas/stock_schemas.py
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field, computed_field
from typing import List, Optional

from cablequote.schemas.pricing_schemas import Money, StockCheckResult


# --------------------------
# Stock Statement Schemas
# --------------------------
class StockStatementIn(BaseModel):
    # Omit for new lines; existing lines keep their id across uploads
    id: Optional[str] = None
    description: str = Field(..., min_length=1)
    quantity: Decimal = Decimal("0")
    uom: Optional[str] = None
    location: Optional[str] = None

class StockStatementOut(BaseModel):
    id: str
    description: str
    quantity: Money = Decimal("0")
    uom: Optional[str] = None
    location: Optional[str] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class StockStatementReplace(BaseModel):
    lines: List[StockStatementIn]


# --------------------------
# Pending Sales Order Schemas
# --------------------------
class PendingOrderIn(BaseModel):
    id: Optional[str] = None
    order_date: Optional[date] = None
    order_no: Optional[str] = None
    party_name: Optional[str] = None
    item_name: Optional[str] = None
    material_code: Optional[str] = None
    part_no: Optional[str] = None
    ordered_qty: Decimal = Field(Decimal("0"), ge=0)
    balance_qty: Decimal = Field(Decimal("0"), ge=0)
    rate: Decimal = Field(Decimal("0"), ge=0)
    discount: Decimal = Field(Decimal("0"), ge=0)
    due_on: Optional[date] = None

class PendingOrderOut(BaseModel):
    id: str
    order_date: Optional[date] = None
    order_no: Optional[str] = None
    party_name: Optional[str] = None
    item_name: Optional[str] = None
    material_code: Optional[str] = None
    part_no: Optional[str] = None
    ordered_qty: Money = Decimal("0")
    balance_qty: Money = Decimal("0")
    rate: Money = Decimal("0")
    discount: Money = Decimal("0")
    due_on: Optional[date] = None

    @computed_field
    @property
    def value(self) -> Money:
        """Balance value after the order discount."""
        return self.balance_qty * self.rate * (1 - self.discount / Decimal("100"))

    class Config:
        from_attributes = True

class PendingOrderReplace(BaseModel):
    orders: List[PendingOrderIn]


# --------------------------
# Response Schemas
# --------------------------
class SyncResult(BaseModel):
    upserted: int = 0
    deleted: int = 0

class StockStatementListResponse(BaseModel):
    message: str
    total: int = 0
    data: List[StockStatementOut] = []

class PendingOrderListResponse(BaseModel):
    message: str
    total: int = 0
    total_value: Money = Decimal("0")
    data: List[PendingOrderOut] = []

class SyncResponse(BaseModel):
    message: str
    data: SyncResult

class StockCheckResponse(BaseModel):
    message: str
    horizon_days: int
    data: StockCheckResult
