# cablequote/schemas/product_schemas.py
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from cablequote.schemas.pricing_schemas import Money, PriceBand, PriceResolution


# --------------------------
# Price Band Schemas
# --------------------------
class PriceBandIn(BaseModel):
    list_price: Decimal = Field(Decimal("0"), ge=0)
    special_price: Decimal = Field(Decimal("0"), ge=0)
    valid_from: date
    # Derived on save; accepted only for round-tripping exports
    valid_to: Optional[date] = None


def _unique_start_dates(prices):
    starts = [band.valid_from for band in prices or []]
    if len(starts) != len(set(starts)):
        raise ValueError("Two price bands cannot start on the same date")
    return prices


# --------------------------
# Product Schemas
# --------------------------
class ProductCreate(BaseModel):
    part_no: str = Field(..., min_length=1)
    description: str
    hsn_code: Optional[str] = None
    uom: Optional[str] = None
    plant: Optional[str] = None
    weight: Decimal = Field(Decimal("0"), ge=0)
    prices: List[PriceBandIn] = []

    @field_validator("prices")
    def unique_start_dates(cls, value):
        return _unique_start_dates(value)

class ProductUpdate(BaseModel):
    """All fields optional; `prices`, when present, replaces the whole band list."""
    part_no: Optional[str] = None
    description: Optional[str] = None
    hsn_code: Optional[str] = None
    uom: Optional[str] = None
    plant: Optional[str] = None
    weight: Optional[Decimal] = Field(None, ge=0)
    prices: Optional[List[PriceBandIn]] = None

    @field_validator("prices")
    def unique_start_dates(cls, value):
        return _unique_start_dates(value)

class ProductOut(BaseModel):
    id: int
    part_no: str
    description: str
    hsn_code: Optional[str] = None
    uom: Optional[str] = None
    plant: Optional[str] = None
    weight: Money = Decimal("0")
    prices: List[PriceBand] = []
    current_price: Optional[PriceResolution] = None

    class Config:
        from_attributes = True

class ProductResponse(BaseModel):
    message: str
    data: Optional[ProductOut] = None

class ProductListResponse(BaseModel):
    message: str
    total: int = 0
    data: List[ProductOut] = []

class ProductPriceResponse(BaseModel):
    message: str
    product_id: int
    on: date
    data: PriceResolution
