# cablequote/schemas/challan_schemas.py
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional

from cablequote.schemas.pricing_schemas import Money


# --------------------------
# Challan Item Schemas
# --------------------------
class DeliveryChallanItemIn(BaseModel):
    product_id: Optional[int] = None
    part_no: Optional[str] = None
    description: Optional[str] = None
    hsn_code: Optional[str] = None
    dispatched_qty: Decimal = Field(Decimal("0"), ge=0)
    uom: Optional[str] = None
    remarks: Optional[str] = None

class DeliveryChallanItemOut(DeliveryChallanItemIn):
    id: Optional[int] = None
    position: int = 0
    dispatched_qty: Money = Decimal("0")

    class Config:
        from_attributes = True


# --------------------------
# Challan Schemas
# --------------------------
class DeliveryChallanBase(BaseModel):
    challan_date: date
    customer_id: Optional[int] = None
    quotation_id: Optional[int] = None
    vehicle_no: Optional[str] = None
    po_no: Optional[str] = None
    po_date: Optional[date] = None

class DeliveryChallanCreate(DeliveryChallanBase):
    items: List[DeliveryChallanItemIn]

class DeliveryChallanUpdate(DeliveryChallanCreate):
    """Full document: the stored item list is replaced by `items`."""
    pass

class DeliveryChallanOut(DeliveryChallanBase):
    id: int
    customer_name: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[DeliveryChallanItemOut] = []
    total_dispatched: Money = Decimal("0")

    class Config:
        from_attributes = True


# --------------------------
# Response Schemas
# --------------------------
class DeliveryChallanResponse(BaseModel):
    message: str
    data: Optional[DeliveryChallanOut] = None

class DeliveryChallanListResponse(BaseModel):
    message: str
    total: int = 0
    data: List[DeliveryChallanOut] = []

class DeliveryChallanDraftResponse(BaseModel):
    message: str
    data: DeliveryChallanCreate
