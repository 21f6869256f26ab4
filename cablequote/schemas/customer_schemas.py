# cablequote/schemas/customer_schemas.py
from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional

from cablequote.schemas.pricing_schemas import Money, StatusSummary


# --------------------------
# Sales Person Schemas
# --------------------------
class SalesPersonBase(BaseModel):
    name: str
    email: Optional[str] = None
    mobile: Optional[str] = None

class SalesPersonCreate(SalesPersonBase):
    pass

class SalesPersonUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    mobile: Optional[str] = None

class SalesPersonOut(SalesPersonBase):
    id: int

    class Config:
        from_attributes = True

class SalesPersonResponse(BaseModel):
    message: str
    data: Optional[SalesPersonOut] = None

class SalesPersonListResponse(BaseModel):
    message: str
    data: List[SalesPersonOut] = []


# --------------------------
# Customer Schemas
# --------------------------
class CustomerBase(BaseModel):
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    sales_person_id: Optional[int] = None
    discount_single_core: Decimal = Field(Decimal("0"), ge=0)
    discount_multi_core: Decimal = Field(Decimal("0"), ge=0)
    discount_special_cable: Decimal = Field(Decimal("0"), ge=0)
    discount_accessories: Decimal = Field(Decimal("0"), ge=0)

class CustomerCreate(CustomerBase):
    pass

class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    sales_person_id: Optional[int] = None
    discount_single_core: Optional[Decimal] = Field(None, ge=0)
    discount_multi_core: Optional[Decimal] = Field(None, ge=0)
    discount_special_cable: Optional[Decimal] = Field(None, ge=0)
    discount_accessories: Optional[Decimal] = Field(None, ge=0)

class CustomerOut(BaseModel):
    id: int
    name: str
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    sales_person_id: Optional[int] = None
    discount_single_core: Money = Decimal("0")
    discount_multi_core: Money = Decimal("0")
    discount_special_cable: Money = Decimal("0")
    discount_accessories: Money = Decimal("0")

    class Config:
        from_attributes = True

class CustomerResponse(BaseModel):
    message: str
    data: Optional[CustomerOut] = None

class CustomerListResponse(BaseModel):
    message: str
    total: int = 0
    data: List[CustomerOut] = []

class CustomerSummaryResponse(BaseModel):
    message: str
    customer_id: int
    data: StatusSummary
