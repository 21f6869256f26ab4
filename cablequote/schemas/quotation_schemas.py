# cablequote/schemas/quotation_schemas.py
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from cablequote.schemas.pricing_schemas import DocumentTotals, Money, PriceSource, QuotationStatus
from cablequote.services.pricing_services.coerce import to_discount

COLUMN_SCALE = Decimal("0.0001")


# --------------------------
# Quotation Line Schemas
# --------------------------
class QuotationLineIn(BaseModel):
    product_id: Optional[int] = None
    part_no: Optional[str] = None
    description: Optional[str] = None
    uom: Optional[str] = None
    quantity_ordered: int = Field(0, ge=0)     # MOQ
    quantity_requested: int = Field(0, ge=0)   # REQ
    unit_price: Decimal = Field(Decimal("0"), ge=0)
    price_source: PriceSource = PriceSource.LIST
    discount_percent: Decimal = Decimal("0")
    stock_status: Optional[str] = "Ex-Stock"
    freight_eligible: bool = False
    freight_weight_per_unit: Decimal = Field(Decimal("0"), ge=0)
    freight_lead_time: Optional[str] = None

    @field_validator("discount_percent", mode="before")
    def parse_discount(cls, value):
        # The grid sends whatever was typed; junk and negatives mean no discount
        return to_discount(value)

    @field_validator("unit_price", "discount_percent", "freight_weight_per_unit")
    def round_to_column_scale(cls, value: Decimal) -> Decimal:
        # Stored as Numeric(_, 4); previews must price what gets saved
        try:
            return value.quantize(COLUMN_SCALE, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError("value is too large")

    @model_validator(mode="after")
    def clear_lead_time(self):
        if not self.freight_eligible:
            self.freight_lead_time = None
        return self

class QuotationLineOut(BaseModel):
    id: Optional[int] = None
    position: int = 0
    product_id: Optional[int] = None
    part_no: Optional[str] = None
    description: Optional[str] = None
    uom: Optional[str] = None
    quantity_ordered: int = 0
    quantity_requested: int = 0
    unit_price: Money = Decimal("0")
    price_source: PriceSource = PriceSource.LIST
    discount_percent: Money = Decimal("0")
    stock_status: Optional[str] = None
    freight_eligible: bool = False
    freight_weight_per_unit: Money = Decimal("0")
    freight_lead_time: Optional[str] = None

    # Computed
    net_unit_price: Money = Decimal("0")
    line_amount: Money = Decimal("0")
    freight_per_unit: Money = Decimal("0")
    freight_amount: Money = Decimal("0")

    class Config:
        from_attributes = True


# --------------------------
# Quotation Schemas
# --------------------------
class QuotationBase(BaseModel):
    quotation_date: date
    enquiry_date: Optional[date] = None
    customer_id: Optional[int] = None
    sales_person_id: Optional[int] = None
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    other_terms: Optional[str] = None
    payment_terms: Optional[str] = None
    prepared_by: Optional[str] = None
    products_brand: Optional[str] = None
    mode_of_enquiry: Optional[str] = None
    status: QuotationStatus = QuotationStatus.OPEN
    comments: Optional[str] = None

class QuotationCreate(QuotationBase):
    lines: List[QuotationLineIn]

class QuotationUpdate(QuotationCreate):
    """Full document: the stored line list is replaced by `lines`."""
    pass

class QuotationOut(QuotationBase):
    id: int
    status: str
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    lines: List[QuotationLineOut] = []
    totals: DocumentTotals = DocumentTotals()

    class Config:
        from_attributes = True


# --------------------------
# Response Schemas
# --------------------------
class QuotationResponse(BaseModel):
    message: str
    data: Optional[QuotationOut] = None
    warnings: List[str] = []

class QuotationListResponse(BaseModel):
    message: str
    total: int = 0
    total_value: Money = Decimal("0")
    data: List[QuotationOut] = []

class QuotationTotalsResponse(BaseModel):
    message: str
    quotation_id: int
    data: DocumentTotals


# --------------------------
# Preview (unsaved lines)
# --------------------------
class QuotationPreviewRequest(BaseModel):
    lines: List[QuotationLineIn]

class QuotationPreviewResponse(BaseModel):
    message: str
    lines: List[QuotationLineOut] = []
    totals: DocumentTotals = DocumentTotals()


# --------------------------
# Printable document
# --------------------------
class CompanyHeader(BaseModel):
    name: str
    address: str
    contact: str
    gstin: str

class DocumentParty(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None

class DocumentLine(BaseModel):
    sl_no: int
    part_no: Optional[str] = None
    description: Optional[str] = None
    uom: Optional[str] = None
    quantity: int = 0
    list_price: Money = Decimal("0")
    price_source: PriceSource = PriceSource.LIST
    discount_percent: Money = Decimal("0")
    unit_price: Money = Decimal("0")
    amount: Money = Decimal("0")
    freight_amount: Money = Decimal("0")
    total: Money = Decimal("0")
    stock_status: Optional[str] = None
    freight_lead_time: Optional[str] = None

class QuotationDocument(BaseModel):
    layout: str
    title: str
    quotation_number: str
    quotation_date: date
    company: CompanyHeader
    customer: DocumentParty = DocumentParty()
    contact_person: Optional[str] = None
    contact_number: Optional[str] = None
    sales_person: Optional[str] = None
    prepared_by: Optional[str] = None
    payment_terms: Optional[str] = None
    other_terms: Optional[str] = None
    lines: List[DocumentLine] = []
    totals: DocumentTotals = DocumentTotals()
    amount_payable: Money = Decimal("0")
    amount_in_words: str

class QuotationDocumentResponse(BaseModel):
    message: str
    data: QuotationDocument
