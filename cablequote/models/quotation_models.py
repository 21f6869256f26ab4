# cablequote/models/quotation_models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, ForeignKey,
    Date, DateTime, Numeric, Text, func
)
from sqlalchemy.orm import relationship
from cablequote.core.db import Base
from cablequote.schemas.pricing_schemas import PriceSource, QuotationStatus


# ==================================================
# QUOTATION MODEL
# ==================================================
class Quotation(Base):
    __tablename__ = "quotations"

    # Assigned as max(id) + 1 on first save, never changed afterwards
    id = Column(Integer, primary_key=True, autoincrement=False)
    quotation_date = Column(Date, nullable=False, index=True)
    enquiry_date = Column(Date, nullable=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    sales_person_id = Column(Integer, ForeignKey("sales_persons.id", ondelete="SET NULL"), nullable=True, index=True)
    contact_person = Column(String, nullable=True)
    contact_number = Column(String, nullable=True)

    # Terms
    other_terms = Column(Text, nullable=True)
    payment_terms = Column(String, nullable=True)
    prepared_by = Column(String, nullable=True)
    products_brand = Column(String, nullable=True)
    mode_of_enquiry = Column(String, nullable=True)

    status = Column(String, nullable=False, default=QuotationStatus.OPEN.value, index=True)
    comments = Column(Text, nullable=True)

    created_by = Column(String, nullable=True)
    updated_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    customer = relationship("Customer", back_populates="quotations", lazy="selectin")
    lines = relationship(
        "QuotationItem",
        back_populates="quotation",
        cascade="all, delete-orphan",
        order_by="QuotationItem.position",
        lazy="selectin",
    )


# ==================================================
# QUOTATION ITEM MODEL
# ==================================================
class QuotationItem(Base):
    __tablename__ = "quotation_items"

    id = Column(Integer, primary_key=True, index=True)
    quotation_id = Column(Integer, ForeignKey("quotations.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    product_id = Column(Integer, nullable=True)
    part_no = Column(String, nullable=True)
    description = Column(String, nullable=True)
    uom = Column(String, nullable=True)

    quantity_ordered = Column(Integer, nullable=False, default=0)    # MOQ
    quantity_requested = Column(Integer, nullable=False, default=0)  # REQ
    unit_price = Column(Numeric(14, 4), nullable=False, default=0)
    price_source = Column(String, nullable=False, default=PriceSource.LIST.value)
    discount_percent = Column(Numeric(9, 4), nullable=False, default=0)
    stock_status = Column(String, nullable=True)

    freight_eligible = Column(Boolean, nullable=False, default=False)
    freight_weight_per_unit = Column(Numeric(12, 4), nullable=False, default=0)
    freight_lead_time = Column(String, nullable=True)

    quotation = relationship("Quotation", back_populates="lines")
