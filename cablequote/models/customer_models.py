# cablequote/models/customer_models.py
from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from cablequote.core.db import Base


# --------------------------
# Sales Person
# --------------------------
class SalesPerson(Base):
    __tablename__ = "sales_persons"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True, index=True)
    email = Column(String, nullable=True)
    mobile = Column(String, nullable=True)

    customers = relationship("Customer", back_populates="sales_person")


# --------------------------
# Customer
# --------------------------
class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    pincode = Column(String, nullable=True)
    sales_person_id = Column(Integer, ForeignKey("sales_persons.id", ondelete="SET NULL"), nullable=True, index=True)

    # Standing discount structure (percent) per product family
    discount_single_core = Column(Numeric(7, 3), default=0, nullable=False)
    discount_multi_core = Column(Numeric(7, 3), default=0, nullable=False)
    discount_special_cable = Column(Numeric(7, 3), default=0, nullable=False)
    discount_accessories = Column(Numeric(7, 3), default=0, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    sales_person = relationship("SalesPerson", back_populates="customers", lazy="selectin")
    quotations = relationship("Quotation", back_populates="customer")
