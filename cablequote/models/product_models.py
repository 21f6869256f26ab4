# cablequote/models/product_models.py
from sqlalchemy import (
    Column, Integer, String, Numeric, ForeignKey, Date,
    CheckConstraint, Index
)
from sqlalchemy.orm import relationship
from cablequote.core.db import Base


# --------------------------
# Product
# --------------------------
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    part_no = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, nullable=False)
    hsn_code = Column(String, nullable=True)
    uom = Column(String, nullable=True)      # M, PC, ST, No
    plant = Column(String, nullable=True)    # MFGN, TRDN
    weight = Column(Numeric(12, 4), default=0, nullable=False)  # grams per unit length

    prices = relationship(
        "ProductPrice",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductPrice.valid_from",
        lazy="selectin",
    )


# --------------------------
# Price bands
# --------------------------
class ProductPrice(Base):
    __tablename__ = "product_prices"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    list_price = Column(Numeric(14, 4), default=0, nullable=False)
    special_price = Column(Numeric(14, 4), default=0, nullable=False)
    valid_from = Column(Date, nullable=False)
    valid_to = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint(list_price >= 0, name="check_list_price_non_negative"),
        CheckConstraint(special_price >= 0, name="check_special_price_non_negative"),
        CheckConstraint(valid_from <= valid_to, name="check_price_window_ordered"),
    )

    product = relationship("Product", back_populates="prices")


Index("ix_product_price_window", ProductPrice.product_id, ProductPrice.valid_from)
