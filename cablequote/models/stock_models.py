# cablequote/models/stock_models.py
import uuid

from sqlalchemy import Column, String, Numeric, Date, DateTime, func
from cablequote.core.db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


# --------------------------
# Stock Statement
# --------------------------
class StockStatement(Base):
    __tablename__ = "stock_statements"

    id = Column(String(36), primary_key=True, default=_new_id)
    description = Column(String, nullable=False, index=True)
    quantity = Column(Numeric(14, 3), nullable=False, default=0)
    uom = Column(String, nullable=True)
    location = Column(String, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


# --------------------------
# Pending Sales Order
# --------------------------
class PendingSalesOrder(Base):
    __tablename__ = "pending_sales_orders"

    id = Column(String(36), primary_key=True, default=_new_id)
    order_date = Column(Date, nullable=True)
    order_no = Column(String, nullable=True, index=True)
    party_name = Column(String, nullable=True)
    item_name = Column(String, nullable=True)
    material_code = Column(String, nullable=True)
    part_no = Column(String, nullable=True, index=True)
    ordered_qty = Column(Numeric(14, 3), nullable=False, default=0)
    balance_qty = Column(Numeric(14, 3), nullable=False, default=0)
    rate = Column(Numeric(14, 4), nullable=False, default=0)
    discount = Column(Numeric(9, 4), nullable=False, default=0)
    due_on = Column(Date, nullable=True)
