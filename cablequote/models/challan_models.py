# cablequote/models/challan_models.py
from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, Numeric, Text, func
from sqlalchemy.orm import relationship
from cablequote.core.db import Base


# ==================================================
# DELIVERY CHALLAN MODEL
# ==================================================
class DeliveryChallan(Base):
    __tablename__ = "delivery_challans"

    # Assigned as max(id) + 1 like quotations
    id = Column(Integer, primary_key=True, autoincrement=False)
    challan_date = Column(Date, nullable=False, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True, index=True)
    quotation_id = Column(Integer, ForeignKey("quotations.id", ondelete="SET NULL"), nullable=True, index=True)

    vehicle_no = Column(String, nullable=True)
    po_no = Column(String, nullable=True)
    po_date = Column(Date, nullable=True)

    created_by = Column(String, nullable=True)
    updated_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    customer = relationship("Customer", lazy="selectin")
    items = relationship(
        "DeliveryChallanItem",
        back_populates="challan",
        cascade="all, delete-orphan",
        order_by="DeliveryChallanItem.position",
        lazy="selectin",
    )


# ==================================================
# DELIVERY CHALLAN ITEM MODEL
# ==================================================
class DeliveryChallanItem(Base):
    __tablename__ = "delivery_challan_items"

    id = Column(Integer, primary_key=True, index=True)
    challan_id = Column(Integer, ForeignKey("delivery_challans.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    product_id = Column(Integer, nullable=True)
    part_no = Column(String, nullable=True)
    description = Column(String, nullable=True)
    hsn_code = Column(String, nullable=True)
    dispatched_qty = Column(Numeric(14, 3), nullable=False, default=0)
    uom = Column(String, nullable=True)
    remarks = Column(Text, nullable=True)

    challan = relationship("DeliveryChallan", back_populates="items")
