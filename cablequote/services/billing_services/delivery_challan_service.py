# cablequote/services/billing_services/delivery_challan_service.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.challan_models import DeliveryChallan, DeliveryChallanItem
from cablequote.models.customer_models import Customer
from cablequote.models.product_models import Product
from cablequote.models.quotation_models import Quotation
from cablequote.schemas.challan_schemas import (
    DeliveryChallanCreate,
    DeliveryChallanDraftResponse,
    DeliveryChallanItemIn,
    DeliveryChallanListResponse,
    DeliveryChallanOut,
    DeliveryChallanResponse,
)
from cablequote.services.billing_services.quotation_service import get_quotation_or_404

logger = logging.getLogger(__name__)


# --------------------------
# Helpers
# --------------------------
def challan_out(challan: DeliveryChallan) -> DeliveryChallanOut:
    out = DeliveryChallanOut.model_validate(challan)
    return out.model_copy(update={
        "customer_name": challan.customer.name if challan.customer else None,
        "total_dispatched": sum((item.dispatched_qty or 0 for item in challan.items), 0),
    })


async def get_challan_or_404(db: AsyncSession, challan_id: int) -> DeliveryChallan:
    result = await db.execute(
        select(DeliveryChallan)
        .where(DeliveryChallan.id == challan_id)
        .execution_options(populate_existing=True)
    )
    challan = result.scalars().first()
    if not challan:
        raise HTTPException(status_code=404, detail="Delivery challan not found")
    return challan


async def _check_references(db: AsyncSession, data: DeliveryChallanCreate):
    if data.customer_id is not None and not await db.get(Customer, data.customer_id):
        raise HTTPException(status_code=400, detail=f"Customer {data.customer_id} does not exist")
    if data.quotation_id is not None and not await db.get(Quotation, data.quotation_id):
        raise HTTPException(status_code=400, detail=f"Quotation {data.quotation_id} does not exist")


def _build_items(items: List[DeliveryChallanItemIn]) -> List[DeliveryChallanItem]:
    return [DeliveryChallanItem(position=index, **item.model_dump()) for index, item in enumerate(items)]


def _apply_header(challan: DeliveryChallan, data: DeliveryChallanCreate):
    for key, value in data.model_dump(exclude={"items"}).items():
        setattr(challan, key, value)


async def _next_id(db: AsyncSession) -> int:
    result = await db.execute(select(func.max(DeliveryChallan.id)))
    return (result.scalar() or 0) + 1


async def _commit(db: AsyncSession):
    try:
        await db.commit()
    except DBAPIError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Could not save delivery challan: {str(e.orig)}")


# --------------------------
# CREATE CHALLAN
# --------------------------
async def create_challan(db: AsyncSession, data: DeliveryChallanCreate, current_user) -> DeliveryChallanResponse:
    if not data.items:
        raise HTTPException(status_code=400, detail="A delivery challan needs at least one item")
    await _check_references(db, data)

    challan = DeliveryChallan(id=await _next_id(db), created_by=current_user.name, updated_by=current_user.name)
    _apply_header(challan, data)
    challan.items = _build_items(data.items)
    db.add(challan)
    await _commit(db)

    logger.info("Delivery challan %s created by %s with %d items", challan.id, current_user.name, len(data.items))
    challan = await get_challan_or_404(db, challan.id)
    return DeliveryChallanResponse(message="Delivery challan created successfully", data=challan_out(challan))


# --------------------------
# GET / LIST
# --------------------------
async def get_challan(db: AsyncSession, challan_id: int) -> DeliveryChallanResponse:
    challan = await get_challan_or_404(db, challan_id)
    return DeliveryChallanResponse(message="Delivery challan retrieved successfully", data=challan_out(challan))


async def list_challans(
    db: AsyncSession,
    customer_id: Optional[int] = None,
    quotation_id: Optional[int] = None,
) -> DeliveryChallanListResponse:
    query = select(DeliveryChallan)
    if customer_id is not None:
        query = query.where(DeliveryChallan.customer_id == customer_id)
    if quotation_id is not None:
        query = query.where(DeliveryChallan.quotation_id == quotation_id)

    result = await db.execute(query.order_by(DeliveryChallan.id.desc()))
    challans = result.scalars().all()
    return DeliveryChallanListResponse(
        message="Delivery challans retrieved successfully",
        total=len(challans),
        data=[challan_out(c) for c in challans],
    )


# --------------------------
# UPDATE CHALLAN (full document)
# --------------------------
async def update_challan(db: AsyncSession, challan_id: int, data: DeliveryChallanCreate, current_user) -> DeliveryChallanResponse:
    if not data.items:
        raise HTTPException(status_code=400, detail="A delivery challan needs at least one item")

    challan = await get_challan_or_404(db, challan_id)
    await _check_references(db, data)

    _apply_header(challan, data)
    challan.updated_by = current_user.name
    challan.items = _build_items(data.items)
    await _commit(db)

    logger.info("Delivery challan %s updated by %s", challan_id, current_user.name)
    challan = await get_challan_or_404(db, challan_id)
    return DeliveryChallanResponse(message="Delivery challan updated successfully", data=challan_out(challan))


# --------------------------
# DELETE CHALLAN
# --------------------------
async def delete_challan(db: AsyncSession, challan_id: int, current_user) -> DeliveryChallanResponse:
    challan = await get_challan_or_404(db, challan_id)
    response = DeliveryChallanResponse(message="Delivery challan deleted successfully", data=challan_out(challan))
    await db.delete(challan)
    await db.commit()
    logger.info("Delivery challan %s deleted by %s", challan_id, current_user.name)
    return response


# --------------------------
# DRAFT FROM QUOTATION
# --------------------------
async def draft_from_quotation(
    db: AsyncSession,
    quotation_id: int,
    challan_date: Optional[date] = None,
) -> DeliveryChallanDraftResponse:
    """
    Unsaved challan prefilled from a quotation: one item per quotation
    line, dispatching the MOQ, with the HSN code read from the product.
    """
    quotation = await get_quotation_or_404(db, quotation_id)

    product_ids = {line.product_id for line in quotation.lines if line.product_id}
    hsn_codes = {}
    if product_ids:
        result = await db.execute(select(Product.id, Product.hsn_code).where(Product.id.in_(product_ids)))
        hsn_codes = {product_id: hsn for product_id, hsn in result.all()}

    today = challan_date or date.today()
    draft = DeliveryChallanCreate(
        challan_date=today,
        customer_id=quotation.customer_id,
        quotation_id=quotation.id,
        po_date=today,
        items=[
            DeliveryChallanItemIn(
                product_id=line.product_id,
                part_no=line.part_no,
                description=line.description,
                hsn_code=hsn_codes.get(line.product_id) or "",
                dispatched_qty=line.quantity_ordered,
                uom=line.uom,
                remarks="",
            )
            for line in quotation.lines
        ],
    )
    return DeliveryChallanDraftResponse(message="Delivery challan drafted from quotation", data=draft)
