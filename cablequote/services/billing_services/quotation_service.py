# cablequote/services/billing_services/quotation_service.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.customer_models import Customer, SalesPerson
from cablequote.models.product_models import Product
from cablequote.models.quotation_models import Quotation, QuotationItem
from cablequote.schemas.pricing_schemas import DateRange, PriceSource
from cablequote.schemas.quotation_schemas import (
    QuotationCreate,
    QuotationLineIn,
    QuotationLineOut,
    QuotationListResponse,
    QuotationOut,
    QuotationPreviewResponse,
    QuotationResponse,
    QuotationTotalsResponse,
)
from cablequote.schemas.user_schemas import UserRole
from cablequote.services.pricing_services import (
    aggregate_totals,
    filter_by_date_range,
    price_item,
    price_on,
    quotation_value,
)
from cablequote.utils.check_roles import has_role

logger = logging.getLogger(__name__)


# --------------------------
# Helpers
# --------------------------
def line_out(item, position: Optional[int] = None) -> QuotationLineOut:
    """Stored or unsaved line plus its computed pricing."""
    out = QuotationLineOut.model_validate(item, from_attributes=True)
    update = price_item(item).model_dump()
    if position is not None:
        update["position"] = position
    return out.model_copy(update=update)


def quotation_out(quotation: Quotation) -> QuotationOut:
    out = QuotationOut.model_validate(quotation)
    return out.model_copy(update={
        "lines": [line_out(item) for item in quotation.lines],
        "totals": aggregate_totals(quotation.lines),
    })


async def own_sales_person_id(db: AsyncSession, user) -> Optional[int]:
    """
    Sales person record of a user with the Sales Person role, matched by
    name. None for every other role. A Sales Person with no matching
    record gets 0, which matches no quotation.
    """
    if not has_role(user, UserRole.SALES_PERSON.value):
        return None
    result = await db.execute(select(SalesPerson.id).where(SalesPerson.name == user.name))
    return result.scalar() or 0


async def get_quotation_or_404(db: AsyncSession, quotation_id: int) -> Quotation:
    result = await db.execute(
        select(Quotation)
        .where(Quotation.id == quotation_id)
        .execution_options(populate_existing=True)
    )
    quotation = result.scalars().first()
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return quotation


def check_ownership(quotation: Quotation, own_id: Optional[int]):
    if own_id is not None and quotation.sales_person_id != own_id:
        raise HTTPException(status_code=403, detail="Quotation belongs to another sales person")


async def _check_references(db: AsyncSession, data: QuotationCreate):
    if data.customer_id is not None and not await db.get(Customer, data.customer_id):
        raise HTTPException(status_code=400, detail=f"Customer {data.customer_id} does not exist")
    if data.sales_person_id is not None and not await db.get(SalesPerson, data.sales_person_id):
        raise HTTPException(status_code=400, detail=f"Sales person {data.sales_person_id} does not exist")


def _build_items(lines: List[QuotationLineIn]) -> List[QuotationItem]:
    # Positions always follow list order, whatever the client had before
    return [
        QuotationItem(
            position=index,
            **{
                **line.model_dump(),
                "price_source": line.price_source.value,
            },
        )
        for index, line in enumerate(lines)
    ]


def _apply_header(quotation: Quotation, data: QuotationCreate):
    for key, value in data.model_dump(exclude={"lines"}).items():
        setattr(quotation, key, value.value if key == "status" else value)


async def _next_id(db: AsyncSession) -> int:
    result = await db.execute(select(func.max(Quotation.id)))
    return (result.scalar() or 0) + 1


# --------------------------
# CREATE QUOTATION
# --------------------------
async def create_quotation(db: AsyncSession, data: QuotationCreate, current_user) -> QuotationResponse:
    if not data.lines:
        raise HTTPException(status_code=400, detail="A quotation needs at least one line")

    own_id = await own_sales_person_id(db, current_user)
    if own_id is not None:
        if data.sales_person_id is None:
            data = data.model_copy(update={"sales_person_id": own_id})
        elif data.sales_person_id != own_id:
            raise HTTPException(status_code=403, detail="Quotation belongs to another sales person")
    await _check_references(db, data)

    quotation = Quotation(id=await _next_id(db), created_by=current_user.name, updated_by=current_user.name)
    _apply_header(quotation, data)
    quotation.lines = _build_items(data.lines)
    db.add(quotation)
    try:
        await db.commit()
    except DBAPIError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Could not save quotation: {str(e.orig)}")

    logger.info("Quotation %s created by %s with %d lines", quotation.id, current_user.name, len(data.lines))
    quotation = await get_quotation_or_404(db, quotation.id)
    return QuotationResponse(message="Quotation created successfully", data=quotation_out(quotation))


# --------------------------
# GET SINGLE QUOTATION
# --------------------------
async def get_quotation(db: AsyncSession, quotation_id: int, current_user) -> QuotationResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    check_ownership(quotation, await own_sales_person_id(db, current_user))
    return QuotationResponse(message="Quotation retrieved successfully", data=quotation_out(quotation))


# --------------------------
# LIST QUOTATIONS
# --------------------------
async def fetch_quotations(
    db: AsyncSession,
    current_user,
    status: Optional[str] = None,
    customer_id: Optional[int] = None,
    sales_person_id: Optional[int] = None,
    date_range: DateRange = DateRange.ALL,
    reference_date: Optional[date] = None,
) -> List[Quotation]:
    """Quotations visible to `current_user`, newest first, filtered."""
    query = select(Quotation)

    own_id = await own_sales_person_id(db, current_user)
    if own_id is not None:
        query = query.where(Quotation.sales_person_id == own_id)
    if status:
        query = query.where(Quotation.status == status)
    if customer_id is not None:
        query = query.where(Quotation.customer_id == customer_id)
    if sales_person_id is not None:
        query = query.where(Quotation.sales_person_id == sales_person_id)

    result = await db.execute(query.order_by(Quotation.id.desc()))
    quotations = result.scalars().all()
    return filter_by_date_range(quotations, date_range, reference_date or date.today())


async def list_quotations(
    db: AsyncSession,
    current_user,
    status: Optional[str] = None,
    customer_id: Optional[int] = None,
    sales_person_id: Optional[int] = None,
    date_range: DateRange = DateRange.ALL,
) -> QuotationListResponse:
    quotations = await fetch_quotations(db, current_user, status, customer_id, sales_person_id, date_range)
    return QuotationListResponse(
        message="Quotations retrieved successfully",
        total=len(quotations),
        total_value=sum((quotation_value(q) for q in quotations), 0),
        data=[quotation_out(q) for q in quotations],
    )


# --------------------------
# UPDATE QUOTATION (full document)
# --------------------------
async def update_quotation(db: AsyncSession, quotation_id: int, data: QuotationCreate, current_user) -> QuotationResponse:
    """
    Replace the whole document. The stored line list is dropped and
    rebuilt from `data.lines`; the quotation id never changes.
    """
    if not data.lines:
        raise HTTPException(status_code=400, detail="A quotation needs at least one line")

    quotation = await get_quotation_or_404(db, quotation_id)
    own_id = await own_sales_person_id(db, current_user)
    check_ownership(quotation, own_id)
    if own_id is not None and data.sales_person_id not in (None, own_id):
        raise HTTPException(status_code=403, detail="Quotation belongs to another sales person")
    await _check_references(db, data)

    _apply_header(quotation, data)
    quotation.updated_by = current_user.name
    quotation.lines = _build_items(data.lines)
    try:
        await db.commit()
    except DBAPIError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Could not save quotation: {str(e.orig)}")

    logger.info("Quotation %s updated by %s", quotation_id, current_user.name)
    quotation = await get_quotation_or_404(db, quotation_id)
    return QuotationResponse(message="Quotation updated successfully", data=quotation_out(quotation))


# --------------------------
# DELETE QUOTATION
# --------------------------
async def delete_quotation(db: AsyncSession, quotation_id: int, current_user) -> QuotationResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    response = QuotationResponse(message="Quotation deleted successfully", data=quotation_out(quotation))
    await db.delete(quotation)
    await db.commit()
    logger.info("Quotation %s deleted by %s", quotation_id, current_user.name)
    return response


# --------------------------
# TOTALS / PREVIEW
# --------------------------
async def get_quotation_totals(db: AsyncSession, quotation_id: int, current_user) -> QuotationTotalsResponse:
    quotation = await get_quotation_or_404(db, quotation_id)
    check_ownership(quotation, await own_sales_person_id(db, current_user))
    return QuotationTotalsResponse(
        message="Quotation totals computed successfully",
        quotation_id=quotation_id,
        data=aggregate_totals(quotation.lines),
    )


def preview_lines(lines: List[QuotationLineIn]) -> QuotationPreviewResponse:
    return QuotationPreviewResponse(
        message="Quotation priced successfully",
        lines=[line_out(line, position=index) for index, line in enumerate(lines)],
        totals=aggregate_totals(lines),
    )


# --------------------------
# REPRICE FROM PRICE BOOK
# --------------------------
async def reprice_quotation(
    db: AsyncSession,
    quotation_id: int,
    current_user,
    on: Optional[date] = None,
) -> QuotationResponse:
    """
    Re-read every catalog line's unit price from the product's price bands
    at `on` (the quotation date by default).

    A line whose product has no band gets a zero LP price and a warning;
    lines without a product are left alone.
    """
    quotation = await get_quotation_or_404(db, quotation_id)
    check_ownership(quotation, await own_sales_person_id(db, current_user))
    on_date = on or quotation.quotation_date

    product_ids = {item.product_id for item in quotation.lines if item.product_id}
    products = {}
    if product_ids:
        result = await db.execute(select(Product).where(Product.id.in_(product_ids)))
        products = {product.id: product for product in result.scalars().all()}

    warnings, changed = [], 0
    for item in quotation.lines:
        if not item.product_id:
            continue
        product = products.get(item.product_id)
        if product is None:
            warnings.append(f"Line {item.position + 1}: product {item.product_id} no longer exists")
            continue

        resolution = price_on(product.prices, on_date)
        if not resolution.found:
            warnings.append(
                f"Line {item.position + 1}: no valid price found for product {product.part_no} on {on_date.isoformat()}"
            )
        if item.unit_price != resolution.unit_price or item.price_source != resolution.price_source.value:
            item.unit_price = resolution.unit_price
            item.price_source = resolution.price_source.value
            changed += 1

    for warning in warnings:
        logger.warning("Quotation %s reprice: %s", quotation_id, warning)

    if changed:
        quotation.updated_by = current_user.name
        await db.commit()
        quotation = await get_quotation_or_404(db, quotation_id)

    return QuotationResponse(
        message=f"{changed} line(s) repriced",
        data=quotation_out(quotation),
        warnings=warnings,
    )
