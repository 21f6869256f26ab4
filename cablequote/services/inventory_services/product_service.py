# cablequote/services/inventory_services/product_service.py
import logging
from datetime import date
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.product_models import Product, ProductPrice
from cablequote.schemas.product_schemas import (
    PriceBandIn,
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductPriceResponse,
    ProductResponse,
    ProductUpdate,
)
from cablequote.services.pricing_services import price_on, restamp_bands

logger = logging.getLogger(__name__)


def _price_rows(bands: List[PriceBandIn]) -> List[ProductPrice]:
    restamped = restamp_bands(bands)
    logger.debug("Restamped %d price bands: %s", len(restamped), [(b.valid_from, b.valid_to) for b in restamped])
    return [ProductPrice(**band.model_dump()) for band in restamped]


def product_out(product: Product, on: Optional[date] = None) -> ProductOut:
    out = ProductOut.model_validate(product)
    return out.model_copy(update={"current_price": price_on(product.prices, on or date.today())})


async def _get_or_404(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(
        select(Product)
        .where(Product.id == product_id)
        .execution_options(populate_existing=True)
    )
    product = result.scalars().first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


async def _ensure_unique_part_no(db: AsyncSession, part_no: str, exclude_id: Optional[int] = None):
    query = select(Product.id).where(Product.part_no == part_no)
    if exclude_id is not None:
        query = query.where(Product.id != exclude_id)
    if (await db.execute(query)).scalar() is not None:
        raise HTTPException(status_code=400, detail=f"Product '{part_no}' already exists")


# ---------------------------------------------------
# CREATE PRODUCT
# ---------------------------------------------------
async def create_product(db: AsyncSession, data: ProductCreate, current_user) -> ProductResponse:
    """
    Create a product with its price bands. Bands are sorted and re-stamped
    so that they cover one continuous, open-ended timeline.
    """
    await _ensure_unique_part_no(db, data.part_no)
    try:
        product = Product(**data.model_dump(exclude={"prices"}))
        product.prices = _price_rows(data.prices)
        db.add(product)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Integrity error: {str(e.orig)}")

    logger.info("%s created product %s (ID: %s)", current_user.name, product.part_no, product.id)
    product = await _get_or_404(db, product.id)
    return ProductResponse(message="Product created successfully", data=product_out(product))


# ---------------------------------------------------
# LIST / SEARCH PRODUCTS
# ---------------------------------------------------
async def get_all_products(
    db: AsyncSession,
    search: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> ProductListResponse:
    query = select(Product)
    if search:
        term = f"%{search}%"
        query = query.where(or_(Product.part_no.ilike(term), Product.description.ilike(term)))

    count_query = select(func.count()).select_from(query.subquery())
    total = (await db.execute(count_query)).scalar() or 0

    result = await db.execute(query.order_by(Product.part_no).offset(offset).limit(limit))
    today = date.today()
    return ProductListResponse(
        message="Products fetched successfully",
        total=total,
        data=[product_out(p, today) for p in result.scalars().all()],
    )


# ---------------------------------------------------
# GET SINGLE PRODUCT
# ---------------------------------------------------
async def get_product(db: AsyncSession, product_id: int) -> ProductResponse:
    product = await _get_or_404(db, product_id)
    return ProductResponse(message="Product fetched successfully", data=product_out(product))


async def get_product_price(db: AsyncSession, product_id: int, on: Optional[date] = None) -> ProductPriceResponse:
    """Unit price and LP/SP source of a product on a given day."""
    product = await _get_or_404(db, product_id)
    on = on or date.today()
    return ProductPriceResponse(
        message="Price resolved successfully",
        product_id=product_id,
        on=on,
        data=price_on(product.prices, on),
    )


# ---------------------------------------------------
# UPDATE PRODUCT
# ---------------------------------------------------
async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate, current_user) -> ProductResponse:
    product = await _get_or_404(db, product_id)
    changes = data.model_dump(exclude_unset=True, exclude={"prices"})

    if changes.get("part_no") and changes["part_no"] != product.part_no:
        await _ensure_unique_part_no(db, changes["part_no"], exclude_id=product_id)

    for key, value in changes.items():
        if value is not None:
            setattr(product, key, value)
    if data.prices is not None:
        product.prices = _price_rows(data.prices)

    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise HTTPException(status_code=400, detail=f"Integrity error: {str(e.orig)}")

    logger.info("%s updated product %s (ID: %s)", current_user.name, product.part_no, product_id)
    product = await _get_or_404(db, product_id)
    return ProductResponse(message="Product updated successfully", data=product_out(product))


# ---------------------------------------------------
# DELETE PRODUCT
# ---------------------------------------------------
async def delete_product(db: AsyncSession, product_id: int, current_user) -> ProductResponse:
    # Quotation lines keep their own copy of part no, description and price
    product = await _get_or_404(db, product_id)
    response = ProductResponse(message="Product deleted successfully", data=product_out(product))
    await db.delete(product)
    await db.commit()
    logger.info("%s deleted product %s (ID: %s)", current_user.name, product.part_no, product_id)
    return response
