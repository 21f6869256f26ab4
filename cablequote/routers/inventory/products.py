# cablequote/routers/inventory/products.py
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.db import get_db
from cablequote.schemas.product_schemas import (
    ProductCreate,
    ProductListResponse,
    ProductPriceResponse,
    ProductResponse,
    ProductUpdate,
)
from cablequote.services.inventory_services import product_service
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES, PRODUCT_WRITERS

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
@require_role(PRODUCT_WRITERS)
async def create_product_route(
    data: ProductCreate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.create_product(db, data, _user)


@router.get("/", response_model=ProductListResponse)
@require_role(ALL_ROLES)
async def list_products_route(
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user),
    search: Optional[str] = Query(None, description="Part number or description contains"),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
):
    return await product_service.get_all_products(db, search, limit, offset)


@router.get("/{product_id}", response_model=ProductResponse)
@require_role(ALL_ROLES)
async def get_product_route(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.get_product(db, product_id)


@router.get("/{product_id}/price", response_model=ProductPriceResponse)
@require_role(ALL_ROLES)
async def get_product_price_route(
    product_id: int,
    on: Optional[date] = Query(None, description="Price date, defaults to today"),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.get_product_price(db, product_id, on)


@router.put("/{product_id}", response_model=ProductResponse)
@require_role(PRODUCT_WRITERS)
async def update_product_route(
    product_id: int,
    data: ProductUpdate,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.update_product(db, product_id, data, _user)


@router.delete("/{product_id}", response_model=ProductResponse)
@require_role(PRODUCT_WRITERS)
async def delete_product_route(
    product_id: int,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await product_service.delete_product(db, product_id, _user)
