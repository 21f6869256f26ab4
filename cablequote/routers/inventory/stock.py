# cablequote/routers/inventory/stock.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cablequote.core.db import get_db
from cablequote.schemas.stock_schemas import (
    PendingOrderListResponse,
    PendingOrderReplace,
    StockCheckResponse,
    StockStatementListResponse,
    StockStatementReplace,
    SyncResponse,
)
from cablequote.services.inventory_services import stock_service
from cablequote.services.pricing_services import DEMAND_HORIZON_DAYS
from cablequote.utils.get_user import get_current_user
from cablequote.utils.check_roles import require_role, ALL_ROLES, STOCK_WRITERS

router = APIRouter(prefix="/stock", tags=["Stock"])


# --------------------------
# STOCK STATEMENT
# --------------------------
@router.get("/", response_model=StockStatementListResponse)
@require_role(ALL_ROLES)
async def list_stock_route(
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await stock_service.list_stock(db, search)


@router.put("/", response_model=SyncResponse)
@require_role(STOCK_WRITERS)
async def replace_stock_route(
    data: StockStatementReplace,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await stock_service.replace_stock(db, data.lines, _user)


# --------------------------
# PENDING SALES ORDERS
# --------------------------
@router.get("/pending-orders", response_model=PendingOrderListResponse)
@require_role(ALL_ROLES)
async def list_pending_orders_route(
    search: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await stock_service.list_pending_orders(db, search)


@router.put("/pending-orders", response_model=SyncResponse)
@require_role(STOCK_WRITERS)
async def replace_pending_orders_route(
    data: PendingOrderReplace,
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await stock_service.replace_pending_orders(db, data.orders, _user)


# --------------------------
# STOCK CHECK
# --------------------------
@router.get("/check", response_model=StockCheckResponse)
@require_role(ALL_ROLES)
async def stock_check_route(
    search: Optional[str] = Query(None, description="Stock description contains"),
    show_all: bool = Query(False, description="Include lines with no demand"),
    horizon_days: int = Query(DEMAND_HORIZON_DAYS, ge=0, le=365),
    db: AsyncSession = Depends(get_db),
    _user=Depends(get_current_user)
):
    return await stock_service.run_stock_check(db, search, show_all, horizon_days)
