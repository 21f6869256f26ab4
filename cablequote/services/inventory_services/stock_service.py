# cablequote/services/inventory_services/stock_service.py
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from cablequote.models.stock_models import PendingSalesOrder, StockStatement
from cablequote.schemas.stock_schemas import (
    PendingOrderIn,
    PendingOrderListResponse,
    PendingOrderOut,
    StockCheckResponse,
    StockStatementIn,
    StockStatementListResponse,
    StockStatementOut,
    SyncResponse,
    SyncResult,
)
from cablequote.services.pricing_services import DEMAND_HORIZON_DAYS, check_stock
from cablequote.utils.collection_diff import diff_collection

logger = logging.getLogger(__name__)


async def _sync(db: AsyncSession, model, records: list) -> SyncResult:
    """
    Make the table hold exactly `records`: changed or new rows are
    written, rows whose id is missing from `records` are deleted.
    """
    existing = (await db.execute(select(model))).scalars().all()
    by_id = {row.id: row for row in existing}
    upserts, deletes = diff_collection(existing, records, key="id")

    for record in upserts:
        values = record.model_dump(exclude={"id"})
        row = by_id.get(record.id)
        if row is None:
            row = model(**values) if record.id is None else model(id=record.id, **values)
            db.add(row)
        else:
            for key, value in values.items():
                setattr(row, key, value)

    if deletes:
        await db.execute(delete(model).where(model.id.in_(deletes)))

    await db.commit()
    return SyncResult(upserted=len(upserts), deleted=len(deletes))


# --------------------------
# Stock statement
# --------------------------
async def list_stock(db: AsyncSession, search: Optional[str] = None) -> StockStatementListResponse:
    query = select(StockStatement)
    if search:
        query = query.where(StockStatement.description.ilike(f"%{search}%"))
    result = await db.execute(query.order_by(StockStatement.description))
    lines = result.scalars().all()
    return StockStatementListResponse(
        message="Stock statement retrieved successfully",
        total=len(lines),
        data=[StockStatementOut.model_validate(line) for line in lines],
    )


async def replace_stock(db: AsyncSession, lines: List[StockStatementIn], current_user) -> SyncResponse:
    result = await _sync(db, StockStatement, lines)
    logger.info(
        "%s replaced stock statement: %d written, %d deleted",
        current_user.name, result.upserted, result.deleted,
    )
    return SyncResponse(message="Stock statement saved successfully", data=result)


# --------------------------
# Pending sales orders
# --------------------------
async def list_pending_orders(db: AsyncSession, search: Optional[str] = None) -> PendingOrderListResponse:
    query = select(PendingSalesOrder)
    if search:
        term = f"%{search}%"
        query = query.where(
            PendingSalesOrder.item_name.ilike(term)
            | PendingSalesOrder.party_name.ilike(term)
            | PendingSalesOrder.order_no.ilike(term)
            | PendingSalesOrder.part_no.ilike(term)
        )
    result = await db.execute(query.order_by(PendingSalesOrder.due_on, PendingSalesOrder.order_no))
    orders = [PendingOrderOut.model_validate(order) for order in result.scalars().all()]
    return PendingOrderListResponse(
        message="Pending sales orders retrieved successfully",
        total=len(orders),
        total_value=sum((order.value for order in orders), 0),
        data=orders,
    )


async def replace_pending_orders(db: AsyncSession, orders: List[PendingOrderIn], current_user) -> SyncResponse:
    result = await _sync(db, PendingSalesOrder, orders)
    logger.info(
        "%s replaced pending sales orders: %d written, %d deleted",
        current_user.name, result.upserted, result.deleted,
    )
    return SyncResponse(message="Pending sales orders saved successfully", data=result)


# --------------------------
# Stock check
# --------------------------
async def run_stock_check(
    db: AsyncSession,
    search: Optional[str] = None,
    show_all: bool = False,
    horizon_days: int = DEMAND_HORIZON_DAYS,
    today: Optional[date] = None,
) -> StockCheckResponse:
    stock_lines = (await db.execute(select(StockStatement).order_by(StockStatement.description))).scalars().all()
    orders = (await db.execute(select(PendingSalesOrder))).scalars().all()

    result = check_stock(
        stock_lines,
        orders,
        today or date.today(),
        horizon_days=horizon_days,
        search=search,
        show_all=show_all,
    )
    if result.total_shortage > 0:
        logger.info("Stock check: total shortage %s across %d lines", result.total_shortage, len(result.rows))
    return StockCheckResponse(message="Stock check completed", horizon_days=horizon_days, data=result)
