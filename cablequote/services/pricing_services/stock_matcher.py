# cablequote/services/pricing_services/stock_matcher.py
"""
Pending sales orders against the stock statement.

Matching is a plain substring test on normalised text. Short part numbers
and material codes can match unrelated stock lines; that imprecision is
accepted in exchange for catching differently punctuated descriptions.
"""
import re
from datetime import timedelta
from typing import Iterable, Optional, Sequence

from cablequote.schemas.pricing_schemas import (
    DemandStatus,
    FreeStock,
    MatchedOrder,
    StockCheckResult,
    StockCheckRow,
)
from cablequote.services.pricing_services.coerce import ZERO, as_date, to_decimal

# Orders due within this many days count against free stock.
DEMAND_HORIZON_DAYS = 30

# Part numbers / material codes this short are ignored for matching.
MIN_CODE_LENGTH = 3

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize(text) -> str:
    if not text:
        return ""
    return _NON_ALNUM.sub("", str(text).lower())


def order_matches(stock_description, order) -> bool:
    stock_text = normalize(stock_description)
    if not stock_text:
        return False

    item_name = normalize(order.item_name)
    if item_name and (item_name in stock_text or stock_text in item_name):
        return True

    part_no = normalize(order.part_no)
    if len(part_no) >= MIN_CODE_LENGTH and part_no in stock_text:
        return True

    material_code = normalize(order.material_code)
    if len(material_code) >= MIN_CODE_LENGTH and material_code in stock_text:
        return True

    return False


def match_orders(stock_description, orders: Iterable) -> list:
    return [order for order in orders if order_matches(stock_description, order)]


def classify_demand(order, today, horizon_days: int = DEMAND_HORIZON_DAYS) -> DemandStatus:
    # An order without a due date is treated as due now.
    if order.due_on is None:
        return DemandStatus.DUE
    limit = as_date(today) + timedelta(days=horizon_days)
    if as_date(order.due_on) <= limit:
        return DemandStatus.DUE
    return DemandStatus.SCHEDULED


def compute_free_stock(physical_qty, due_orders_qty) -> FreeStock:
    physical = to_decimal(physical_qty)
    demand = to_decimal(due_orders_qty)
    return FreeStock(
        free_stock=max(ZERO, physical - demand),
        shortage=max(ZERO, demand - physical),
    )


def _matched(order, status: DemandStatus) -> MatchedOrder:
    return MatchedOrder(
        order_id=str(order.id) if getattr(order, "id", None) is not None else None,
        order_no=getattr(order, "order_no", None),
        party_name=getattr(order, "party_name", None),
        item_name=order.item_name,
        part_no=order.part_no,
        balance_qty=to_decimal(order.balance_qty),
        due_on=as_date(order.due_on) if order.due_on is not None else None,
        status=status,
    )


def check_stock(
    stock_lines: Sequence,
    orders: Sequence,
    today,
    horizon_days: int = DEMAND_HORIZON_DAYS,
    search: Optional[str] = None,
    show_all: bool = False,
) -> StockCheckResult:
    """
    Free stock and shortage for every stock line.

    Demand due inside the horizon reduces free stock; later demand is only
    reported. Unless a search term or `show_all` is given, lines with no
    demand and no shortage are left out.
    """
    lines = list(stock_lines)
    if search:
        term = search.lower()
        lines = [line for line in lines if line.description and term in line.description.lower()]

    statuses = [(order, classify_demand(order, today, horizon_days)) for order in orders]

    rows = []
    for line in lines:
        matched = [
            _matched(order, status)
            for order, status in statuses
            if order_matches(line.description, order)
        ]
        immediate = sum((m.balance_qty for m in matched if m.status == DemandStatus.DUE), ZERO)
        scheduled = sum((m.balance_qty for m in matched if m.status == DemandStatus.SCHEDULED), ZERO)
        stock = compute_free_stock(line.quantity, immediate)
        rows.append(StockCheckRow(
            stock_id=str(line.id) if getattr(line, "id", None) is not None else None,
            description=line.description,
            quantity=to_decimal(line.quantity),
            immediate_demand=immediate,
            scheduled_demand=scheduled,
            free_stock=stock.free_stock,
            shortage=stock.shortage,
            orders=matched,
        ))

    if not search and not show_all:
        rows = [row for row in rows if row.immediate_demand > 0 or row.scheduled_demand > 0 or row.shortage > 0]

    return StockCheckResult(rows=rows, total_shortage=sum((row.shortage for row in rows), ZERO))
