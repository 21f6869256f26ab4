from datetime import date
from types import SimpleNamespace

from cablequote.schemas.pricing_schemas import DemandStatus
from cablequote.services.pricing_services import (
    check_stock,
    classify_demand,
    compute_free_stock,
    match_orders,
    normalize,
)

TODAY = date(2025, 1, 1)


def order(item="", part="", code="", qty=0, due=None, id="o1"):
    return SimpleNamespace(id=id, order_no="SO-" + id, party_name="Acme", item_name=item,
                           part_no=part, material_code=code, balance_qty=qty, due_on=due)


def stock(description, qty, id="s1"):
    return SimpleNamespace(id=id, description=description, quantity=qty)


def test_normalize_is_idempotent_and_insensitive():
    text = "Cable-3G, 2.5mm"
    assert normalize(normalize(text)) == normalize(text)
    assert normalize(text) == normalize("CABLE 3 G 2 5 MM")
    assert normalize(None) == ""

def test_item_name_either_direction():
    assert match_orders("OLFLEX CLASSIC 110 3G1.5", [order(item="olflex classic 110")])
    assert match_orders("OLFLEX", [order(item="Olflex Classic 110 3G1.5")])

def test_part_number_and_material_code():
    assert match_orders("1119303 OLFLEX 3G1.5", [order(item="something else", part="1119303")])
    assert match_orders("Cable 11-19-303", [order(code="1119303")])

def test_short_codes_ignored():
    assert match_orders("Cable AB 12", [order(part="ab", code="12")]) == []

def test_empty_item_name_never_matches():
    assert match_orders("anything", [order()]) == []

def test_classify_demand():
    assert classify_demand(order(due=date(2025, 1, 31)), TODAY) == DemandStatus.DUE
    assert classify_demand(order(due=date(2025, 2, 1)), TODAY) == DemandStatus.SCHEDULED
    assert classify_demand(order(due=date(2025, 2, 1)), TODAY, horizon_days=31) == DemandStatus.DUE
    assert classify_demand(order(due=None), TODAY) == DemandStatus.DUE

def test_free_stock_and_shortage():
    assert compute_free_stock(100, 30).free_stock == 70
    result = compute_free_stock(10, 25)
    assert (result.free_stock, result.shortage) == (0, 15)

def test_check_stock_rows():
    lines = [stock("OLFLEX CLASSIC 110 3G1.5", 100, "s1"), stock("UNITRONIC LiYY 4x0.25", 5, "s2")]
    orders = [
        order(item="Olflex Classic 110 3G1.5", qty=80, due=date(2025, 1, 20), id="o1"),
        order(item="Olflex Classic 110 3G1.5", qty=50, due=date(2025, 1, 25), id="o2"),
        order(item="Olflex Classic 110 3G1.5", qty=40, due=date(2025, 6, 1), id="o3"),
    ]
    result = check_stock(lines, orders, TODAY)
    assert len(result.rows) == 1
    row = result.rows[0]
    assert row.stock_id == "s1"
    assert (row.immediate_demand, row.scheduled_demand) == (130, 40)
    assert (row.free_stock, row.shortage) == (0, 30)
    assert [o.status for o in row.orders] == [DemandStatus.DUE, DemandStatus.DUE, DemandStatus.SCHEDULED]
    assert result.total_shortage == 30

def test_check_stock_show_all_and_search():
    lines = [stock("OLFLEX CLASSIC 110", 100, "s1"), stock("UNITRONIC LiYY", 5, "s2")]
    assert len(check_stock(lines, [], TODAY).rows) == 0
    assert len(check_stock(lines, [], TODAY, show_all=True).rows) == 2
    found = check_stock(lines, [], TODAY, search="unitronic")
    assert [row.stock_id for row in found.rows] == ["s2"]
    assert found.rows[0].free_stock == 5
