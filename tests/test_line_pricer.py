from decimal import Decimal
from types import SimpleNamespace

from cablequote.services.pricing_services import aggregate_totals, price_line
from cablequote.services.pricing_services.coerce import to_decimal, to_discount


def line(price, discount, qty, req=None, freight=False, weight=0):
    return SimpleNamespace(
        unit_price=price, discount_percent=discount, quantity_ordered=qty,
        quantity_requested=qty if req is None else req,
        freight_eligible=freight, freight_weight_per_unit=weight,
    )


def test_discounted_line():
    p = price_line(100, "10", 5, False, 0)
    assert (p.net_unit_price, p.line_amount, p.freight_amount) == (90, 450, 0)

def test_bad_discount_and_freight():
    p = price_line(100, "abc", 2, True, 10)
    assert p.net_unit_price == 100
    assert p.line_amount == 200
    assert p.freight_per_unit == Decimal("1.5")
    assert p.freight_amount == 3

def test_freight_ignored_when_not_eligible():
    assert price_line(100, 0, 2, False, 500).freight_amount == 0

def test_negative_discount_is_no_discount():
    assert price_line(100, -5, 1).net_unit_price == 100

def test_discount_above_hundred_goes_negative():
    p = price_line(100, 150, 2)
    assert p.net_unit_price == -50
    assert p.line_amount == -100

def test_coercion_never_raises():
    assert to_decimal(None) == 0
    assert to_decimal("") == 0
    assert to_decimal(float("nan")) == 0
    assert to_decimal("inf") == 0
    assert to_decimal("12.5%") == Decimal("12.5")
    assert to_decimal(" 7 ") == 7
    assert to_discount("-3") == 0

def test_two_line_quotation_total():
    lines = [line(Decimal("120.50"), 15, 100), line(Decimal("250.75"), 20, 40)]
    totals = aggregate_totals(lines)
    assert totals.total_amount == Decimal("18266.50")
    assert totals.total_quantity_ordered == 140
    assert totals.total_freight == 0
    assert totals.grand_total == Decimal("18266.50")

def test_quantities_summed_as_entered():
    totals = aggregate_totals([line(10, 0, 3, req=5), line(10, 0, 2, req=1)])
    assert totals.total_quantity_ordered == 5
    assert totals.total_quantity_requested == 6

def test_totals_are_additive():
    a = [line(100, 10, 3), line(55.5, "2.5", 7, freight=True, weight=320)]
    b = [line(12, 0, 1000, freight=True, weight=45), line(99, 200, 1)]
    whole = aggregate_totals(a + b)
    ta, tb = aggregate_totals(a), aggregate_totals(b)
    assert whole.total_amount == ta.total_amount + tb.total_amount
    assert whole.total_freight == ta.total_freight + tb.total_freight
    assert whole.total_quantity_ordered == ta.total_quantity_ordered + tb.total_quantity_ordered

def test_empty_document():
    totals = aggregate_totals([])
    assert totals.total_amount == 0 and totals.grand_total == 0
