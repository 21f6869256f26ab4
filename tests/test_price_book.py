from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from cablequote.schemas.pricing_schemas import OPEN_ENDED, PriceBand, PriceSource
from cablequote.services.pricing_services import effective_price, price_on, resolve_price, restamp_bands


def band(start, end, lp=0, sp=0):
    return PriceBand(list_price=Decimal(str(lp)), special_price=Decimal(str(sp)), valid_from=start, valid_to=end)


H1 = band(date(2025, 1, 1), date(2025, 6, 30), lp=100)
H2 = band(date(2025, 7, 1), OPEN_ENDED, sp=80)


def test_band_containing_date():
    assert resolve_price([H1, H2], date(2025, 3, 15)) is H1
    assert resolve_price([H1, H2], date(2025, 8, 1)) is H2

def test_boundaries_are_inclusive():
    assert resolve_price([H1, H2], date(2025, 1, 1)) is H1
    assert resolve_price([H1, H2], date(2025, 6, 30)) is H1
    assert resolve_price([H1, H2], date(2025, 7, 1)) is H2

def test_datetime_and_string_dates():
    assert resolve_price([H1, H2], datetime(2025, 6, 30, 23, 59)) is H1
    assert resolve_price([H1, H2], "2025-07-01T00:00:00") is H2

def test_empty_band_list():
    assert resolve_price([], date(2025, 1, 1)) is None

def test_before_every_band_picks_earliest():
    assert resolve_price([H2, H1], date(2024, 12, 31)) is H1

def test_after_every_band_picks_latest():
    jan = band(date(2025, 1, 1), date(2025, 1, 31), lp=10)
    mar = band(date(2025, 3, 1), date(2025, 3, 31), lp=30)
    assert resolve_price([mar, jan], date(2025, 5, 1)) is mar

def test_gap_falls_back_to_most_recent_past_band():
    jan = band(date(2025, 1, 1), date(2025, 1, 31), lp=10)
    mar = band(date(2025, 3, 1), date(2025, 3, 31), lp=30)
    assert resolve_price([jan, mar], date(2025, 2, 15)) is jan

def test_overlap_first_in_input_order_wins():
    a = band(date(2025, 1, 1), date(2025, 12, 31), lp=10)
    b = band(date(2025, 6, 1), date(2025, 12, 31), lp=20)
    assert resolve_price([b, a], date(2025, 7, 1)) is b
    assert resolve_price([a, b], date(2025, 7, 1)) is a

def test_effective_price_list_then_special():
    lp = effective_price(H1)
    assert lp.found and lp.unit_price == Decimal("100") and lp.price_source == PriceSource.LIST
    sp = effective_price(H2)
    assert sp.unit_price == Decimal("80") and sp.price_source == PriceSource.SPECIAL

def test_no_band_is_zero_not_found():
    result = price_on([], date(2025, 1, 1))
    assert result.found is False
    assert result.unit_price == 0
    assert result.price_source == PriceSource.LIST

def test_restamp_sorts_and_chains_windows():
    later = band(date(2025, 7, 1), date(2025, 7, 2), lp=120)
    earlier = band(date(2025, 1, 1), date(2025, 1, 2), lp=100)
    result = restamp_bands([later, earlier])
    assert [b.valid_from for b in result] == [date(2025, 1, 1), date(2025, 7, 1)]
    assert result[0].valid_to == date(2025, 6, 30)
    assert result[1].valid_to == OPEN_ENDED
    # inputs untouched
    assert later.valid_to == date(2025, 7, 2)

def test_restamp_keeps_one_price_per_band():
    both = band(date(2025, 1, 1), OPEN_ENDED, lp=100, sp=90)
    only_sp = band(date(2025, 2, 1), OPEN_ENDED, sp=90)
    first, second = restamp_bands([both, only_sp])
    assert (first.list_price, first.special_price) == (Decimal("100"), Decimal("0"))
    assert (second.list_price, second.special_price) == (Decimal("0"), Decimal("90"))

def test_restamp_accepts_open_windows():
    raw = SimpleNamespace(list_price=5, special_price=0, valid_from="2025-04-01", valid_to=None)
    (only,) = restamp_bands([raw])
    assert only.valid_from == date(2025, 4, 1) and only.valid_to == OPEN_ENDED
