from datetime import date
from decimal import Decimal

import pytest
from fastapi import HTTPException

from cablequote.schemas.pricing_schemas import OPEN_ENDED
from cablequote.schemas.product_schemas import ProductCreate, ProductUpdate
from cablequote.services.inventory_services import product_service


def new_product(**kwargs):
    data = {"part_no": "1119303", "description": "OLFLEX CLASSIC 110 3G1.5", "weight": 95}
    data.update(kwargs)
    return ProductCreate(**data)


async def test_bands_restamped_on_create(session, admin):
    created = await product_service.create_product(session, new_product(prices=[
        {"special_price": 80, "valid_from": "2025-07-01"},
        {"list_price": 100, "special_price": 90, "valid_from": "2025-01-01", "valid_to": "2025-01-31"},
    ]), admin)
    bands = created.data.prices
    assert [(b.valid_from, b.valid_to) for b in bands] == [
        (date(2025, 1, 1), date(2025, 6, 30)),
        (date(2025, 7, 1), OPEN_ENDED),
    ]
    assert bands[0].special_price == 0

async def test_price_lookup(session, admin):
    created = await product_service.create_product(session, new_product(prices=[
        {"list_price": 100, "valid_from": "2025-01-01"},
        {"special_price": 80, "valid_from": "2025-07-01"},
    ]), admin)
    price = await product_service.get_product_price(session, created.data.id, date(2025, 6, 30))
    assert price.data.unit_price == Decimal("100") and price.data.price_source == "LP"
    price = await product_service.get_product_price(session, created.data.id, date(2025, 7, 1))
    assert price.data.unit_price == Decimal("80") and price.data.price_source == "SP"

async def test_update_replaces_bands(session, admin):
    created = await product_service.create_product(session, new_product(prices=[
        {"list_price": 100, "valid_from": "2025-01-01"},
    ]), admin)
    updated = await product_service.update_product(session, created.data.id, ProductUpdate(
        description="OLFLEX CLASSIC 110 3G2.5",
        prices=[{"list_price": 120, "valid_from": "2025-04-01"}],
    ), admin)
    assert updated.data.description.endswith("3G2.5")
    assert [(b.list_price, b.valid_from) for b in updated.data.prices] == [(Decimal("120"), date(2025, 4, 1))]

async def test_update_without_prices_keeps_bands(session, admin):
    created = await product_service.create_product(session, new_product(prices=[
        {"list_price": 100, "valid_from": "2025-01-01"},
    ]), admin)
    updated = await product_service.update_product(session, created.data.id, ProductUpdate(uom="M"), admin)
    assert updated.data.uom == "M"
    assert len(updated.data.prices) == 1

async def test_duplicate_part_no(session, admin):
    await product_service.create_product(session, new_product(), admin)
    with pytest.raises(HTTPException) as exc:
        await product_service.create_product(session, new_product(), admin)
    assert exc.value.status_code == 400

def test_duplicate_start_dates_rejected():
    with pytest.raises(ValueError):
        new_product(prices=[{"list_price": 1, "valid_from": "2025-01-01"},
                            {"list_price": 2, "valid_from": "2025-01-01"}])

async def test_search(session, admin):
    await product_service.create_product(session, new_product(), admin)
    await product_service.create_product(session, new_product(part_no="2170204", description="UNITRONIC LiYY"), admin)
    found = await product_service.get_all_products(session, search="unitronic")
    assert found.total == 1 and found.data[0].part_no == "2170204"
