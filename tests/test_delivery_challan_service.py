from datetime import date
from decimal import Decimal

import pytest
from fastapi import HTTPException

from cablequote.models.customer_models import Customer
from cablequote.schemas.challan_schemas import DeliveryChallanCreate
from cablequote.schemas.product_schemas import ProductCreate
from cablequote.schemas.quotation_schemas import QuotationCreate
from cablequote.services.billing_services import delivery_challan_service, quotation_service
from cablequote.services.inventory_services import product_service


def challan(items, **header):
    return DeliveryChallanCreate(challan_date=header.pop("challan_date", date(2025, 3, 1)), items=items, **header)


ITEMS = [
    {"part_no": "1119303", "description": "OLFLEX CLASSIC 110 3G1.5", "hsn_code": "8544", "dispatched_qty": 100, "uom": "M"},
    {"part_no": "1119304", "description": "OLFLEX CLASSIC 110 4G1.5", "dispatched_qty": "50.5", "uom": "M"},
]


async def test_ids_are_max_plus_one(session, admin):
    first = await delivery_challan_service.create_challan(session, challan(ITEMS), admin)
    second = await delivery_challan_service.create_challan(session, challan(ITEMS), admin)
    assert (first.data.id, second.data.id) == (1, 2)
    assert first.data.created_by == "admin"
    assert first.data.total_dispatched == Decimal("150.5")
    assert [item.position for item in first.data.items] == [0, 1]

async def test_empty_challan_rejected(session, admin):
    with pytest.raises(HTTPException) as exc:
        await delivery_challan_service.create_challan(session, challan([]), admin)
    assert exc.value.status_code == 400

async def test_unknown_references_rejected(session, admin):
    with pytest.raises(HTTPException) as exc:
        await delivery_challan_service.create_challan(session, challan(ITEMS, quotation_id=42), admin)
    assert exc.value.status_code == 400
    assert "Quotation 42" in exc.value.detail

async def test_update_replaces_items(session, admin):
    customer = Customer(name="Acme Automation")
    session.add(customer)
    await session.commit()
    created = await delivery_challan_service.create_challan(session, challan(ITEMS), admin)

    updated = await delivery_challan_service.update_challan(
        session, created.data.id,
        challan([{"part_no": "X", "dispatched_qty": 3}], customer_id=customer.id, vehicle_no="KA-01-AB-1234"),
        admin,
    )
    assert updated.data.id == created.data.id
    assert updated.data.customer_name == "Acme Automation"
    assert updated.data.vehicle_no == "KA-01-AB-1234"
    assert [(i.part_no, i.position) for i in updated.data.items] == [("X", 0)]

async def test_list_filters_and_delete(session, admin):
    customer = Customer(name="Acme Automation")
    session.add(customer)
    await session.commit()
    await delivery_challan_service.create_challan(session, challan(ITEMS, customer_id=customer.id), admin)
    await delivery_challan_service.create_challan(session, challan(ITEMS), admin)

    listed = await delivery_challan_service.list_challans(session, customer_id=customer.id)
    assert [c.id for c in listed.data] == [1]

    await delivery_challan_service.delete_challan(session, 1, admin)
    with pytest.raises(HTTPException) as exc:
        await delivery_challan_service.get_challan(session, 1)
    assert exc.value.status_code == 404
    assert (await delivery_challan_service.list_challans(session)).total == 1

async def test_draft_from_quotation(session, admin):
    customer = Customer(name="Acme Automation")
    session.add(customer)
    await session.commit()
    product = await product_service.create_product(session, ProductCreate(
        part_no="1119303", description="OLFLEX CLASSIC 110 3G1.5", hsn_code="85444999", uom="M",
    ), admin)
    quotation = await quotation_service.create_quotation(session, QuotationCreate(
        quotation_date=date(2025, 1, 1),
        customer_id=customer.id,
        lines=[{"product_id": product.data.id, "part_no": "1119303", "description": "OLFLEX CLASSIC 110 3G1.5",
                "uom": "M", "unit_price": 100, "quantity_ordered": 500, "quantity_requested": 450},
               {"part_no": "FREE-TEXT", "unit_price": 7, "quantity_ordered": 2}],
    ), admin)

    draft = (await delivery_challan_service.draft_from_quotation(session, quotation.data.id, date(2025, 2, 1))).data
    assert (draft.customer_id, draft.quotation_id) == (customer.id, quotation.data.id)
    assert draft.challan_date == draft.po_date == date(2025, 2, 1)
    assert [(i.part_no, i.hsn_code, i.dispatched_qty) for i in draft.items] == [
        ("1119303", "85444999", 500), ("FREE-TEXT", "", 2),
    ]

    saved = await delivery_challan_service.create_challan(session, draft, admin)
    assert saved.data.quotation_id == quotation.data.id

async def test_draft_needs_existing_quotation(session, admin):
    with pytest.raises(HTTPException) as exc:
        await delivery_challan_service.draft_from_quotation(session, 7)
    assert exc.value.status_code == 404
