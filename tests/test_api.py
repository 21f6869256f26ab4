import pytest
from fastapi.testclient import TestClient

from cablequote.core.db import AsyncSessionLocal, Base, engine
from cablequote.core.security import hash_password
from cablequote.models.user_models import User


async def reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as db:
        db.add(User(name="admin", password_hash=hash_password("admin123"), role="Admin"))
        await db.commit()


@pytest.fixture
def client():
    from main import app
    with TestClient(app) as c:
        c.portal.call(reset_database)
        yield c


def login(client, name="admin", password="admin123"):
    res = client.post("/auth/login", json={"name": name, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


QUOTATION = {
    "quotation_date": "2025-01-01",
    "lines": [
        {"part_no": "A", "unit_price": 120.50, "discount_percent": "15", "quantity_ordered": 100},
        {"part_no": "B", "unit_price": 250.75, "discount_percent": "20", "quantity_ordered": 40},
    ],
}


def test_health(client):
    assert client.get("/").json()["status"] == "ok"

def test_requires_token(client):
    assert client.get("/billing/quotations/").status_code == 401

def test_bad_password(client):
    res = client.post("/auth/login", json={"name": "admin", "password": "nope"})
    assert res.status_code == 401

def test_quotation_flow(client):
    headers = login(client)
    res = client.post("/billing/quotations/", json=QUOTATION, headers=headers)
    assert res.status_code == 201, res.text
    assert res.json()["data"]["id"] == 1

    totals = client.get("/billing/quotations/1/totals", headers=headers).json()["data"]
    assert totals["total_amount"] == pytest.approx(18266.5)
    assert totals["grand_total"] == pytest.approx(18266.5)

    doc = client.get("/billing/quotations/1/document", params={"layout": "discounted"}, headers=headers).json()["data"]
    assert doc["amount_in_words"] == "Rupees Eighteen Thousand Two Hundred and Sixty Six Only"
    assert doc["quotation_number"] == "SKC/QTN/1"

    preview = client.post("/billing/quotations/preview", json={"lines": QUOTATION["lines"]}, headers=headers).json()
    assert preview["totals"]["total_amount"] == pytest.approx(18266.5)

def test_product_price_endpoint(client):
    headers = login(client)
    res = client.post("/inventory/products/", json={
        "part_no": "1119303", "description": "OLFLEX CLASSIC 110 3G1.5",
        "prices": [{"list_price": 100, "valid_from": "2025-01-01"},
                   {"special_price": 80, "valid_from": "2025-07-01"}],
    }, headers=headers)
    assert res.status_code == 201, res.text
    product_id = res.json()["data"]["id"]

    price = client.get(f"/inventory/products/{product_id}/price", params={"on": "2025-07-01"}, headers=headers).json()
    assert price["data"]["unit_price"] == 80
    assert price["data"]["price_source"] == "SP"
    assert price["data"]["band"]["valid_to"] == "9999-12-31"

def test_viewer_cannot_write(client):
    headers = login(client)
    res = client.post("/users/", json={"name": "vik", "role": "Viewer", "password": "pass1234"}, headers=headers)
    assert res.status_code == 201, res.text

    viewer = login(client, "vik", "pass1234")
    assert client.post("/billing/quotations/", json=QUOTATION, headers=viewer).status_code == 403
    assert client.get("/billing/quotations/", headers=viewer).status_code == 200

def test_logout_invalidates_token(client):
    headers = login(client)
    assert client.post("/auth/logout", headers=headers).status_code == 200
    assert client.get("/auth/me", headers=headers).status_code == 401

def test_reports(client):
    headers = login(client)
    client.post("/billing/quotations/", json=QUOTATION, headers=headers)

    dashboard = client.get("/reports/dashboard", params={"range": "all"}, headers=headers).json()["data"]
    assert dashboard["summary"]["total"]["count"] == 1
    assert dashboard["summary"]["per_status"]["Open"]["value"] == pytest.approx(18266.5)

    calendar = client.get("/reports/calendar", params={"year": 2025, "month": 1}, headers=headers).json()["data"]
    assert [(d["day"], d["quotes"], d["reminders"]) for d in calendar["days"]] == [(1, [1], []), (6, [], [1])]

def test_stock_check_endpoint(client):
    headers = login(client)
    client.put("/inventory/stock/", json={"lines": [{"description": "OLFLEX CLASSIC 110", "quantity": 10}]}, headers=headers)
    client.put("/inventory/stock/pending-orders", json={"orders": [
        {"order_no": "SO-1", "item_name": "olflex classic 110", "balance_qty": 15},
    ]}, headers=headers)
    checked = client.get("/inventory/stock/check", headers=headers).json()["data"]
    assert checked["total_shortage"] == 5

def test_delivery_challan_flow(client):
    headers = login(client)
    quotation = client.post("/billing/quotations/", json=QUOTATION, headers=headers).json()["data"]

    draft = client.get(f"/billing/delivery-challans/from-quotation/{quotation['id']}", headers=headers)
    assert draft.status_code == 200, draft.text
    body = draft.json()["data"]
    assert [float(item["dispatched_qty"]) for item in body["items"]] == [100, 40]

    created = client.post("/billing/delivery-challans/", json=body, headers=headers)
    assert created.status_code == 201, created.text
    challan = created.json()["data"]
    assert challan["id"] == 1
    assert challan["total_dispatched"] == pytest.approx(140)

    listed = client.get("/billing/delivery-challans/", params={"quotation_id": quotation["id"]}, headers=headers)
    assert listed.json()["total"] == 1
