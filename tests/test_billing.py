from decimal import Decimal

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import OperationalError

from vendorhub.models.bill import Bill
from vendorhub.models.customer import LoyaltyPoint
from vendorhub.models.vendor_features import VendorFeatures
from vendorhub.schemas.bill import BillCreate
from vendorhub.services import billing, loyalty


@pytest.mark.parametrize(
    "total,discount,extra,expected",
    [
        ("100", "0", "0", "100.00"),
        ("100", "15", "0", "85.00"),
        ("100", "0", "12.5", "112.50"),
        ("249.99", "20.49", "5.25", "234.75"),
        ("0", "0", "0", "0.00"),
    ],
)
def test_final_amount(total, discount, extra, expected):
    assert billing.final_amount(Decimal(total), Decimal(discount), Decimal(extra)) == Decimal(expected)


def test_compute_totals_recomputes_lines_and_ignores_client_final():
    payload = BillCreate.model_validate(
        {
            "items": [
                {"name": "Masala Chai", "quantity": 3, "price": 15, "total": 999},
                {"name": "Bun Maska", "quantity": 2, "price": "30.50"},
            ],
            "discount": 6,
            "extraCharges": 2,
            "finalAmount": 1,
        }
    )
    totals = billing.compute_totals(payload)
    assert [line["total"] for line in totals.lines] == ["45.00", "61.00"]
    assert totals.total_amount == Decimal("106.00")
    assert totals.final_amount == Decimal("102.00")


def test_compute_totals_trusts_supplied_total_amount(caplog):
    payload = BillCreate.model_validate(
        {"items": [{"name": "Haircut", "quantity": 1, "price": 200}], "totalAmount": 250, "discount": 50}
    )
    totals = billing.compute_totals(payload)
    assert totals.total_amount == Decimal("250.00")
    assert totals.final_amount == Decimal("200.00")
    assert "differs from line total 200.00" in caplog.text


def test_matching_total_amount_is_not_logged(caplog):
    payload = BillCreate.model_validate({"items": [{"name": "Haircut", "quantity": 1, "price": 200}], "totalAmount": 200})
    billing.compute_totals(payload)
    assert "differs" not in caplog.text


@pytest.mark.parametrize(
    "amount,points",
    [(Decimal("0"), 0), (Decimal("9.99"), 0), (Decimal("10"), 1), (Decimal("255.50"), 25)],
)
def test_points_for_amount(amount, points):
    assert loyalty.points_for_amount(amount) == points


@pytest.mark.parametrize(
    "lifetime,tier",
    [(0, "bronze"), (499, "bronze"), (500, "silver"), (1999, "silver"), (2000, "gold"), (5000, "platinum")],
)
def test_tier_for(lifetime, tier):
    assert loyalty.tier_for(lifetime) == tier


# ---------- API ----------
async def _setup_shop(client, headers):
    chai = (await client.post("/api/menu", json={"name": "Masala Chai", "price": 20}, headers=headers)).json()
    stock = (
        await client.post(
            "/api/inventory",
            json={"itemName": "Chai premix", "unit": "units", "menuItemId": chai["id"], "currentStock": 12, "minStockLevel": 10},
            headers=headers,
        )
    ).json()
    customer = (await client.post("/api/customers", json={"name": "Ravi", "phone": "9999999999"}, headers=headers)).json()
    return chai, stock, customer


async def test_bill_updates_customer_stock_and_loyalty(client, vendor_a):
    chai, stock, customer = await _setup_shop(client, vendor_a.headers)

    resp = await client.post(
        "/api/bills",
        json={
            "customerId": customer["id"],
            "items": [{"itemId": chai["id"], "name": "Masala Chai", "quantity": 3, "price": 20}],
            "discount": 5,
            "extraCharges": 10,
            "finalAmount": 1,
            "paymentMode": "upi",
        },
        headers=vendor_a.headers,
    )
    assert resp.status_code == 201, resp.text
    bill = resp.json()
    assert bill["vendorId"] == vendor_a.profile_id
    assert bill["totalAmount"] == 60
    assert bill["finalAmount"] == 65
    assert bill["customerName"] == "Ravi"
    assert bill["items"][0]["total"] == 60

    updated = (await client.get(f"/api/customers/{customer['id']}", headers=vendor_a.headers)).json()
    assert updated["visitCount"] == 1
    assert updated["totalSpend"] == 65
    assert updated["favoriteItem"] == "Masala Chai"
    assert updated["loyalty"]["points"] == 6
    assert updated["loyalty"]["tier"] == "bronze"

    inventory = (await client.get("/api/inventory", headers=vendor_a.headers)).json()
    assert inventory[0]["currentStock"] == 9

    notes = (await client.get("/api/notifications", headers=vendor_a.headers)).json()
    assert len(notes) == 1
    assert notes[0]["type"] == "warning"
    assert "Chai premix" in notes[0]["message"]

    low = (await client.get("/api/inventory/low-stock", headers=vendor_a.headers)).json()
    assert [i["id"] for i in low] == [stock["id"]]


async def test_stock_never_goes_negative_and_warns_once(client, vendor_a):
    chai, _, _ = await _setup_shop(client, vendor_a.headers)
    line = {"itemId": chai["id"], "name": "Masala Chai", "quantity": 20, "price": 20}

    await client.post("/api/bills", json={"items": [line]}, headers=vendor_a.headers)
    await client.post("/api/bills", json={"items": [line]}, headers=vendor_a.headers)

    inventory = (await client.get("/api/inventory", headers=vendor_a.headers)).json()
    assert inventory[0]["currentStock"] == 0
    assert len((await client.get("/api/notifications", headers=vendor_a.headers)).json()) == 1


async def test_loyalty_disabled_skips_points(client, vendor_a, admin):
    _, _, customer = await _setup_shop(client, vendor_a.headers)
    await client.put(f"/api/admin/profiles/{vendor_a.profile_id}/features", json={"loyalty": False}, headers=admin.headers)

    resp = await client.post(
        "/api/bills",
        json={"customerId": customer["id"], "items": [{"name": "Special Chai", "quantity": 1, "price": 100}]},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 201
    updated = (await client.get(f"/api/customers/{customer['id']}", headers=vendor_a.headers)).json()
    assert updated["visitCount"] == 1
    assert updated["loyalty"] is None


async def test_cancelled_bill_has_no_side_effects(client, vendor_a):
    chai, _, customer = await _setup_shop(client, vendor_a.headers)
    resp = await client.post(
        "/api/bills",
        json={
            "customerId": customer["id"],
            "items": [{"itemId": chai["id"], "name": "Masala Chai", "quantity": 5, "price": 20}],
            "status": "cancelled",
        },
        headers=vendor_a.headers,
    )
    assert resp.status_code == 201
    assert (await client.get(f"/api/customers/{customer['id']}", headers=vendor_a.headers)).json()["visitCount"] == 0
    assert (await client.get("/api/inventory", headers=vendor_a.headers)).json()[0]["currentStock"] == 12


async def test_bill_with_foreign_customer_writes_nothing(client, vendor_a, vendor_b, session_factory):
    chai, _, _ = await _setup_shop(client, vendor_a.headers)
    foreign = (await client.post("/api/customers", json={"name": "Neha", "phone": "9777777777"}, headers=vendor_b.headers)).json()

    resp = await client.post(
        "/api/bills",
        json={"customerId": foreign["id"], "items": [{"itemId": chai["id"], "name": "Masala Chai", "quantity": 2, "price": 20}]},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 404

    async with session_factory() as session:
        count = (await session.execute(select(func.count()).select_from(Bill))).scalar_one()
    assert count == 0
    assert (await client.get("/api/inventory", headers=vendor_a.headers)).json()[0]["currentStock"] == 12
    assert (await client.get(f"/api/customers/{foreign['id']}", headers=vendor_b.headers)).json()["visitCount"] == 0


async def test_failure_after_bill_is_flushed_writes_nothing(client, vendor_a, session_factory, monkeypatch):
    customer = (await client.post("/api/customers", json={"name": "Ravi", "phone": "9999999999"}, headers=vendor_a.headers)).json()
    # Tenant without a stored feature row: the loyalty check must not commit mid-bill
    async with session_factory() as session:
        await session.execute(delete(VendorFeatures).where(VendorFeatures.vendor_id == vendor_a.profile_id))
        await session.commit()

    async def broken_stock(db, tenant, lines):
        raise OperationalError("UPDATE inventory_items", {}, Exception("disk I/O error"))

    monkeypatch.setattr(billing, "_decrement_stock", broken_stock)
    resp = await client.post(
        "/api/bills",
        json={"customerId": customer["id"], "items": [{"name": "Masala Chai", "quantity": 2, "price": 20}]},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 500
    assert resp.json()["code"] == "INTERNAL_ERROR"

    async with session_factory() as session:
        assert (await session.execute(select(func.count()).select_from(Bill))).scalar_one() == 0
        assert (await session.execute(select(func.count()).select_from(LoyaltyPoint))).scalar_one() == 0
    assert (await client.get(f"/api/customers/{customer['id']}", headers=vendor_a.headers)).json()["visitCount"] == 0


async def test_bill_with_foreign_menu_item_is_not_found(client, vendor_a, vendor_b):
    foreign = (await client.post("/api/menu", json={"name": "Cold Coffee", "price": 60}, headers=vendor_b.headers)).json()
    resp = await client.post(
        "/api/bills",
        json={"items": [{"itemId": foreign["id"], "name": "Cold Coffee", "quantity": 1, "price": 60}]},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 404


@pytest.mark.parametrize(
    "body,field",
    [
        ({"items": []}, "items"),
        ({"items": [{"name": "Chai", "quantity": 0, "price": 10}]}, "items.0.quantity"),
        ({"items": [{"name": "Chai", "quantity": 1, "price": -1}]}, "items.0.price"),
        ({"items": [{"name": "Chai", "quantity": 1, "price": 10}], "discount": -5}, "discount"),
        ({"items": [{"name": "Chai", "quantity": 1, "price": 10}], "paymentMode": "cheque"}, "paymentMode"),
    ],
)
async def test_invalid_bill_is_400(client, vendor_a, body, field):
    resp = await client.post("/api/bills", json=body, headers=vendor_a.headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "VALIDATION_ERROR"
    assert resp.json()["field"] == field


async def test_bill_status_and_listing(client, vendor_a, vendor_b):
    bill = (
        await client.post("/api/bills", json={"items": [{"name": "Chai", "quantity": 2, "price": 10}]}, headers=vendor_a.headers)
    ).json()

    resp = await client.patch(f"/api/bills/{bill['id']}/status", json={"status": "cancelled"}, headers=vendor_b.headers)
    assert resp.status_code == 404

    resp = await client.patch(f"/api/bills/{bill['id']}/status", json={"status": "cancelled"}, headers=vendor_a.headers)
    assert resp.json()["status"] == "cancelled"
    assert resp.json()["finalAmount"] == 20

    assert [b["id"] for b in (await client.get("/api/bills", headers=vendor_a.headers)).json()] == [bill["id"]]
    assert (await client.get("/api/bills", headers=vendor_b.headers)).json() == []
    assert (await client.get(f"/api/bills/{bill['id']}", headers=vendor_b.headers)).status_code == 404
