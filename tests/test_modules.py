from sqlalchemy import func, select

from vendorhub.models.customer import LoyaltyPoint


async def _customer(client, headers, name="Ravi", phone="9999999999"):
    return (await client.post("/api/customers", json={"name": name, "phone": phone}, headers=headers)).json()


# ---------- Loyalty ----------
async def test_redeem_reward_after_earning_points(client, vendor_a):
    customer = await _customer(client, vendor_a.headers)
    reward = (
        await client.post("/api/loyalty/rewards", json={"name": "Free Chai", "pointsRequired": 30}, headers=vendor_a.headers)
    ).json()

    resp = await client.post(f"/api/loyalty/customers/{customer['id']}/redeem", json={"rewardId": reward["id"]}, headers=vendor_a.headers)
    assert resp.status_code == 400

    await client.post(
        "/api/bills",
        json={"customerId": customer["id"], "items": [{"name": "Party order", "quantity": 1, "price": 450}]},
        headers=vendor_a.headers,
    )
    points = (await client.get(f"/api/loyalty/customers/{customer['id']}", headers=vendor_a.headers)).json()
    assert points["points"] == 45

    resp = await client.post(f"/api/loyalty/customers/{customer['id']}/redeem", json={"rewardId": reward["id"]}, headers=vendor_a.headers)
    assert resp.status_code == 200
    assert resp.json()["points"] == 15
    assert resp.json()["lifetimePoints"] == 45
    assert resp.json()["tier"] == "bronze"


async def test_reading_points_does_not_write(client, vendor_a, session_factory):
    customer = await _customer(client, vendor_a.headers)

    resp = await client.get(f"/api/loyalty/customers/{customer['id']}", headers=vendor_a.headers)
    assert resp.status_code == 200
    assert resp.json() == {"customerId": customer["id"], "points": 0, "lifetimePoints": 0, "tier": "bronze"}

    async with session_factory() as session:
        assert (await session.execute(select(func.count()).select_from(LoyaltyPoint))).scalar_one() == 0


async def test_loyalty_points_are_scoped(client, vendor_a, vendor_b):
    customer = await _customer(client, vendor_a.headers)
    reward = (
        await client.post("/api/loyalty/rewards", json={"name": "Free Chai", "pointsRequired": 30}, headers=vendor_b.headers)
    ).json()

    assert (await client.get(f"/api/loyalty/customers/{customer['id']}", headers=vendor_b.headers)).status_code == 404
    resp = await client.post(f"/api/loyalty/customers/{customer['id']}/redeem", json={"rewardId": reward["id"]}, headers=vendor_b.headers)
    assert resp.status_code == 404
    # Reward belongs to the other vendor
    resp = await client.post(f"/api/loyalty/customers/{customer['id']}/redeem", json={"rewardId": reward["id"]}, headers=vendor_a.headers)
    assert resp.status_code == 404


async def test_inactive_reward_cannot_be_redeemed(client, vendor_a, session_factory):
    customer = await _customer(client, vendor_a.headers)
    await client.post(
        "/api/bills",
        json={"customerId": customer["id"], "items": [{"name": "Thali", "quantity": 2, "price": 150}]},
        headers=vendor_a.headers,
    )
    reward = (
        await client.post(
            "/api/loyalty/rewards",
            json={"name": "Old offer", "pointsRequired": 10, "isActive": False},
            headers=vendor_a.headers,
        )
    ).json()
    resp = await client.post(f"/api/loyalty/customers/{customer['id']}/redeem", json={"rewardId": reward["id"]}, headers=vendor_a.headers)
    assert resp.status_code == 400
    assert resp.json()["field"] == "rewardId"


# ---------- Staff & attendance ----------
async def test_attendance_flow(client, vendor_a, vendor_b):
    staff = (
        await client.post("/api/staff", json={"name": "Sunil", "phone": "9812345678", "role": "waiter"}, headers=vendor_a.headers)
    ).json()
    url = f"/api/staff/{staff['id']}/attendance"

    resp = await client.post(url, json={"checkIn": "2026-10-16T09:05:00"}, headers=vendor_a.headers)
    assert resp.status_code == 201
    record = resp.json()
    assert record["vendorId"] == vendor_a.profile_id
    assert record["date"] == "2026-10-16T00:00:00"
    assert record["status"] == "present"

    resp = await client.patch(f"/api/attendance/{record['id']}", json={"checkOut": "2026-10-16T08:00:00"}, headers=vendor_a.headers)
    assert resp.status_code == 400
    assert resp.json()["field"] == "checkOut"

    resp = await client.patch(
        f"/api/attendance/{record['id']}",
        json={"checkOut": "2026-10-16T18:00:00", "status": "late"},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "late"
    assert resp.json()["checkIn"] == "2026-10-16T09:05:00"

    assert [r["id"] for r in (await client.get(url, headers=vendor_a.headers)).json()] == [record["id"]]

    # Another vendor sees neither the staff member nor the record
    assert (await client.get(url, headers=vendor_b.headers)).status_code == 404
    assert (await client.post(url, json={"checkIn": "2026-10-16T09:00:00"}, headers=vendor_b.headers)).status_code == 404
    resp = await client.patch(f"/api/attendance/{record['id']}", json={"status": "absent"}, headers=vendor_b.headers)
    assert resp.status_code == 404


async def test_attendance_rejects_checkout_before_checkin(client, vendor_a):
    staff = (
        await client.post("/api/staff", json={"name": "Pooja", "phone": "9800000000", "role": "cashier"}, headers=vendor_a.headers)
    ).json()
    resp = await client.post(
        f"/api/staff/{staff['id']}/attendance",
        json={"checkIn": "2026-10-16T09:00:00", "checkOut": "2026-10-16T07:00:00"},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 400


# ---------- Expenses ----------
async def test_expense_summary(client, vendor_a, vendor_b):
    for category, amount in (("rent", 5000), ("raw_material", 1200), ("raw_material", 300)):
        await client.post(
            "/api/expenses",
            json={"category": category, "description": f"{category} payment", "amount": amount},
            headers=vendor_a.headers,
        )
    await client.post("/api/expenses", json={"category": "rent", "description": "rent", "amount": 9999}, headers=vendor_b.headers)
    await client.post("/api/bills", json={"items": [{"name": "Chai", "quantity": 100, "price": 70}]}, headers=vendor_a.headers)

    resp = await client.get("/api/expenses/summary", headers=vendor_a.headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalExpenses"] == 6500
    assert body["totalSales"] == 7000
    assert body["profit"] == 500
    assert body["byCategory"] == {"rent": 5000, "raw_material": 1500}


async def test_expense_defaults_date(client, vendor_a):
    resp = await client.post(
        "/api/expenses",
        json={"category": "utilities", "description": "Electricity", "amount": 800, "expenseDate": None},
        headers=vendor_a.headers,
    )
    assert resp.status_code == 201
    assert resp.json()["expenseDate"] is not None


# ---------- Public contact form ----------
async def test_contact_form_validates_email(client):
    resp = await client.post("/api/contact", json={"name": "Kiran", "email": "not-an-email", "message": "Hi"})
    assert resp.status_code == 400
    assert resp.json()["field"] == "email"
