from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from vendorhub.models.bill import Bill
from vendorhub.models.customer import Customer
from vendorhub.services import analytics
from vendorhub.utils.time_windows import Window, last_n_dates, trailing_windows, utcnow


@pytest.mark.parametrize(
    "current,previous,expected",
    [
        (150, 100, 50.0),
        (50, 100, -50.0),
        (100, 100, 0.0),
        (10, 0, None),
        (0, 0, None),
        (Decimal("120.50"), Decimal("100"), 20.5),
    ],
)
def test_growth(current, previous, expected):
    assert analytics.growth(current, previous) == expected


def test_mean_growth_skips_undefined():
    assert analytics.mean_growth([10.0, None, 20.0]) == 15.0
    assert analytics.mean_growth([None, None]) is None


def test_trailing_windows_are_adjacent():
    now = datetime(2026, 3, 31, 12, 0)
    current, previous = trailing_windows(30, now)
    assert current == Window(datetime(2026, 3, 1, 12, 0), now)
    assert previous.end == current.start
    assert previous.end - previous.start == current.end - current.start
    assert not current.contains(now)
    assert current.contains(current.start)


def test_last_n_dates_oldest_first():
    dates = last_n_dates(7, datetime(2026, 1, 3, 8, 0))
    assert len(dates) == 7
    assert dates[0].isoformat() == "2025-12-28"
    assert dates[-1].isoformat() == "2026-01-03"


def test_top_items_orders_by_quantity():
    bills = [
        Bill(items=[{"name": "Chai", "quantity": 2}, {"name": "Samosa", "quantity": 5}]),
        Bill(items=[{"name": "Chai", "quantity": 4}]),
    ]
    assert analytics.top_items(bills) == [{"name": "Chai", "quantity": 6}, {"name": "Samosa", "quantity": 5}]


# ---------- Dashboard ----------
async def _insert_bill(session_factory, vendor_id, amount, days_ago, status="completed", name="Chai"):
    async with session_factory() as session:
        session.add(
            Bill(
                vendor_id=vendor_id,
                items=[{"name": name, "quantity": 1, "price": str(amount), "total": str(amount)}],
                total_amount=Decimal(amount),
                final_amount=Decimal(amount),
                status=status,
                created_at=utcnow() - timedelta(days=days_ago),
            )
        )
        await session.commit()


async def _insert_customer(session_factory, vendor_id, days_ago):
    async with session_factory() as session:
        session.add(Customer(vendor_id=vendor_id, name="Old regular", phone="9000000000", created_at=utcnow() - timedelta(days=days_ago)))
        await session.commit()


async def test_dashboard_without_baseline_has_null_growth(client, vendor_a):
    await client.post("/api/bills", json={"items": [{"name": "Chai", "quantity": 2, "price": 10}]}, headers=vendor_a.headers)

    resp = await client.get("/api/analytics/dashboard", headers=vendor_a.headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalSales"] == 20
    assert body["totalOrders"] == 1
    assert body["salesGrowth"] is None
    assert body["ordersGrowth"] is None
    assert body["customersGrowth"] is None
    assert body["overallGrowth"] is None


async def test_dashboard_growth_against_previous_window(client, vendor_a, session_factory):
    await _insert_bill(session_factory, vendor_a.profile_id, 100, days_ago=40)
    await _insert_bill(session_factory, vendor_a.profile_id, 500, days_ago=45, status="cancelled")
    await _insert_customer(session_factory, vendor_a.profile_id, days_ago=40)
    await _insert_bill(session_factory, vendor_a.profile_id, 150, days_ago=2)
    await _insert_bill(session_factory, vendor_a.profile_id, 900, days_ago=1, status="cancelled")
    await client.post("/api/customers", json={"name": "Ravi", "phone": "9999999999"}, headers=vendor_a.headers)

    body = (await client.get("/api/analytics/dashboard", params={"days": 30}, headers=vendor_a.headers)).json()
    assert body["totalSales"] == 150
    assert body["totalOrders"] == 1
    assert body["totalCustomers"] == 1
    assert body["salesGrowth"] == 50.0
    assert body["ordersGrowth"] == 0.0
    assert body["customersGrowth"] == 0.0
    assert body["overallGrowth"] == 16.67


async def test_dashboard_recent_sales_and_top_items(client, vendor_a, session_factory):
    await _insert_bill(session_factory, vendor_a.profile_id, 80, days_ago=3, name="Samosa")
    await client.post(
        "/api/bills",
        json={"items": [{"name": "Chai", "quantity": 3, "price": 10}, {"name": "Samosa", "quantity": 1, "price": 15}]},
        headers=vendor_a.headers,
    )

    body = (await client.get("/api/analytics/dashboard", headers=vendor_a.headers)).json()
    recent = body["recentSales"]
    assert len(recent) == 7
    assert recent[-1] == {"date": utcnow().date().isoformat(), "amount": 45.0}
    assert recent[-4]["amount"] == 80.0
    assert sum(day["amount"] for day in recent) == 125.0
    assert body["topItems"] == [{"name": "Chai", "quantity": 3}, {"name": "Samosa", "quantity": 2}]


async def test_dashboard_counts_table_orders(client, vendor_a):
    line = [{"name": "Thali", "quantity": 1, "price": 120}]
    first = (await client.post("/api/table-orders", json={"items": line}, headers=vendor_a.headers)).json()
    await client.post("/api/table-orders", json={"items": line}, headers=vendor_a.headers)
    await client.patch(f"/api/table-orders/{first['id']}/status", json={"status": "preparing"}, headers=vendor_a.headers)

    body = (await client.get("/api/analytics/dashboard", headers=vendor_a.headers)).json()
    assert body["pendingTableOrders"] == 1
    assert body["activeTableOrders"] == 1


async def test_dashboard_is_scoped(client, vendor_a, vendor_b, session_factory):
    await _insert_bill(session_factory, vendor_a.profile_id, 100, days_ago=40)
    await _insert_bill(session_factory, vendor_a.profile_id, 300, days_ago=1)

    body = (await client.get("/api/analytics/dashboard", headers=vendor_b.headers)).json()
    assert body["totalSales"] == 0
    assert body["totalOrders"] == 0
    assert body["salesGrowth"] is None
    assert body["topItems"] == []


@pytest.mark.parametrize("days", [0, 366, "abc"])
async def test_dashboard_rejects_bad_window(client, vendor_a, days):
    resp = await client.get("/api/analytics/dashboard", params={"days": days}, headers=vendor_a.headers)
    assert resp.status_code == 400
    assert resp.json()["field"] == "days"
