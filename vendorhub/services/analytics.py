"""
Dashboard figures for one tenant.

Everything is read through TenantRepository, so the numbers can only ever be
built from the caller's own bills, customers and table orders. Growth compares
the current window with the preceding window of the same length and is
``None`` when that baseline is zero.
"""
from collections import Counter, defaultdict
from datetime import datetime, time
from decimal import Decimal
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.constants import ACTIVE_TABLE_ORDER_STATUSES, DASHBOARD_RECENT_DAYS, DASHBOARD_TOP_ITEMS
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.bill import Bill
from vendorhub.models.customer import Customer
from vendorhub.models.table import TableOrder
from vendorhub.utils.time_windows import Window, last_n_dates, trailing_windows, utcnow


def growth(current, previous) -> Optional[float]:
    if not previous:
        return None
    return round((float(current) - float(previous)) / float(previous) * 100, 2)


def mean_growth(values: Iterable[Optional[float]]) -> Optional[float]:
    defined = [v for v in values if v is not None]
    if not defined:
        return None
    return round(sum(defined) / len(defined), 2)


def _sales(bills: Iterable[Bill], window: Window) -> List[Bill]:
    return [b for b in bills if window.contains(b.created_at)]


def _total(bills: Iterable[Bill]) -> Decimal:
    return sum((Decimal(b.final_amount) for b in bills), Decimal("0"))


def top_items(bills: Iterable[Bill], limit: int = DASHBOARD_TOP_ITEMS) -> List[dict]:
    quantities = Counter()
    for bill in bills:
        for line in bill.items or []:
            quantities[line.get("name")] += int(line.get("quantity") or 0)
    return [{"name": name, "quantity": qty} for name, qty in quantities.most_common(limit) if name]


def recent_sales(bills: Iterable[Bill], days: int = DASHBOARD_RECENT_DAYS, now=None) -> List[dict]:
    per_day = defaultdict(Decimal)
    for bill in bills:
        per_day[bill.created_at.date()] += Decimal(bill.final_amount)
    return [{"date": d.isoformat(), "amount": float(per_day.get(d, Decimal("0")))} for d in last_n_dates(days, now)]


async def dashboard(db: AsyncSession, tenant: TenantContext, days: int = 30) -> dict:
    now = utcnow()
    current, previous = trailing_windows(days, now)
    recent_dates = last_n_dates(DASHBOARD_RECENT_DAYS, now)
    recent_start = datetime.combine(recent_dates[0], time.min)

    bills = await TenantRepository(db, Bill, tenant).list(
        Bill.created_at >= min(previous.start, recent_start),
        Bill.status != "cancelled",
    )
    current_bills = _sales(bills, current)
    previous_bills = _sales(bills, previous)

    customers = TenantRepository(db, Customer, tenant)
    current_customers = await customers.count(Customer.created_at >= current.start, Customer.created_at < current.end)
    previous_customers = await customers.count(Customer.created_at >= previous.start, Customer.created_at < previous.end)

    orders = TenantRepository(db, TableOrder, tenant)
    pending_orders = await orders.count(TableOrder.status == "pending")
    active_orders = await orders.count(TableOrder.status.in_(ACTIVE_TABLE_ORDER_STATUSES))

    current_sales = _total(current_bills)
    previous_sales = _total(previous_bills)

    sales_growth = growth(current_sales, previous_sales)
    orders_growth = growth(len(current_bills), len(previous_bills))
    customers_growth = growth(current_customers, previous_customers)

    return {
        "total_sales": float(current_sales),
        "total_orders": len(current_bills),
        "total_customers": current_customers,
        "pending_table_orders": pending_orders,
        "active_table_orders": active_orders,
        "recent_sales": recent_sales([b for b in bills if b.created_at >= recent_start], now=now),
        "top_items": top_items(current_bills),
        "sales_growth": sales_growth,
        "orders_growth": orders_growth,
        "customers_growth": customers_growth,
        "overall_growth": mean_growth([sales_growth, orders_growth, customers_growth]),
    }
