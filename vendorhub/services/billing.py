"""
Bill creation.

A bill and all of its side effects (customer stats, loyalty points, stock
decrements, low-stock notifications) are written in one transaction: the
repositories only flush and ``create_bill`` commits once at the end, so a
failure at any step leaves nothing behind.
"""
import logging
from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.module_gates import is_feature_enabled
from vendorhub.crud.scoped import LoyaltyPointRepository, TenantContext, TenantRepository
from vendorhub.models.bill import Bill
from vendorhub.models.customer import Customer
from vendorhub.models.inventory import InventoryItem
from vendorhub.models.menu_item import MenuItem
from vendorhub.models.notification import Notification
from vendorhub.schemas.bill import BillCreate, BillLineItem
from vendorhub.services import loyalty
from vendorhub.utils.time_windows import utcnow

log = logging.getLogger(__name__)

CENT = Decimal("0.01")


def money(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def price_lines(items: Iterable[BillLineItem]) -> List[dict]:
    """Denormalized line items with ``total`` recomputed from price and quantity."""
    lines = []
    for item in items:
        price = money(item.price)
        lines.append(
            {
                "itemId": item.item_id,
                "name": item.name,
                "quantity": item.quantity,
                "price": str(price),
                "total": str(money(price * item.quantity)),
            }
        )
    return lines


def lines_total(lines: Iterable[dict]) -> Decimal:
    return money(sum((Decimal(line["total"]) for line in lines), Decimal("0")))


def final_amount(total_amount: Decimal, discount: Decimal, extra_charges: Decimal) -> Decimal:
    return money(Decimal(total_amount) - Decimal(discount) + Decimal(extra_charges))


@dataclass
class BillTotals:
    lines: List[dict]
    total_amount: Decimal
    discount: Decimal
    extra_charges: Decimal
    final_amount: Decimal


def compute_totals(payload: BillCreate) -> BillTotals:
    lines = price_lines(payload.items)
    total = lines_total(lines)
    if payload.total_amount is not None:
        supplied = money(payload.total_amount)
        if supplied != total:
            log.warning("bill totalAmount %s differs from line total %s; keeping supplied value", supplied, total)
        total = supplied
    discount = money(payload.discount)
    extra = money(payload.extra_charges)
    return BillTotals(
        lines=lines,
        total_amount=total,
        discount=discount,
        extra_charges=extra,
        final_amount=final_amount(total, discount, extra),
    )


async def _validate_menu_items(db: AsyncSession, tenant: TenantContext, lines: List[dict]) -> None:
    menu = TenantRepository(db, MenuItem, tenant)
    for item_id in {line["itemId"] for line in lines if line["itemId"]}:
        await menu.get(item_id)


def _favorite(lines: List[dict]) -> Optional[str]:
    counts = Counter()
    for line in lines:
        counts[line["name"]] += line["quantity"]
    if not counts:
        return None
    return counts.most_common(1)[0][0]


async def _record_visit(db: AsyncSession, tenant: TenantContext, customer: Customer, totals: BillTotals) -> None:
    customer.visit_count = (customer.visit_count or 0) + 1
    customer.total_spend = money((customer.total_spend or 0) + totals.final_amount)
    customer.last_visit = utcnow()
    customer.favorite_item = _favorite(totals.lines) or customer.favorite_item

    if await is_feature_enabled(db, tenant.vendor_id, "loyalty"):
        points = await LoyaltyPointRepository(db, tenant).get_or_create(customer.id)
        earned = loyalty.award(points, totals.final_amount)
        log.debug("loyalty: customer=%s earned=%s tier=%s", customer.id, earned, points.tier)


async def _decrement_stock(db: AsyncSession, tenant: TenantContext, lines: List[dict]) -> None:
    sold = Counter()
    for line in lines:
        if line["itemId"]:
            sold[line["itemId"]] += line["quantity"]
    if not sold:
        return

    inventory = TenantRepository(db, InventoryItem, tenant)
    notifications = TenantRepository(db, Notification, tenant)
    for row in await inventory.list(InventoryItem.menu_item_id.in_(list(sold))):
        before = row.current_stock or 0
        row.current_stock = max(0, before - sold[row.menu_item_id])
        if before > row.min_stock_level >= row.current_stock:
            await notifications.create(
                {
                    "title": "Low stock",
                    "message": f"{row.item_name} is down to {row.current_stock} {row.unit}",
                    "type": "warning",
                    "link": "/inventory",
                }
            )
            log.info("low stock: vendor=%s item=%s stock=%s", tenant.vendor_id, row.id, row.current_stock)
    await db.flush()


async def create_bill(db: AsyncSession, tenant: TenantContext, payload: BillCreate) -> Bill:
    totals = compute_totals(payload)
    await _validate_menu_items(db, tenant, totals.lines)

    customer = None
    customer_name = payload.customer_name
    if payload.customer_id:
        customer = await TenantRepository(db, Customer, tenant).get(payload.customer_id)
        customer_name = customer_name or customer.name

    bill = await TenantRepository(db, Bill, tenant).create(
        {
            "customer_id": customer.id if customer else None,
            "customer_name": customer_name,
            "items": totals.lines,
            "total_amount": totals.total_amount,
            "discount": totals.discount,
            "extra_charges": totals.extra_charges,
            "final_amount": totals.final_amount,
            "payment_mode": payload.payment_mode,
            "status": payload.status,
        }
    )

    if payload.status != "cancelled":
        if customer is not None:
            await _record_visit(db, tenant, customer, totals)
        await _decrement_stock(db, tenant, totals.lines)

    await db.commit()
    await db.refresh(bill)
    log.info("bill created: vendor=%s bill=%s final=%s", tenant.vendor_id, bill.id, bill.final_amount)
    return bill
