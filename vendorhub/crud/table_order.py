import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.table import Table, TableOrder
from vendorhub.schemas.table import TableOrderCreate
from vendorhub.services.billing import lines_total, money, price_lines

log = logging.getLogger(__name__)


async def list_orders(db: AsyncSession, tenant: TenantContext, status: Optional[str] = None) -> List[TableOrder]:
    criteria = [TableOrder.status == status] if status else []
    return await TenantRepository(db, TableOrder, tenant).list(*criteria, order_by=TableOrder.created_at.desc())


async def create_order(db: AsyncSession, tenant: TenantContext, payload: TableOrderCreate) -> TableOrder:
    if payload.table_id:
        await TenantRepository(db, Table, tenant).get(payload.table_id)

    lines = price_lines(payload.items)
    total = money(payload.total_amount) if payload.total_amount is not None else lines_total(lines)
    data = payload.model_dump(exclude={"items", "total_amount"})
    order = await TenantRepository(db, TableOrder, tenant).create({**data, "items": lines, "total_amount": total})
    await db.commit()
    await db.refresh(order)
    log.info("table order created: vendor=%s order=%s table=%s", tenant.vendor_id, order.id, order.table_id)
    return order


async def set_status(db: AsyncSession, tenant: TenantContext, order_id: str, status: str) -> TableOrder:
    order = await TenantRepository(db, TableOrder, tenant).update(order_id, {"status": status})
    await db.commit()
    await db.refresh(order)
    return order
