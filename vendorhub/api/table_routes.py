from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.api.factory import build_scoped_router
from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import table_order as table_order_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.table import Table
from vendorhub.schemas.table import (
    TableCreate,
    TableOrderCreate,
    TableOrderRead,
    TableOrderStatusUpdate,
    TableRead,
    TableUpdate,
)

table_gate = require_feature("table_qr")

tables_router = build_scoped_router(
    model=Table,
    create_schema=TableCreate,
    update_schema=TableUpdate,
    read_schema=TableRead,
    prefix="/api/tables",
    tags=["tables"],
    gate=table_gate,
    order_by=lambda m: m.table_number,
)

orders_router = APIRouter(prefix="/api/table-orders", tags=["tables"])


@orders_router.get("", response_model=List[TableOrderRead])
async def list_table_orders(
    order_status: Optional[str] = Query(default=None, alias="status"),
    tenant: TenantContext = Depends(table_gate),
    db: AsyncSession = Depends(get_db),
):
    return await table_order_crud.list_orders(db, tenant, order_status)


@orders_router.post("", response_model=TableOrderRead, status_code=status.HTTP_201_CREATED)
async def create_table_order(
    payload: TableOrderCreate,
    tenant: TenantContext = Depends(table_gate),
    db: AsyncSession = Depends(get_db),
):
    return await table_order_crud.create_order(db, tenant, payload)


@orders_router.patch("/{order_id}/status", response_model=TableOrderRead)
async def update_table_order_status(
    order_id: str,
    update: TableOrderStatusUpdate,
    tenant: TenantContext = Depends(table_gate),
    db: AsyncSession = Depends(get_db),
):
    return await table_order_crud.set_status(db, tenant, order_id, update.status)
