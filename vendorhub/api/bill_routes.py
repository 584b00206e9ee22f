from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_active_tenant
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.db import get_db
from vendorhub.models.bill import Bill
from vendorhub.schemas.bill import BillCreate, BillRead, BillStatusUpdate
from vendorhub.services import billing

router = APIRouter(prefix="/api/bills", tags=["bills"])


@router.get("", response_model=List[BillRead])
async def list_bills(
    start: Optional[datetime] = Query(default=None, alias="from"),
    end: Optional[datetime] = Query(default=None, alias="to"),
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    criteria = []
    if start is not None:
        criteria.append(Bill.created_at >= start)
    if end is not None:
        criteria.append(Bill.created_at < end)
    return await TenantRepository(db, Bill, tenant).list(*criteria, order_by=Bill.created_at.desc())


@router.post("", response_model=BillRead, status_code=status.HTTP_201_CREATED)
async def create_bill(
    payload: BillCreate,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await billing.create_bill(db, tenant, payload)


@router.get("/{bill_id}", response_model=BillRead)
async def get_bill(
    bill_id: str,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await TenantRepository(db, Bill, tenant).get(bill_id)


@router.patch("/{bill_id}/status", response_model=BillRead)
async def update_bill_status(
    bill_id: str,
    update: BillStatusUpdate,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    # Amounts and line items are immutable once billed; only status moves
    bill = await TenantRepository(db, Bill, tenant).update(bill_id, {"status": update.status})
    await db.commit()
    await db.refresh(bill)
    return bill
