from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.api.factory import build_scoped_router
from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import staff as staff_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.staff import Staff
from vendorhub.schemas.staff import (
    AttendanceCreate,
    AttendanceRead,
    AttendanceUpdate,
    StaffCreate,
    StaffRead,
    StaffUpdate,
)

staff_gate = require_feature("staff_management")

staff_router = build_scoped_router(
    model=Staff,
    create_schema=StaffCreate,
    update_schema=StaffUpdate,
    read_schema=StaffRead,
    prefix="/api/staff",
    tags=["staff"],
    gate=staff_gate,
    order_by=lambda m: m.name,
)

attendance_router = APIRouter(prefix="/api", tags=["staff"])


@attendance_router.get("/staff/{staff_id}/attendance", response_model=List[AttendanceRead])
async def list_attendance(
    staff_id: str,
    tenant: TenantContext = Depends(staff_gate),
    db: AsyncSession = Depends(get_db),
):
    return await staff_crud.list_attendance(db, tenant, staff_id)


@attendance_router.post(
    "/staff/{staff_id}/attendance",
    response_model=AttendanceRead,
    status_code=status.HTTP_201_CREATED,
)
async def record_attendance(
    staff_id: str,
    payload: AttendanceCreate,
    tenant: TenantContext = Depends(staff_gate),
    db: AsyncSession = Depends(get_db),
):
    return await staff_crud.record_attendance(db, tenant, staff_id, payload)


@attendance_router.patch("/attendance/{record_id}", response_model=AttendanceRead)
async def update_attendance(
    record_id: str,
    updates: AttendanceUpdate,
    tenant: TenantContext = Depends(staff_gate),
    db: AsyncSession = Depends(get_db),
):
    return await staff_crud.update_attendance(db, tenant, record_id, updates)
