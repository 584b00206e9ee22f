from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.errors import ValidationError
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.staff import Staff, StaffAttendance
from vendorhub.schemas.staff import AttendanceCreate, AttendanceUpdate


async def list_attendance(db: AsyncSession, tenant: TenantContext, staff_id: str) -> List[StaffAttendance]:
    # Parent first: another tenant's staff id is a 404, not an empty list
    await TenantRepository(db, Staff, tenant).get(staff_id)
    return await TenantRepository(db, StaffAttendance, tenant).list(
        StaffAttendance.staff_id == staff_id,
        order_by=StaffAttendance.date.desc(),
    )


async def record_attendance(db: AsyncSession, tenant: TenantContext, staff_id: str, payload: AttendanceCreate) -> StaffAttendance:
    await TenantRepository(db, Staff, tenant).get(staff_id)
    if payload.check_out and payload.check_out < payload.check_in:
        raise ValidationError("checkOut must not be before checkIn", field="checkOut")

    data = payload.model_dump()
    data["date"] = data["date"] or payload.check_in.replace(hour=0, minute=0, second=0, microsecond=0)
    record = await TenantRepository(db, StaffAttendance, tenant).create({**data, "staff_id": staff_id})
    await db.commit()
    await db.refresh(record)
    return record


async def update_attendance(db: AsyncSession, tenant: TenantContext, record_id: str, updates: AttendanceUpdate) -> StaffAttendance:
    repo = TenantRepository(db, StaffAttendance, tenant)
    data = updates.model_dump(exclude_unset=True)
    if data.get("check_out") is not None:
        record = await repo.get(record_id)
        if data["check_out"] < record.check_in:
            raise ValidationError("checkOut must not be before checkIn", field="checkOut")
    record = await repo.update(record_id, data)
    await db.commit()
    await db.refresh(record)
    return record
