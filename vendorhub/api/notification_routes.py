from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_active_tenant
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.db import get_db
from vendorhub.models.notification import Notification
from vendorhub.schemas.base import MessageRead
from vendorhub.schemas.notification import NotificationRead

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=List[NotificationRead])
async def list_notifications(
    unread_only: bool = False,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    criteria = [Notification.is_read.is_(False)] if unread_only else []
    return await TenantRepository(db, Notification, tenant).list(*criteria, order_by=Notification.created_at.desc())


@router.patch("/{notification_id}/read", response_model=NotificationRead)
async def mark_read(
    notification_id: str,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    notification = await TenantRepository(db, Notification, tenant).update(notification_id, {"is_read": True})
    await db.commit()
    await db.refresh(notification)
    return notification


@router.post("/read-all", response_model=MessageRead)
async def mark_all_read(
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    await db.execute(
        update(Notification)
        .where(Notification.vendor_id == tenant.vendor_id, Notification.is_read.is_(False))
        .values(is_read=True)
        .execution_options(synchronize_session="fetch")
    )
    await db.commit()
    return {"message": "All notifications marked as read"}
