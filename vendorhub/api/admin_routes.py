"""
Admin surface. Every route depends on ``require_admin``, which answers 403
for non-admin profiles before any cross-tenant data is read.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_admin
from vendorhub.crud import contact as contact_crud
from vendorhub.crud import profile as profile_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.bill import Bill
from vendorhub.models.profile import OnboardingStatus
from vendorhub.schemas.contact import ContactQueryRead, ContactQueryUpdate
from vendorhub.schemas.profile import (
    AdminStats,
    ProfileRead,
    StatusChange,
    VendorFeaturesRead,
    VendorFeaturesUpdate,
)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/profiles", response_model=List[ProfileRead])
async def list_profiles(
    status: Optional[OnboardingStatus] = None,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.list_profiles(db, status)


@router.get("/profiles/{profile_id}", response_model=ProfileRead)
async def get_profile(
    profile_id: int,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.get_profile(db, profile_id)


@router.post("/profiles/{profile_id}/status", response_model=ProfileRead)
async def change_profile_status(
    profile_id: int,
    change: StatusChange,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await profile_crud.change_status(db, profile_id, change.status, admin)


@router.get("/profiles/{profile_id}/features", response_model=VendorFeaturesRead)
async def get_profile_features(
    profile_id: int,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await profile_crud.get_profile(db, profile_id)
    return await profile_crud.get_features(db, profile_id)


@router.put("/profiles/{profile_id}/features", response_model=VendorFeaturesRead)
async def update_profile_features(
    profile_id: int,
    updates: VendorFeaturesUpdate,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await profile_crud.get_profile(db, profile_id)
    return await profile_crud.update_features(db, profile_id, updates, admin.vendor_id)


@router.get("/stats", response_model=AdminStats)
async def stats(
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    counts = await profile_crud.count_by_status(db)
    total_bills = (await db.execute(select(func.count()).select_from(Bill))).scalar_one()
    new_queries = len(await contact_crud.list_queries(db, status="new"))
    return {
        "total_vendors": sum(counts.values()),
        "pending_vendors": counts[OnboardingStatus.PENDING.value],
        "active_vendors": counts[OnboardingStatus.ACTIVE.value],
        "rejected_vendors": counts[OnboardingStatus.REJECTED.value],
        "total_bills": total_bills,
        "new_contact_queries": new_queries,
    }


@router.get("/contact-queries", response_model=List[ContactQueryRead])
async def list_contact_queries(
    status: Optional[str] = None,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await contact_crud.list_queries(db, status)


@router.patch("/contact-queries/{query_id}", response_model=ContactQueryRead)
async def update_contact_query(
    query_id: str,
    updates: ContactQueryUpdate,
    admin: TenantContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await contact_crud.update_query(db, query_id, updates)
