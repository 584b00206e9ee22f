from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.module_gates import require_feature
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.schemas.analytics import DashboardRead
from vendorhub.services import analytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/dashboard", response_model=DashboardRead)
async def dashboard(
    days: int = Query(default=30, ge=1, le=365),
    tenant: TenantContext = Depends(require_feature("analytics")),
    db: AsyncSession = Depends(get_db),
):
    return await analytics.dashboard(db, tenant, days)
