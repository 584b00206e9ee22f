from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_active_tenant
from vendorhub.core.constants import FEATURE_KEYS
from vendorhub.core.errors import FeatureDisabledError
from vendorhub.crud import profile as profile_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db


async def is_feature_enabled(db: AsyncSession, vendor_id: int, feature: str) -> bool:
    features = await profile_crud.ensure_features(db, vendor_id)
    return bool(getattr(features, feature))


def require_feature(feature: str):
    """Approval gate plus the vendor's admin-controlled toggle for ``feature``."""
    if feature not in FEATURE_KEYS:
        raise ValueError(f"Unknown feature: {feature}")

    async def _dep(
        tenant: TenantContext = Depends(require_active_tenant),
        db: AsyncSession = Depends(get_db),
    ) -> TenantContext:
        if not await is_feature_enabled(db, tenant.vendor_id, feature):
            raise FeatureDisabledError(feature)
        return tenant

    return _dep
