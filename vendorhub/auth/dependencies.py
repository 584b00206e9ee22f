"""
Request identity and gates.

The authenticated subject is resolved to a ``TenantContext`` once per request
and handed to routes as an explicit argument. Routes never read identity from
``request.state`` or any other ambient place.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.routes import current_active_user
from vendorhub.core.errors import ForbiddenError, NotApprovedError
from vendorhub.crud import profile as profile_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.profile import Profile
from vendorhub.models.user import User


async def get_current_profile(
    user: User = Depends(current_active_user),
    db: AsyncSession = Depends(get_db),
) -> Profile:
    return await profile_crud.get_or_create_for_user(db, user)


async def get_tenant_context(profile: Profile = Depends(get_current_profile)) -> TenantContext:
    return TenantContext.from_profile(profile)


async def require_active_tenant(tenant: TenantContext = Depends(get_tenant_context)) -> TenantContext:
    """Gate for every tenant-data endpoint (everything but the profile itself)."""
    if not tenant.is_active:
        raise NotApprovedError(tenant.onboarding_status.value)
    return tenant


async def require_admin(tenant: TenantContext = Depends(get_tenant_context)) -> TenantContext:
    if not tenant.is_admin:
        raise ForbiddenError("Admin access only")
    return tenant
