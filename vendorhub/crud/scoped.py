"""
Tenant-scoped data access.

Every query against an owned table goes through ``TenantRepository``, which
cannot be built without a ``TenantContext``. Reads are filtered by
``vendor_id``, creates are stamped with the caller's vendor id, and updates
and deletes load the row through the same scoped lookup first, so a row of
another tenant is indistinguishable from a missing one.

Repositories only flush. The crud/service function handling the request owns
the single commit.
"""
import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.errors import NotFoundError, ValidationError
from vendorhub.models.customer import Customer, LoyaltyPoint
from vendorhub.models.profile import OnboardingStatus, Profile

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Server-assigned columns that client payloads can never set
PROTECTED_FIELDS = frozenset({"id", "vendor_id", "created_at"})


@dataclass(frozen=True)
class TenantContext:
    vendor_id: int
    user_id: UUID
    is_admin: bool
    onboarding_status: OnboardingStatus

    @classmethod
    def from_profile(cls, profile: Profile) -> "TenantContext":
        return cls(
            vendor_id=profile.id,
            user_id=profile.user_id,
            is_admin=bool(profile.is_admin),
            onboarding_status=OnboardingStatus(profile.onboarding_status),
        )

    @property
    def is_active(self) -> bool:
        return self.onboarding_status == OnboardingStatus.ACTIVE


def _writable(data: Mapping[str, Any]) -> dict:
    return {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}


class TenantRepository(Generic[ModelT]):
    def __init__(self, db: AsyncSession, model: Type[ModelT], tenant: TenantContext):
        if not isinstance(tenant, TenantContext):
            raise TypeError("TenantRepository requires a TenantContext")
        if not hasattr(model, "vendor_id"):
            raise TypeError(f"{model.__name__} is not a tenant-owned model")
        self.db = db
        self.model = model
        self.tenant = tenant

    @property
    def label(self) -> str:
        return self.model.__name__

    def _scoped(self):
        return select(self.model).where(self.model.vendor_id == self.tenant.vendor_id)

    async def list(self, *criteria, order_by=None, limit: Optional[int] = None, options: Iterable = ()) -> List[ModelT]:
        query = self._scoped().where(*criteria)
        if options:
            query = query.options(*options).execution_options(populate_existing=True)
        if order_by is not None:
            query = query.order_by(order_by)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self, *criteria) -> int:
        query = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.vendor_id == self.tenant.vendor_id, *criteria)
        )
        result = await self.db.execute(query)
        return int(result.scalar_one())

    async def find(self, entity_id: Any, options: Iterable = ()) -> Optional[ModelT]:
        query = self._scoped().where(self.model.id == entity_id)
        if options:
            query = query.options(*options).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get(self, entity_id: Any, options: Iterable = ()) -> ModelT:
        entity = await self.find(entity_id, options=options)
        if entity is None:
            raise NotFoundError(f"{self.label} not found")
        return entity

    async def create(self, data: Mapping[str, Any]) -> ModelT:
        columns = self.model.__table__.c
        # An explicit None would bypass the column default
        values = {
            k: v
            for k, v in _writable(data).items()
            if not (v is None and k in columns and columns[k].default is not None)
        }
        self._check_nulls(values)
        entity = self.model(**values, vendor_id=self.tenant.vendor_id)
        self.db.add(entity)
        await self.db.flush()
        log.debug("created %s id=%s vendor=%s", self.label, entity.id, self.tenant.vendor_id)
        return entity

    def _check_nulls(self, values: Mapping[str, Any]) -> None:
        columns = self.model.__table__.c
        for key, value in values.items():
            if value is None and key in columns and not columns[key].nullable:
                raise ValidationError(f"{key} cannot be null", field=key)

    async def update(self, entity_id: Any, data: Mapping[str, Any]) -> ModelT:
        values = _writable(data)
        self._check_nulls(values)
        entity = await self.get(entity_id)
        for key, value in values.items():
            setattr(entity, key, value)
        await self.db.flush()
        return entity

    async def delete(self, entity_id: Any) -> None:
        entity = await self.get(entity_id)
        await self.db.delete(entity)
        await self.db.flush()


class LoyaltyPointRepository:
    """LoyaltyPoint has no vendor column; scope is checked through Customer."""

    def __init__(self, db: AsyncSession, tenant: TenantContext):
        if not isinstance(tenant, TenantContext):
            raise TypeError("LoyaltyPointRepository requires a TenantContext")
        self.db = db
        self.tenant = tenant

    async def for_customer(self, customer_id: str) -> Optional[LoyaltyPoint]:
        result = await self.db.execute(
            select(LoyaltyPoint)
            .join(Customer, Customer.id == LoyaltyPoint.customer_id)
            .where(LoyaltyPoint.customer_id == customer_id, Customer.vendor_id == self.tenant.vendor_id)
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, customer_id: str) -> LoyaltyPoint:
        # Validates the parent first so a foreign customer id is a 404
        await TenantRepository(self.db, Customer, self.tenant).get(customer_id)
        points = await self.for_customer(customer_id)
        if points is None:
            points = LoyaltyPoint(customer_id=customer_id, points=0, lifetime_points=0, tier="bronze")
            self.db.add(points)
            await self.db.flush()
        return points
