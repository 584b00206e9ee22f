from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.customer import Customer
from vendorhub.schemas.customer import CustomerCreate, CustomerUpdate


def _repo(db: AsyncSession, tenant: TenantContext) -> TenantRepository[Customer]:
    return TenantRepository(db, Customer, tenant)


async def list_customers(db: AsyncSession, tenant: TenantContext, search: Optional[str] = None) -> List[Customer]:
    criteria = []
    if search:
        term = f"%{search.strip()}%"
        criteria.append(or_(Customer.name.ilike(term), Customer.phone.ilike(term)))
    return await _repo(db, tenant).list(
        *criteria,
        order_by=Customer.last_visit.desc(),
        options=[selectinload(Customer.loyalty)],
    )


async def get_customer(db: AsyncSession, tenant: TenantContext, customer_id: str) -> Customer:
    return await _repo(db, tenant).get(customer_id, options=[selectinload(Customer.loyalty)])


async def create_customer(db: AsyncSession, tenant: TenantContext, payload: CustomerCreate) -> Customer:
    customer = await _repo(db, tenant).create(payload.model_dump())
    await db.commit()
    return await get_customer(db, tenant, customer.id)


async def update_customer(db: AsyncSession, tenant: TenantContext, customer_id: str, updates: CustomerUpdate) -> Customer:
    await _repo(db, tenant).update(customer_id, updates.model_dump(exclude_unset=True))
    await db.commit()
    return await get_customer(db, tenant, customer_id)


async def delete_customer(db: AsyncSession, tenant: TenantContext, customer_id: str) -> None:
    await _repo(db, tenant).delete(customer_id)
    await db.commit()
