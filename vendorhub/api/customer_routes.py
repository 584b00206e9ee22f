from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_active_tenant
from vendorhub.crud import customer as customer_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.schemas.customer import CustomerCreate, CustomerUpdate, CustomerWithLoyalty

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=List[CustomerWithLoyalty])
async def list_customers(
    search: Optional[str] = None,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await customer_crud.list_customers(db, tenant, search)


@router.get("/{customer_id}", response_model=CustomerWithLoyalty)
async def get_customer(
    customer_id: str,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await customer_crud.get_customer(db, tenant, customer_id)


@router.post("", response_model=CustomerWithLoyalty, status_code=status.HTTP_201_CREATED)
async def create_customer(
    payload: CustomerCreate,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await customer_crud.create_customer(db, tenant, payload)


@router.patch("/{customer_id}", response_model=CustomerWithLoyalty)
async def update_customer(
    customer_id: str,
    updates: CustomerUpdate,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    return await customer_crud.update_customer(db, tenant, customer_id, updates)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    tenant: TenantContext = Depends(require_active_tenant),
    db: AsyncSession = Depends(get_db),
):
    await customer_crud.delete_customer(db, tenant, customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
