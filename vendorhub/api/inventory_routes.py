from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import inventory as inventory_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.schemas.inventory import InventoryCreate, InventoryRead, InventoryUpdate

router = APIRouter(prefix="/api/inventory", tags=["inventory"])
inventory_gate = require_feature("inventory")


@router.get("", response_model=List[InventoryRead])
async def list_inventory(
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    return await inventory_crud.list_items(db, tenant)


@router.get("/low-stock", response_model=List[InventoryRead])
async def list_low_stock(
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    return await inventory_crud.low_stock(db, tenant)


@router.get("/{item_id}", response_model=InventoryRead)
async def read_inventory_item(
    item_id: str,
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    return await inventory_crud.get_item(db, tenant, item_id)


@router.post("", response_model=InventoryRead, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    payload: InventoryCreate,
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    return await inventory_crud.create_item(db, tenant, payload)


@router.patch("/{item_id}", response_model=InventoryRead)
async def update_inventory_item(
    item_id: str,
    updates: InventoryUpdate,
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    return await inventory_crud.update_item(db, tenant, item_id, updates)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(
    item_id: str,
    tenant: TenantContext = Depends(inventory_gate),
    db: AsyncSession = Depends(get_db),
):
    await inventory_crud.delete_item(db, tenant, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
