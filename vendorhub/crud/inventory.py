from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.inventory import InventoryItem
from vendorhub.models.menu_item import MenuItem
from vendorhub.schemas.inventory import InventoryCreate, InventoryUpdate


async def _check_menu_item(db: AsyncSession, tenant: TenantContext, menu_item_id: Optional[str]) -> None:
    # Linking to another tenant's menu item is a 404, same as a missing one
    if menu_item_id:
        await TenantRepository(db, MenuItem, tenant).get(menu_item_id)


async def list_items(db: AsyncSession, tenant: TenantContext) -> List[InventoryItem]:
    return await TenantRepository(db, InventoryItem, tenant).list(order_by=InventoryItem.item_name)


async def low_stock(db: AsyncSession, tenant: TenantContext) -> List[InventoryItem]:
    return await TenantRepository(db, InventoryItem, tenant).list(
        InventoryItem.current_stock <= InventoryItem.min_stock_level,
        order_by=InventoryItem.current_stock,
    )


async def get_item(db: AsyncSession, tenant: TenantContext, item_id: str) -> InventoryItem:
    return await TenantRepository(db, InventoryItem, tenant).get(item_id)


async def create_item(db: AsyncSession, tenant: TenantContext, payload: InventoryCreate) -> InventoryItem:
    await _check_menu_item(db, tenant, payload.menu_item_id)
    item = await TenantRepository(db, InventoryItem, tenant).create(payload.model_dump())
    await db.commit()
    await db.refresh(item)
    return item


async def update_item(db: AsyncSession, tenant: TenantContext, item_id: str, updates: InventoryUpdate) -> InventoryItem:
    data = updates.model_dump(exclude_unset=True)
    await _check_menu_item(db, tenant, data.get("menu_item_id"))
    item = await TenantRepository(db, InventoryItem, tenant).update(item_id, data)
    await db.commit()
    await db.refresh(item)
    return item


async def delete_item(db: AsyncSession, tenant: TenantContext, item_id: str) -> None:
    await TenantRepository(db, InventoryItem, tenant).delete(item_id)
    await db.commit()
