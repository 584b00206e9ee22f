"""
Router factory for owned resources whose endpoints are plain CRUD.

Each generated router depends on a gate (approval and, optionally, a feature
toggle) that yields the caller's TenantContext; every handler goes through
TenantRepository with that context.
"""
from typing import Any, Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.auth.dependencies import require_active_tenant
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.db import get_db


def build_scoped_router(
    *,
    model: Type[Any],
    create_schema: Type[Any],
    read_schema: Type[Any],
    update_schema: Optional[Type[Any]] = None,
    prefix: str,
    tags: List[str],
    gate: Callable = require_active_tenant,
    order_by: Callable[[Type[Any]], Any] = None,
    deletable: bool = True,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=tags)

    @router.get("", response_model=List[read_schema])
    async def list_entities(
        tenant: TenantContext = Depends(gate),
        db: AsyncSession = Depends(get_db),
    ):
        ordering = order_by(model) if order_by else None
        return await TenantRepository(db, model, tenant).list(order_by=ordering)

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    async def create_entity(
        payload: create_schema,
        tenant: TenantContext = Depends(gate),
        db: AsyncSession = Depends(get_db),
    ):
        entity = await TenantRepository(db, model, tenant).create(payload.model_dump())
        await db.commit()
        await db.refresh(entity)
        return entity

    @router.get("/{entity_id}", response_model=read_schema)
    async def get_entity(
        entity_id: str,
        tenant: TenantContext = Depends(gate),
        db: AsyncSession = Depends(get_db),
    ):
        return await TenantRepository(db, model, tenant).get(entity_id)

    if update_schema is not None:

        @router.patch("/{entity_id}", response_model=read_schema)
        async def update_entity(
            entity_id: str,
            updates: update_schema,
            tenant: TenantContext = Depends(gate),
            db: AsyncSession = Depends(get_db),
        ):
            entity = await TenantRepository(db, model, tenant).update(entity_id, updates.model_dump(exclude_unset=True))
            await db.commit()
            await db.refresh(entity)
            return entity

    if deletable:

        @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
        async def delete_entity(
            entity_id: str,
            tenant: TenantContext = Depends(gate),
            db: AsyncSession = Depends(get_db),
        ):
            await TenantRepository(db, model, tenant).delete(entity_id)
            await db.commit()
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
