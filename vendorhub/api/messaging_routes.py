from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.api.factory import build_scoped_router
from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import messaging as messaging_crud
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.db import get_db
from vendorhub.models.messaging import CustomerAutomation, CustomerMessage
from vendorhub.schemas.messaging import (
    CustomerAutomationCreate,
    CustomerAutomationRead,
    CustomerAutomationUpdate,
    CustomerMessageCreate,
    CustomerMessageRead,
)

messaging_gate = require_feature("messaging")

messages_router = APIRouter(prefix="/api/messages", tags=["messaging"])


@messages_router.get("", response_model=List[CustomerMessageRead])
async def list_messages(
    tenant: TenantContext = Depends(messaging_gate),
    db: AsyncSession = Depends(get_db),
):
    return await TenantRepository(db, CustomerMessage, tenant).list(order_by=CustomerMessage.created_at.desc())


@messages_router.post("", response_model=CustomerMessageRead, status_code=status.HTTP_201_CREATED)
async def create_message(
    payload: CustomerMessageCreate,
    tenant: TenantContext = Depends(messaging_gate),
    db: AsyncSession = Depends(get_db),
):
    return await messaging_crud.create_message(db, tenant, payload)


@messages_router.post("/{message_id}/send", response_model=CustomerMessageRead)
async def send_message(
    message_id: str,
    tenant: TenantContext = Depends(messaging_gate),
    db: AsyncSession = Depends(get_db),
):
    return await messaging_crud.send_message(db, tenant, message_id)


automations_router = build_scoped_router(
    model=CustomerAutomation,
    create_schema=CustomerAutomationCreate,
    update_schema=CustomerAutomationUpdate,
    read_schema=CustomerAutomationRead,
    prefix="/api/automations",
    tags=["messaging"],
    gate=messaging_gate,
    order_by=lambda m: m.created_at,
)
