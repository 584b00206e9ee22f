import logging
from typing import Callable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from vendorhub.core.errors import ValidationError
from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.customer import Customer
from vendorhub.models.messaging import CustomerMessage
from vendorhub.schemas.messaging import CustomerMessageCreate
from vendorhub.utils import twilio_client
from vendorhub.utils.time_windows import utcnow

log = logging.getLogger(__name__)

Sender = Callable[[str, str], Optional[str]]


async def create_message(db: AsyncSession, tenant: TenantContext, payload: CustomerMessageCreate) -> CustomerMessage:
    if payload.recipient_type == "selected" and not payload.recipient_ids:
        raise ValidationError("recipientIds is required for selected recipients", field="recipientIds")
    message = await TenantRepository(db, CustomerMessage, tenant).create(payload.model_dump())
    await db.commit()
    await db.refresh(message)
    return message


async def resolve_recipients(db: AsyncSession, tenant: TenantContext, message: CustomerMessage) -> List[Customer]:
    customers = TenantRepository(db, Customer, tenant)
    criteria = [Customer.opted_out.is_(False)]
    if message.recipient_type == "selected":
        # Ids of other tenants' customers simply never match the scoped query
        criteria.append(Customer.id.in_(message.recipient_ids or []))
    return await customers.list(*criteria, order_by=Customer.created_at)


async def send_message(
    db: AsyncSession,
    tenant: TenantContext,
    message_id: str,
    sender: Optional[Sender] = None,
) -> CustomerMessage:
    sender = sender or twilio_client.send_whatsapp
    message = await TenantRepository(db, CustomerMessage, tenant).get(message_id)
    if message.status == "sent":
        raise ValidationError("Message already sent", field="status")

    delivered = failed = 0
    for customer in await resolve_recipients(db, tenant, message):
        # Twilio client is synchronous
        if await run_in_threadpool(sender, customer.phone, message.content):
            delivered += 1
        else:
            failed += 1

    message.delivered_count = delivered
    message.failed_count = failed
    message.status = "sent" if delivered or not failed else "failed"
    message.sent_at = utcnow()
    await db.commit()
    await db.refresh(message)
    log.info("message %s dispatched: vendor=%s delivered=%s failed=%s", message.id, tenant.vendor_id, delivered, failed)
    return message
