from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.core.errors import NotFoundError
from vendorhub.models.contact_query import ContactQuery
from vendorhub.schemas.contact import ContactQueryCreate, ContactQueryUpdate


async def create_query(db: AsyncSession, payload: ContactQueryCreate) -> ContactQuery:
    query = ContactQuery(**payload.model_dump())
    db.add(query)
    await db.commit()
    await db.refresh(query)
    return query


async def list_queries(db: AsyncSession, status: Optional[str] = None) -> List[ContactQuery]:
    stmt = select(ContactQuery).order_by(ContactQuery.created_at.desc())
    if status:
        stmt = stmt.where(ContactQuery.status == status)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_query(db: AsyncSession, query_id: str, updates: ContactQueryUpdate) -> ContactQuery:
    query = await db.get(ContactQuery, query_id)
    if not query:
        raise NotFoundError("Contact query not found")
    for key, value in updates.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(query, key, value)
    await db.commit()
    await db.refresh(query)
    return query
