from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.crud import contact as contact_crud
from vendorhub.db import get_db
from vendorhub.schemas.base import MessageRead
from vendorhub.schemas.contact import ContactQueryCreate

router = APIRouter(prefix="/api", tags=["public"])


@router.post("/contact", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def submit_contact_query(payload: ContactQueryCreate, db: AsyncSession = Depends(get_db)):
    await contact_crud.create_query(db, payload)
    return {"message": "Thanks! We will get back to you soon."}
