from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from vendorhub.schemas.base import APIModel


class ContactQueryCreate(APIModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    business_name: Optional[str] = None
    message: str = Field(min_length=1)


class ContactQueryUpdate(APIModel):
    status: Optional[Literal["new", "read", "replied", "closed"]] = None
    admin_notes: Optional[str] = None


class ContactQueryRead(APIModel):
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    business_name: Optional[str] = None
    message: str
    status: str
    admin_notes: Optional[str] = None
    created_at: datetime
