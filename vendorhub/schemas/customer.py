from datetime import datetime
from typing import Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money


class CustomerCreate(APIModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    gender: Optional[str] = None
    favorite_item: Optional[str] = None
    opted_out: bool = False


class CustomerUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    gender: Optional[str] = None
    favorite_item: Optional[str] = None
    opted_out: Optional[bool] = None


class LoyaltyPointRead(APIModel):
    customer_id: str
    points: int
    lifetime_points: int
    tier: str


class CustomerRead(APIModel):
    id: str
    vendor_id: int
    name: str
    phone: str
    gender: Optional[str] = None
    visit_count: int
    total_spend: Money
    favorite_item: Optional[str] = None
    opted_out: bool
    last_visit: Optional[datetime] = None
    created_at: datetime


class CustomerWithLoyalty(CustomerRead):
    loyalty: Optional[LoyaltyPointRead] = None
