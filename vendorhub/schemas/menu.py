from typing import Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney


class MenuItemCreate(APIModel):
    name: str = Field(min_length=1)
    price: NonNegativeMoney
    size: Optional[str] = None
    category: Optional[str] = None
    is_available: bool = True
    description: Optional[str] = None
    image_url: Optional[str] = None
    store_id: Optional[str] = None


class MenuItemUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[NonNegativeMoney] = None
    size: Optional[str] = None
    category: Optional[str] = None
    is_available: Optional[bool] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    store_id: Optional[str] = None


class MenuItemRead(APIModel):
    id: str
    vendor_id: int
    name: str
    price: Money
    size: Optional[str] = None
    category: Optional[str] = None
    is_available: bool
    description: Optional[str] = None
    image_url: Optional[str] = None
    store_id: Optional[str] = None
