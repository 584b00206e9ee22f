from datetime import datetime
from typing import Optional

from pydantic import Field

from vendorhub.core.constants import DEFAULT_MIN_STOCK_LEVEL
from vendorhub.schemas.base import APIModel


class InventoryCreate(APIModel):
    item_name: str = Field(min_length=1)
    unit: str = Field(min_length=1)
    menu_item_id: Optional[str] = None
    current_stock: int = Field(default=0, ge=0)
    min_stock_level: int = Field(default=DEFAULT_MIN_STOCK_LEVEL, ge=0)


class InventoryUpdate(APIModel):
    item_name: Optional[str] = Field(default=None, min_length=1)
    unit: Optional[str] = Field(default=None, min_length=1)
    menu_item_id: Optional[str] = None
    current_stock: Optional[int] = Field(default=None, ge=0)
    min_stock_level: Optional[int] = Field(default=None, ge=0)


class InventoryRead(APIModel):
    id: str
    vendor_id: int
    menu_item_id: Optional[str] = None
    item_name: str
    current_stock: int
    min_stock_level: int
    unit: str
    updated_at: datetime
