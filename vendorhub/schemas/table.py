from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney
from vendorhub.schemas.bill import BillLineItem

TableOrderStatus = Literal["pending", "confirmed", "preparing", "ready", "completed", "cancelled"]


class TableCreate(APIModel):
    table_number: str = Field(min_length=1)
    qr_code: Optional[str] = None
    is_active: bool = True


class TableUpdate(APIModel):
    table_number: Optional[str] = Field(default=None, min_length=1)
    qr_code: Optional[str] = None
    is_active: Optional[bool] = None


class TableRead(APIModel):
    id: str
    vendor_id: int
    table_number: str
    qr_code: Optional[str] = None
    is_active: bool
    created_at: datetime


class TableOrderCreate(APIModel):
    table_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    items: List[BillLineItem] = Field(min_length=1)
    total_amount: Optional[NonNegativeMoney] = None
    order_source: Literal["table_qr", "online", "phone"] = "table_qr"
    notes: Optional[str] = None


class TableOrderStatusUpdate(APIModel):
    status: TableOrderStatus


class TableOrderRead(APIModel):
    id: str
    vendor_id: int
    table_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    items: List[BillLineItem]
    total_amount: Money
    status: str
    order_source: str
    notes: Optional[str] = None
    created_at: datetime
