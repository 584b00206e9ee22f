from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney

PaymentMode = Literal["cash", "upi", "card"]
BillStatus = Literal["completed", "pending", "cancelled"]


class BillLineItem(APIModel):
    item_id: Optional[str] = None
    name: str = Field(min_length=1)
    quantity: int = Field(gt=0)
    price: NonNegativeMoney
    # Recomputed server side as price * quantity
    total: Optional[Money] = None


class BillCreate(APIModel):
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    items: List[BillLineItem] = Field(min_length=1)
    total_amount: Optional[NonNegativeMoney] = None
    discount: NonNegativeMoney = Decimal("0")
    extra_charges: NonNegativeMoney = Decimal("0")
    payment_mode: PaymentMode = "cash"
    status: BillStatus = "completed"


class BillStatusUpdate(APIModel):
    status: BillStatus


class BillRead(APIModel):
    id: str
    vendor_id: int
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    items: List[BillLineItem]
    total_amount: Money
    discount: Money
    extra_charges: Money
    final_amount: Money
    payment_mode: str
    status: str
    whatsapp_message_id: Optional[str] = None
    created_at: datetime
