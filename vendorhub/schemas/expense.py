from datetime import datetime
from typing import Dict, Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney

ExpenseCategory = Literal["raw_material", "salary", "rent", "utilities", "marketing", "other"]


class ExpenseCreate(APIModel):
    category: ExpenseCategory
    description: str = Field(min_length=1)
    amount: NonNegativeMoney
    payment_mode: Literal["cash", "upi", "bank_transfer"] = "cash"
    expense_date: Optional[datetime] = None
    receipt_url: Optional[str] = None


class ExpenseUpdate(APIModel):
    category: Optional[ExpenseCategory] = None
    description: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[NonNegativeMoney] = None
    payment_mode: Optional[Literal["cash", "upi", "bank_transfer"]] = None
    expense_date: Optional[datetime] = None
    receipt_url: Optional[str] = None


class ExpenseRead(APIModel):
    id: str
    vendor_id: int
    category: str
    description: str
    amount: Money
    payment_mode: str
    expense_date: datetime
    receipt_url: Optional[str] = None
    created_at: datetime


class ExpenseSummary(APIModel):
    total_expenses: Money
    total_sales: Money
    profit: Money
    by_category: Dict[str, Money]
