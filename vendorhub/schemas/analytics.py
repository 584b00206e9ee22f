from typing import List, Optional

from vendorhub.schemas.base import APIModel


class DailySales(APIModel):
    date: str
    amount: float


class TopItem(APIModel):
    name: str
    quantity: int


class DashboardRead(APIModel):
    total_sales: float
    total_orders: int
    total_customers: int
    pending_table_orders: int
    active_table_orders: int
    recent_sales: List[DailySales]
    top_items: List[TopItem]
    # None when the preceding window has no activity
    sales_growth: Optional[float] = None
    orders_growth: Optional[float] = None
    customers_growth: Optional[float] = None
    overall_growth: Optional[float] = None
