from collections import defaultdict
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.crud.scoped import TenantContext, TenantRepository
from vendorhub.models.bill import Bill
from vendorhub.models.expense import Expense
from vendorhub.utils.time_windows import trailing_windows


async def summary(db: AsyncSession, tenant: TenantContext, days: int) -> dict:
    """Expenses against sales for the trailing ``days`` window."""
    window, _ = trailing_windows(days)
    expenses = await TenantRepository(db, Expense, tenant).list(
        Expense.expense_date >= window.start,
        Expense.expense_date < window.end,
    )
    bills = await TenantRepository(db, Bill, tenant).list(
        Bill.created_at >= window.start,
        Bill.created_at < window.end,
        Bill.status != "cancelled",
    )

    by_category = defaultdict(Decimal)
    for expense in expenses:
        by_category[expense.category] += Decimal(expense.amount)
    total_expenses = sum(by_category.values(), Decimal("0"))
    total_sales = sum((Decimal(b.final_amount) for b in bills), Decimal("0"))
    return {
        "total_expenses": total_expenses,
        "total_sales": total_sales,
        "profit": total_sales - total_expenses,
        "by_category": dict(by_category),
    }
