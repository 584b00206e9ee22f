from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.api.factory import build_scoped_router
from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import expense as expense_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.expense import Expense
from vendorhub.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseSummary, ExpenseUpdate

expense_gate = require_feature("expense_tracking")

# Registered before the CRUD router so /summary is not read as an expense id
summary_router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@summary_router.get("/summary", response_model=ExpenseSummary)
async def expense_summary(
    days: int = Query(default=30, ge=1, le=365),
    tenant: TenantContext = Depends(expense_gate),
    db: AsyncSession = Depends(get_db),
):
    return await expense_crud.summary(db, tenant, days)


expenses_router = build_scoped_router(
    model=Expense,
    create_schema=ExpenseCreate,
    update_schema=ExpenseUpdate,
    read_schema=ExpenseRead,
    prefix="/api/expenses",
    tags=["expenses"],
    gate=expense_gate,
    order_by=lambda m: m.expense_date.desc(),
)
