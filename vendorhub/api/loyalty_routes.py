from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.api.factory import build_scoped_router
from vendorhub.auth.module_gates import require_feature
from vendorhub.crud import loyalty as loyalty_crud
from vendorhub.crud.scoped import TenantContext
from vendorhub.db import get_db
from vendorhub.models.loyalty import LoyaltyReward
from vendorhub.schemas.customer import LoyaltyPointRead
from vendorhub.schemas.loyalty import LoyaltyRewardCreate, LoyaltyRewardRead, LoyaltyRewardUpdate, RedeemRequest

loyalty_gate = require_feature("loyalty")

rewards_router = build_scoped_router(
    model=LoyaltyReward,
    create_schema=LoyaltyRewardCreate,
    update_schema=LoyaltyRewardUpdate,
    read_schema=LoyaltyRewardRead,
    prefix="/api/loyalty/rewards",
    tags=["loyalty"],
    gate=loyalty_gate,
    order_by=lambda m: m.points_required,
)

points_router = APIRouter(prefix="/api/loyalty/customers", tags=["loyalty"])


@points_router.get("/{customer_id}", response_model=LoyaltyPointRead)
async def read_customer_points(
    customer_id: str,
    tenant: TenantContext = Depends(loyalty_gate),
    db: AsyncSession = Depends(get_db),
):
    return await loyalty_crud.points_for_customer(db, tenant, customer_id)


@points_router.post("/{customer_id}/redeem", response_model=LoyaltyPointRead)
async def redeem_reward(
    customer_id: str,
    payload: RedeemRequest,
    tenant: TenantContext = Depends(loyalty_gate),
    db: AsyncSession = Depends(get_db),
):
    return await loyalty_crud.redeem_reward(db, tenant, customer_id, payload.reward_id)
