import logging

from sqlalchemy.ext.asyncio import AsyncSession

from vendorhub.crud.scoped import LoyaltyPointRepository, TenantContext, TenantRepository
from vendorhub.models.customer import Customer, LoyaltyPoint
from vendorhub.models.loyalty import LoyaltyReward
from vendorhub.services import loyalty

log = logging.getLogger(__name__)


async def points_for_customer(db: AsyncSession, tenant: TenantContext, customer_id: str) -> LoyaltyPoint:
    await TenantRepository(db, Customer, tenant).get(customer_id)
    points = await LoyaltyPointRepository(db, tenant).for_customer(customer_id)
    if points is None:
        # Not added to the session; a customer with no history reads as zero
        points = LoyaltyPoint(customer_id=customer_id, points=0, lifetime_points=0, tier="bronze")
    return points


async def redeem_reward(db: AsyncSession, tenant: TenantContext, customer_id: str, reward_id: str) -> LoyaltyPoint:
    points = await LoyaltyPointRepository(db, tenant).get_or_create(customer_id)
    reward = await TenantRepository(db, LoyaltyReward, tenant).get(reward_id)
    loyalty.redeem(points, reward)
    await db.commit()
    await db.refresh(points)
    log.info("reward redeemed: vendor=%s customer=%s reward=%s", tenant.vendor_id, customer_id, reward_id)
    return points
