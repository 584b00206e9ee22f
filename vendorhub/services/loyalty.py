from decimal import ROUND_FLOOR, Decimal

from vendorhub.core.constants import LOYALTY_TIERS, POINTS_PER_CURRENCY_UNIT
from vendorhub.core.errors import ValidationError
from vendorhub.models.customer import LoyaltyPoint
from vendorhub.models.loyalty import LoyaltyReward


def points_for_amount(amount: Decimal) -> int:
    if amount <= 0:
        return 0
    return int((Decimal(amount) / POINTS_PER_CURRENCY_UNIT).to_integral_value(rounding=ROUND_FLOOR))


def tier_for(lifetime_points: int) -> str:
    for threshold, tier in LOYALTY_TIERS:
        if lifetime_points >= threshold:
            return tier
    return "bronze"


def award(points: LoyaltyPoint, amount: Decimal) -> int:
    earned = points_for_amount(amount)
    points.points = (points.points or 0) + earned
    points.lifetime_points = (points.lifetime_points or 0) + earned
    points.tier = tier_for(points.lifetime_points)
    return earned


def redeem(points: LoyaltyPoint, reward: LoyaltyReward) -> None:
    if not reward.is_active:
        raise ValidationError("Reward is not active", field="rewardId")
    if (points.points or 0) < reward.points_required:
        raise ValidationError("Not enough points for this reward", field="rewardId")
    # Tier follows lifetime points, so redeeming never demotes
    points.points -= reward.points_required
