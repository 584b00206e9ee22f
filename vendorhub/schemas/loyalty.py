from typing import Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney


class LoyaltyRewardCreate(APIModel):
    name: str = Field(min_length=1)
    points_required: int = Field(gt=0)
    reward_value: Optional[NonNegativeMoney] = None
    reward_type: Literal["discount", "free_item"] = "discount"
    is_active: bool = True


class LoyaltyRewardUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    points_required: Optional[int] = Field(default=None, gt=0)
    reward_value: Optional[NonNegativeMoney] = None
    reward_type: Optional[Literal["discount", "free_item"]] = None
    is_active: Optional[bool] = None


class LoyaltyRewardRead(APIModel):
    id: str
    vendor_id: int
    name: str
    points_required: int
    reward_value: Optional[Money] = None
    reward_type: str
    is_active: bool


class RedeemRequest(APIModel):
    reward_id: str
