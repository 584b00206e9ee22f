from sqlalchemy import Boolean, Column, Integer, Numeric, String

from vendorhub.models.base import Base, VendorOwnedMixin


class LoyaltyReward(VendorOwnedMixin, Base):
    __tablename__ = "loyalty_rewards"

    name = Column(String, nullable=False)
    points_required = Column(Integer, nullable=False)
    reward_value = Column(Numeric(12, 2), nullable=True)
    reward_type = Column(String, default="discount", nullable=False)  # discount, free_item
    is_active = Column(Boolean, default=True, nullable=False)
