from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin, new_id
from vendorhub.utils.time_windows import utcnow


class Customer(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "customers"

    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    gender = Column(String, nullable=True)  # male, female, other
    visit_count = Column(Integer, default=0, nullable=False)
    total_spend = Column(Numeric(12, 2), default=0, nullable=False)
    favorite_item = Column(String, nullable=True)
    opted_out = Column(Boolean, default=False, nullable=False)
    last_visit = Column(DateTime, default=utcnow, nullable=True)

    loyalty = relationship("LoyaltyPoint", back_populates="customer", uselist=False, cascade="all, delete-orphan")


class LoyaltyPoint(Base):
    """Child of Customer; tenant scope is inherited through ``customer_id``."""

    __tablename__ = "loyalty_points"

    id = Column(String, primary_key=True, default=new_id)
    customer_id = Column(String, ForeignKey("customers.id", ondelete="CASCADE"), unique=True, nullable=False)
    points = Column(Integer, default=0, nullable=False)
    lifetime_points = Column(Integer, default=0, nullable=False)
    tier = Column(String, default="bronze", nullable=False)  # bronze, silver, gold, platinum
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    customer = relationship("Customer", back_populates="loyalty")
