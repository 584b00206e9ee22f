import enum

from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from fastapi_users_db_sqlalchemy.generics import GUID

from vendorhub.models.base import Base
from vendorhub.utils.time_windows import utcnow


class OnboardingStatus(str, enum.Enum):
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"


class Profile(Base):
    """One vendor (tenant). Owned rows reference ``profiles.id`` as vendor_id."""

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True)
    user_id = Column(GUID, ForeignKey("user.id", ondelete="CASCADE"), unique=True, nullable=False)

    business_name = Column(String, nullable=False)
    owner_name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    pincode = Column(String, nullable=True)
    business_type = Column(String, nullable=True)  # chai_stall, salon, restaurant ...
    gst_number = Column(String, nullable=True)
    upi_id = Column(String, nullable=True)
    whatsapp_enabled = Column(Boolean, default=False, nullable=False)
    whatsapp_number = Column(String, nullable=True)
    google_review_link = Column(String, nullable=True)

    onboarding_status = Column(
        Enum(
            OnboardingStatus,
            name="onboarding_status",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        default=OnboardingStatus.PENDING,
        nullable=False,
    )
    is_admin = Column(Boolean, default=False, nullable=False)

    preferred_language = Column(String, default="hinglish", nullable=False)
    subscription_plan = Column(String, default="starter", nullable=False)  # starter, growth, pro
    dashboard_config = Column(JSON, nullable=True)
    stores = Column(JSON, nullable=True)  # [{id, name, type, description?}]
    promo_video_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    features = relationship(
        "VendorFeatures",
        back_populates="profile",
        uselist=False,
        cascade="all, delete-orphan",
        foreign_keys="VendorFeatures.vendor_id",
    )
