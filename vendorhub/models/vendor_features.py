from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from vendorhub.models.base import Base
from vendorhub.utils.time_windows import utcnow


class VendorFeatures(Base):
    """Admin-controlled feature toggles, one row per vendor."""

    __tablename__ = "vendor_features"

    id = Column(Integer, primary_key=True)
    vendor_id = Column(Integer, ForeignKey("profiles.id", ondelete="CASCADE"), unique=True, nullable=False)

    whatsapp_billing = Column(Boolean, default=True, nullable=False)
    loyalty = Column(Boolean, default=True, nullable=False)
    inventory = Column(Boolean, default=True, nullable=False)
    table_qr = Column(Boolean, default=True, nullable=False)
    online_ordering = Column(Boolean, default=True, nullable=False)
    kitchen_display = Column(Boolean, default=True, nullable=False)
    staff_management = Column(Boolean, default=True, nullable=False)
    face_attendance = Column(Boolean, default=True, nullable=False)
    expense_tracking = Column(Boolean, default=True, nullable=False)
    analytics = Column(Boolean, default=True, nullable=False)
    messaging = Column(Boolean, default=True, nullable=False)
    ai_support = Column(Boolean, default=True, nullable=False)

    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    updated_by = Column(Integer, ForeignKey("profiles.id"), nullable=True)  # admin profile

    profile = relationship("Profile", back_populates="features", foreign_keys=[vendor_id])
