from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin
from vendorhub.utils.time_windows import utcnow


class Staff(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "staff"

    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    role = Column(String, nullable=False)  # manager, chef, waiter, delivery, cashier, helper
    salary = Column(Numeric(12, 2), nullable=True)
    join_date = Column(DateTime, default=utcnow, nullable=True)
    status = Column(String, default="active", nullable=False)
    emergency_contact = Column(String, nullable=True)
    address = Column(String, nullable=True)
    photo_url = Column(String, nullable=True)

    attendance = relationship("StaffAttendance", back_populates="staff", cascade="all, delete-orphan")


class StaffAttendance(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "staff_attendance"

    staff_id = Column(String, ForeignKey("staff.id", ondelete="CASCADE"), nullable=False)
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=True)
    status = Column(String, default="present", nullable=False)  # present, absent, half_day, late
    manual_override = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False)

    staff = relationship("Staff", back_populates="attendance")
