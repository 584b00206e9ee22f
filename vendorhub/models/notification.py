from sqlalchemy import Boolean, Column, String, Text

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin


class Notification(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "notifications"

    title = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String, default="info", nullable=False)  # info, warning, success
    is_read = Column(Boolean, default=False, nullable=False)
    link = Column(String, nullable=True)
