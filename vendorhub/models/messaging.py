from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin


class CustomerMessage(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "customer_messages"

    type = Column(String, nullable=False)  # promotional, follow_up, reminder, announcement, automated
    content = Column(Text, nullable=False)
    recipient_type = Column(String, default="all", nullable=False)  # all, selected, segment
    recipient_ids = Column(JSON, nullable=True)
    status = Column(String, default="scheduled", nullable=False)  # scheduled, sent, failed
    scheduled_for = Column(DateTime, nullable=True)
    sent_at = Column(DateTime, nullable=True)
    delivered_count = Column(Integer, default=0, nullable=False)
    failed_count = Column(Integer, default=0, nullable=False)


class CustomerAutomation(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "customer_automations"

    name = Column(String, nullable=False)
    trigger = Column(String, nullable=False)  # new_customer, after_purchase, days_inactive, nth_visit, birthday
    trigger_value = Column(String, nullable=True)
    message_template = Column(Text, nullable=False)
    enabled = Column(Boolean, default=True, nullable=False)
    sent_count = Column(Integer, default=0, nullable=False)
