from sqlalchemy import JSON, Column, ForeignKey, Numeric, String

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin


class Bill(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "bills"

    customer_id = Column(String, ForeignKey("customers.id", ondelete="SET NULL"), nullable=True)
    customer_name = Column(String, nullable=True)  # snapshot at billing time

    # [{itemId, name, quantity, price, total}], denormalized at write time
    items = Column(JSON, nullable=False)

    total_amount = Column(Numeric(12, 2), nullable=False)
    discount = Column(Numeric(12, 2), default=0, nullable=False)
    extra_charges = Column(Numeric(12, 2), default=0, nullable=False)
    final_amount = Column(Numeric(12, 2), nullable=False)

    payment_mode = Column(String, default="cash", nullable=False)  # cash, upi, card
    status = Column(String, default="completed", nullable=False)  # completed, pending, cancelled
    whatsapp_message_id = Column(String, nullable=True)
