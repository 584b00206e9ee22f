from sqlalchemy import JSON, Boolean, Column, ForeignKey, Numeric, String, Text

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin


class Table(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "tables"

    table_number = Column(String, nullable=False)
    qr_code = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)


class TableOrder(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "table_orders"

    table_id = Column(String, ForeignKey("tables.id", ondelete="SET NULL"), nullable=True)  # null for online orders
    customer_name = Column(String, nullable=True)
    customer_phone = Column(String, nullable=True)
    items = Column(JSON, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String, default="pending", nullable=False)
    order_source = Column(String, default="table_qr", nullable=False)  # table_qr, online, phone
    notes = Column(Text, nullable=True)
