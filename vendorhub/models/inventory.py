from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from vendorhub.core.constants import DEFAULT_MIN_STOCK_LEVEL
from vendorhub.models.base import Base, VendorOwnedMixin
from vendorhub.utils.time_windows import utcnow


class InventoryItem(VendorOwnedMixin, Base):
    __tablename__ = "inventory"

    menu_item_id = Column(String, ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True)
    item_name = Column(String, nullable=False)
    current_stock = Column(Integer, default=0, nullable=False)
    min_stock_level = Column(Integer, default=DEFAULT_MIN_STOCK_LEVEL, nullable=False)
    unit = Column(String, nullable=False)  # kg, liters, units ...
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
