from sqlalchemy import Boolean, Column, Numeric, String, Text

from vendorhub.models.base import Base, VendorOwnedMixin


class MenuItem(VendorOwnedMixin, Base):
    __tablename__ = "menu_items"

    name = Column(String, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    size = Column(String, nullable=True)  # regular, large ...
    category = Column(String, nullable=True)
    is_available = Column(Boolean, default=True, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    store_id = Column(String, nullable=True)  # Profile.stores[].id for multi-outlet vendors
