from sqlalchemy import Column, DateTime, Numeric, String

from vendorhub.models.base import Base, CreatedAtMixin, VendorOwnedMixin
from vendorhub.utils.time_windows import utcnow


class Expense(VendorOwnedMixin, CreatedAtMixin, Base):
    __tablename__ = "expenses"

    category = Column(String, nullable=False)  # raw_material, salary, rent, utilities, marketing, other
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    payment_mode = Column(String, default="cash", nullable=False)
    expense_date = Column(DateTime, default=utcnow, nullable=False)
    receipt_url = Column(String, nullable=True)
