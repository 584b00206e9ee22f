import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, declared_attr

from vendorhub.utils.time_windows import utcnow


class Base(DeclarativeBase):
    pass


def new_id() -> str:
    return str(uuid.uuid4())


class VendorOwnedMixin:
    """
    Row-level tenancy: every owned row points at exactly one vendor profile.
    ``vendor_id`` is stamped by TenantRepository and never updated afterwards.
    """

    @declared_attr
    def id(cls):
        return Column(String, primary_key=True, default=new_id)

    @declared_attr
    def vendor_id(cls):
        return Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)


class CreatedAtMixin:
    @declared_attr
    def created_at(cls):
        return Column(DateTime, default=utcnow, nullable=False)
