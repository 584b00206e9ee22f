from fastapi_users.db import SQLAlchemyBaseUserTableUUID

from vendorhub.models.base import Base


class User(SQLAlchemyBaseUserTableUUID, Base):
    """Authentication subject. Business data hangs off the linked Profile."""

    pass
