from sqlalchemy import Column, String, Text

from vendorhub.models.base import Base, CreatedAtMixin, new_id


class ContactQuery(CreatedAtMixin, Base):
    """Landing-page enquiry. Not tenant owned; only admins can read these."""

    __tablename__ = "contact_queries"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    business_name = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String, default="new", nullable=False)  # new, read, replied, closed
    admin_notes = Column(Text, nullable=True)
