from datetime import datetime
from typing import Optional

from vendorhub.schemas.base import APIModel


class NotificationRead(APIModel):
    id: str
    vendor_id: int
    title: str
    message: str
    type: str  # info, warning, success
    is_read: bool
    link: Optional[str] = None
    created_at: datetime
