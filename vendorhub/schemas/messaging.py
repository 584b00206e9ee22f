from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel

AutomationTrigger = Literal["new_customer", "after_purchase", "days_inactive", "nth_visit", "birthday"]


# ---------- Customer messages ----------
class CustomerMessageCreate(APIModel):
    type: Literal["promotional", "follow_up", "reminder", "announcement", "automated"]
    content: str = Field(min_length=1)
    recipient_type: Literal["all", "selected", "segment"] = "all"
    recipient_ids: Optional[List[str]] = None
    scheduled_for: Optional[datetime] = None


class CustomerMessageRead(APIModel):
    id: str
    vendor_id: int
    type: str
    content: str
    recipient_type: str
    recipient_ids: Optional[List[str]] = None
    status: str
    scheduled_for: Optional[datetime] = None
    sent_at: Optional[datetime] = None
    delivered_count: int
    failed_count: int
    created_at: datetime


# ---------- Automations ----------
class CustomerAutomationCreate(APIModel):
    name: str = Field(min_length=1)
    trigger: AutomationTrigger
    trigger_value: Optional[str] = None
    message_template: str = Field(min_length=1)
    enabled: bool = True


class CustomerAutomationUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    trigger: Optional[AutomationTrigger] = None
    trigger_value: Optional[str] = None
    message_template: Optional[str] = Field(default=None, min_length=1)
    enabled: Optional[bool] = None


class CustomerAutomationRead(APIModel):
    id: str
    vendor_id: int
    name: str
    trigger: str
    trigger_value: Optional[str] = None
    message_template: str
    enabled: bool
    sent_count: int
    created_at: datetime
