from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field

from vendorhub.models.profile import OnboardingStatus
from vendorhub.schemas.base import APIModel


class StoreConfig(APIModel):
    id: str
    name: str
    type: str  # dining, takeaway ...
    description: Optional[str] = None


# ---------- Profile ----------
class ProfileFields(APIModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    business_type: Optional[str] = None
    gst_number: Optional[str] = None
    upi_id: Optional[str] = None
    whatsapp_enabled: bool = False
    whatsapp_number: Optional[str] = None
    google_review_link: Optional[str] = None
    preferred_language: str = "hinglish"
    subscription_plan: str = "starter"
    dashboard_config: Optional[Any] = None
    stores: Optional[List[StoreConfig]] = None
    promo_video_url: Optional[str] = None


class ProfileCreate(ProfileFields):
    # user id comes from the session; status and admin flag are admin-managed
    business_name: str = Field(min_length=1)
    owner_name: str = Field(min_length=1)


class ProfileUpdate(APIModel):
    business_name: Optional[str] = Field(default=None, min_length=1)
    owner_name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    business_type: Optional[str] = None
    gst_number: Optional[str] = None
    upi_id: Optional[str] = None
    whatsapp_enabled: Optional[bool] = None
    whatsapp_number: Optional[str] = None
    google_review_link: Optional[str] = None
    preferred_language: Optional[str] = None
    subscription_plan: Optional[str] = None
    dashboard_config: Optional[Any] = None
    stores: Optional[List[StoreConfig]] = None
    promo_video_url: Optional[str] = None


class ProfileRead(ProfileFields):
    id: int
    business_name: str
    owner_name: str
    onboarding_status: OnboardingStatus
    is_admin: bool
    created_at: datetime
    updated_at: datetime


# ---------- Feature flags ----------
class VendorFeaturesRead(APIModel):
    vendor_id: int
    whatsapp_billing: bool
    loyalty: bool
    inventory: bool
    table_qr: bool
    online_ordering: bool
    kitchen_display: bool
    staff_management: bool
    face_attendance: bool
    expense_tracking: bool
    analytics: bool
    messaging: bool
    ai_support: bool
    updated_at: datetime
    updated_by: Optional[int] = None


class VendorFeaturesUpdate(APIModel):
    whatsapp_billing: Optional[bool] = None
    loyalty: Optional[bool] = None
    inventory: Optional[bool] = None
    table_qr: Optional[bool] = None
    online_ordering: Optional[bool] = None
    kitchen_display: Optional[bool] = None
    staff_management: Optional[bool] = None
    face_attendance: Optional[bool] = None
    expense_tracking: Optional[bool] = None
    analytics: Optional[bool] = None
    messaging: Optional[bool] = None
    ai_support: Optional[bool] = None


# ---------- Admin ----------
class StatusChange(APIModel):
    status: OnboardingStatus


class AdminStats(APIModel):
    total_vendors: int
    pending_vendors: int
    active_vendors: int
    rejected_vendors: int
    total_bills: int
    new_contact_queries: int
