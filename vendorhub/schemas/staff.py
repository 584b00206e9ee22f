from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from vendorhub.schemas.base import APIModel, Money, NonNegativeMoney

StaffRole = Literal["manager", "chef", "waiter", "delivery", "cashier", "helper"]
AttendanceStatus = Literal["present", "absent", "half_day", "late"]


class StaffCreate(APIModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    role: StaffRole
    salary: Optional[NonNegativeMoney] = None
    join_date: Optional[datetime] = None
    status: Literal["active", "inactive"] = "active"
    emergency_contact: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None


class StaffUpdate(APIModel):
    name: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    role: Optional[StaffRole] = None
    salary: Optional[NonNegativeMoney] = None
    status: Optional[Literal["active", "inactive"]] = None
    emergency_contact: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None


class StaffRead(APIModel):
    id: str
    vendor_id: int
    name: str
    phone: str
    role: str
    salary: Optional[Money] = None
    join_date: Optional[datetime] = None
    status: str
    emergency_contact: Optional[str] = None
    address: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: datetime


class AttendanceCreate(APIModel):
    check_in: datetime
    check_out: Optional[datetime] = None
    status: AttendanceStatus = "present"
    manual_override: bool = False
    notes: Optional[str] = None
    date: Optional[datetime] = None


class AttendanceUpdate(APIModel):
    check_out: Optional[datetime] = None
    status: Optional[AttendanceStatus] = None
    manual_override: Optional[bool] = None
    notes: Optional[str] = None


class AttendanceRead(APIModel):
    id: str
    vendor_id: int
    staff_id: str
    check_in: datetime
    check_out: Optional[datetime] = None
    status: str
    manual_override: bool
    notes: Optional[str] = None
    date: datetime
    created_at: datetime
