from .base import Base
from .user import User
from .profile import Profile, OnboardingStatus
from .vendor_features import VendorFeatures
from .customer import Customer, LoyaltyPoint
from .menu_item import MenuItem
from .inventory import InventoryItem
from .bill import Bill
from .table import Table, TableOrder
from .loyalty import LoyaltyReward
from .notification import Notification
from .messaging import CustomerMessage, CustomerAutomation
from .staff import Staff, StaffAttendance
from .expense import Expense
from .contact_query import ContactQuery
