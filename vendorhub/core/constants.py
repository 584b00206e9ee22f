# Feature flag keys (columns on VendorFeatures)
FEATURE_KEYS = (
    "whatsapp_billing",
    "loyalty",
    "inventory",
    "table_qr",
    "online_ordering",
    "kitchen_display",
    "staff_management",
    "face_attendance",
    "expense_tracking",
    "analytics",
    "messaging",
    "ai_support",
)

# Loyalty: one point per POINTS_PER_CURRENCY_UNIT of a bill's final amount
POINTS_PER_CURRENCY_UNIT = 10

# (min lifetime points, tier), highest first
LOYALTY_TIERS = (
    (5000, "platinum"),
    (2000, "gold"),
    (500, "silver"),
    (0, "bronze"),
)

DEFAULT_MIN_STOCK_LEVEL = 10

# Table order states that count as "in progress" on the dashboard
ACTIVE_TABLE_ORDER_STATUSES = ("confirmed", "preparing", "ready")

DASHBOARD_TOP_ITEMS = 5
DASHBOARD_RECENT_DAYS = 7
