# Pagination Defaults
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100

# Roles
CUSTOMER = "customer"
SHOP_OWNER = "shop_owner"
DELIVERY_AGENT = "delivery_agent"
ROLES = [CUSTOMER, SHOP_OWNER, DELIVERY_AGENT]

PRODUCT_UNITS = ["kg", "g", "lb", "oz", "piece", "dozen", "pack", "bottle", "liter", "ml"]
VEHICLE_TYPES = ["bike", "scooter", "car", "bicycle", "truck"]

DEFAULT_OPENING_HOURS = "9:00 AM - 9:00 PM"

PHONE_PATTERN = r"^\+?[\d\s\-()]{10,}$"
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64

ORDER_NUMBER_PREFIX = "ORD"

# Flat payout per completed delivery
DELIVERY_EARNINGS_RATE = 20
