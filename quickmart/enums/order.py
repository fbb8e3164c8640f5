from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PACKED = "packed"
    DISPATCHED = "dispatched"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls):
        return [status.value for status in cls]

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            return None


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    WALLET = "wallet"

    @classmethod
    def values(cls):
        return [method.value for method in cls]


ORDER_STATUS_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PACKED, OrderStatus.CANCELLED},
    OrderStatus.PACKED: {OrderStatus.DISPATCHED, OrderStatus.CANCELLED},
    OrderStatus.DISPATCHED: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}

# Statuses counted as "pending" on shop dashboards
OPEN_ORDER_STATUSES = [
    OrderStatus.PENDING.value,
    OrderStatus.CONFIRMED.value,
    OrderStatus.PACKED.value,
]

# Statuses a customer may still cancel from
CUSTOMER_CANCELLABLE_STATUSES = [
    OrderStatus.PENDING.value,
    OrderStatus.CONFIRMED.value,
]

# Delivered is written only by the assigned delivery agent
SHOP_OWNER_TARGET_STATUSES = {
    OrderStatus.CONFIRMED,
    OrderStatus.PACKED,
    OrderStatus.DISPATCHED,
    OrderStatus.CANCELLED,
}


def can_transition(current, target):
    current = OrderStatus.parse(current)
    target = OrderStatus.parse(target)
    if current is None or target is None:
        return False
    return target in ORDER_STATUS_TRANSITIONS[current]
