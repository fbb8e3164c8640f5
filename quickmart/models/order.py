from mongoengine import (
    DateTimeField,
    EmbeddedDocument,
    EmbeddedDocumentListField,
    FloatField,
    IntField,
    ObjectIdField,
    StringField,
)

from quickmart.enums.order import OrderStatus, PaymentMethod, PaymentStatus
from quickmart.models.base_mongo import BaseDocument


class OrderItem(EmbeddedDocument):
    product_id = ObjectIdField(required=True)
    name = StringField(required=True)
    price = FloatField(required=True, min_value=0)
    quantity = IntField(required=True, min_value=1)
    unit = StringField(required=True)
    image = StringField()


class Order(BaseDocument):
    meta = {
        "collection": "orders",
        "indexes": [
            ("shop_id", "status"),
            "customer_id",
            "delivery_agent_id",
            "-created_at",
        ],
    }

    order_number = StringField(required=True, unique=True)
    customer_id = ObjectIdField(required=True)
    customer_name = StringField(required=True)
    customer_phone = StringField(required=True)
    customer_email = StringField(required=True)
    shop_id = ObjectIdField(required=True)
    shop_name = StringField()
    items = EmbeddedDocumentListField(OrderItem)
    total_amount = FloatField(required=True, min_value=0)
    delivery_address = StringField(required=True)
    delivery_instructions = StringField()
    status = StringField(choices=OrderStatus.values(), default=OrderStatus.PENDING.value)
    payment_status = StringField(
        choices=PaymentStatus.values(), default=PaymentStatus.PENDING.value
    )
    payment_method = StringField(
        choices=PaymentMethod.values(), default=PaymentMethod.CASH.value
    )
    delivery_agent_id = ObjectIdField()
    delivery_agent_name = StringField()
    delivery_accepted_at = DateTimeField()
    delivered_at = DateTimeField()
    cancelled_at = DateTimeField()
