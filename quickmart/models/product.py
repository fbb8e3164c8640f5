from mongoengine import (
    BooleanField,
    FloatField,
    IntField,
    ListField,
    ObjectIdField,
    StringField,
)

from quickmart import const
from quickmart.models.base_mongo import BaseDocument


class Product(BaseDocument):
    meta = {
        "collection": "products",
        "indexes": ["shop_id", "category", "is_available", "-created_at"],
    }

    name = StringField(required=True, max_length=100)
    description = StringField(max_length=500)
    price = FloatField(required=True, min_value=0)
    original_price = FloatField(min_value=0)
    unit = StringField(required=True, choices=const.PRODUCT_UNITS)
    stock = IntField(required=True, min_value=0, default=0)
    category = StringField(required=True)
    images = ListField(StringField())
    is_available = BooleanField(default=True)
    is_featured = BooleanField(default=False)
    shop_id = ObjectIdField(required=True)
    tags = ListField(StringField())
    discount = FloatField(min_value=0, max_value=100, default=0)

    @property
    def discounted_price(self):
        if self.original_price:
            return round(self.original_price * (1 - (self.discount or 0) / 100), 2)
        return self.price

    def to_json(self):
        response = super().to_json()
        response["discounted_price"] = self.discounted_price
        return response
