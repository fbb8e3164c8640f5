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


class Shop(BaseDocument):
    meta = {
        "collection": "shops",
        "indexes": [("is_active", "is_open")],
    }

    name = StringField(required=True, max_length=100)
    description = StringField(max_length=500)
    address = StringField(required=True, max_length=255)
    phone = StringField(required=True)
    email = StringField(required=True)
    # one shop per owner
    owner_id = ObjectIdField(required=True, unique=True)
    is_active = BooleanField(default=True)
    is_open = BooleanField(default=True)
    opening_hours = StringField(default=const.DEFAULT_OPENING_HOURS)
    categories = ListField(StringField())
    logo = StringField()
    rating = FloatField(default=0, min_value=0, max_value=5)
    total_reviews = IntField(default=0)
