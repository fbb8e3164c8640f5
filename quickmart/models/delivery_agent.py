from mongoengine import (
    BooleanField,
    EmbeddedDocument,
    EmbeddedDocumentField,
    FloatField,
    IntField,
    ObjectIdField,
    StringField,
)

from quickmart import const
from quickmart.models.base_mongo import BaseDocument


class Location(EmbeddedDocument):
    latitude = FloatField(required=True, min_value=-90, max_value=90)
    longitude = FloatField(required=True, min_value=-180, max_value=180)


class DeliveryAgent(BaseDocument):
    meta = {
        "collection": "delivery_agents",
        "indexes": [("is_online", "is_available")],
    }

    user_id = ObjectIdField(required=True, unique=True)
    agency_name = StringField(required=True)
    address = StringField(required=True)
    license_number = StringField(required=True, unique=True)
    phone = StringField(required=True)
    email = StringField(required=True)
    vehicle_type = StringField(required=True, choices=const.VEHICLE_TYPES)
    vehicle_number = StringField(required=True, unique=True)
    current_location = EmbeddedDocumentField(Location)
    is_online = BooleanField(default=False)
    is_available = BooleanField(default=True)
    rating = FloatField(default=0)
    total_deliveries = IntField(default=0)
    completed_deliveries = IntField(default=0)
    is_active = BooleanField(default=True)
