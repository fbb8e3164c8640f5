from mongoengine import BooleanField, EmailField, StringField

from quickmart import const
from quickmart.extensions import bcrypt
from quickmart.models.base_mongo import BaseDocument


class User(BaseDocument):
    meta = {
        "collection": "users",
        "indexes": ["role"],
    }

    name = StringField(required=True, max_length=100)
    email = EmailField(required=True, unique=True)
    password = StringField(required=True)
    phone = StringField(required=True, regex=const.PHONE_PATTERN)
    address = StringField(required=True, max_length=255)
    role = StringField(choices=const.ROLES, default=const.CUSTOMER)
    is_active = BooleanField(default=True)

    to_json_filter = ("password",)

    def set_password(self, password):
        self.password = bcrypt.generate_password_hash(password).decode("utf-8")

    def check_password(self, password):
        if not self.password:
            return False
        return bcrypt.check_password_hash(self.password, password)
