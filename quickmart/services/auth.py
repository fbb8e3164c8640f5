from bson import ObjectId
from flask_jwt_extended import create_access_token, get_jwt_identity
from mongoengine.errors import NotUniqueError

from quickmart import const
from quickmart.errors.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    Unauthorized,
)
from quickmart.lib.logger import logger
from quickmart.lib.string import clean_text, normalize_email
from quickmart.models.user import User


class AuthService:

    @staticmethod
    def register(name, email, password, phone, address, role=const.CUSTOMER):
        email = normalize_email(email)
        if User.objects(email=email).first():
            raise DuplicateEmail()

        user = User(
            name=clean_text(name),
            email=email,
            phone=clean_text(phone),
            address=clean_text(address),
            role=role or const.CUSTOMER,
        )
        user.set_password(password)
        try:
            user.save()
        except NotUniqueError:
            raise DuplicateEmail()

        logger.info(f"Registered user {user.id} ({user.role})")
        return user

    @staticmethod
    def login(email, password):
        user = User.objects(email=normalize_email(email)).first()
        if not user or not user.check_password(password):
            raise InvalidCredentials()
        if not user.is_active:
            raise Unauthorized(message="User account is deactivated")
        return user

    @staticmethod
    def generate_token(user):
        access_token = create_access_token(identity=str(user.id))
        return {
            "token": access_token,
            "type": "Bearer",
            "user": user.to_json(),
        }

    @staticmethod
    def get_user_id():
        subject = get_jwt_identity()
        if subject is None or not ObjectId.is_valid(subject):
            return None
        return ObjectId(subject)

    @staticmethod
    def get_current_identity():
        user_id = AuthService.get_user_id()
        if user_id is None:
            return None
        return User.objects(id=user_id).first()

    @staticmethod
    def update_profile(user, **kwargs):
        for key in ("name", "phone", "address"):
            value = kwargs.get(key)
            if value:
                setattr(user, key, clean_text(value))
        user.save()
        return user

    @staticmethod
    def change_password(user, current_password, new_password):
        if not user.check_password(current_password):
            raise InvalidCredentials(message="Current password is incorrect")
        user.set_password(new_password)
        user.save()
        logger.info(f"Password changed for user {user.id}")
        return user
