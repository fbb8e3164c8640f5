from datetime import datetime, time

from mongoengine import Q
from mongoengine.errors import NotUniqueError

from quickmart import const
from quickmart.enums.order import OrderStatus, PaymentStatus
from quickmart.errors.exceptions import (
    AlreadyAssigned,
    AlreadyExists,
    DuplicateLicenseOrVehicle,
    NotAssigned,
    NotFound,
    NotReady,
)
from quickmart.lib.logger import logger
from quickmart.lib.query_mongo import select_with_pagination_mongo, to_object_id
from quickmart.lib.string import clean_text, ensure_not_blank
from quickmart.models.base_mongo import utcnow
from quickmart.models.delivery_agent import DeliveryAgent, Location
from quickmart.models.order import Order


PROFILE_FIELDS = (
    "name",
    "phone",
    "address",
    "license_number",
    "vehicle_type",
    "vehicle_number",
)


class DeliveryService:

    @staticmethod
    def find_profile(user_id):
        return DeliveryAgent.objects(user_id=user_id).first()

    @staticmethod
    def create_account(
        user,
        agency_name,
        address,
        license_number,
        mobile_number,
        vehicle_type,
        vehicle_number,
    ):
        if DeliveryService.find_profile(user.id):
            raise AlreadyExists()

        profile = DeliveryAgent(
            user_id=user.id,
            agency_name=clean_text(agency_name),
            address=clean_text(address),
            license_number=clean_text(license_number).upper(),
            phone=clean_text(mobile_number),
            email=user.email,
            vehicle_type=vehicle_type,
            vehicle_number=clean_text(vehicle_number).upper(),
        )
        try:
            profile.save()
        except NotUniqueError:
            # user_id is unique too: a concurrent create for the same user lands here
            if DeliveryService.find_profile(user.id):
                raise AlreadyExists()
            raise DuplicateLicenseOrVehicle()

        logger.info(f"Delivery account {profile.id} created for user {user.id}")
        return profile

    @staticmethod
    def require_profile(user_id):
        profile = DeliveryService.find_profile(user_id)
        if not profile:
            raise NotFound(message="Delivery account not found")
        return profile

    @staticmethod
    def update_profile(user, **kwargs):
        """Update the agent's contact details and vehicle data.

        ``name``, ``phone`` and ``address`` live on the user; ``phone`` is
        mirrored to the delivery profile. Returns ``(user, profile)``.
        """
        profile = DeliveryService.require_profile(user.id)
        fields = {
            key: clean_text(value)
            for key, value in kwargs.items()
            if key in PROFILE_FIELDS and value is not None
        }
        ensure_not_blank(fields, PROFILE_FIELDS)

        for key in ("license_number", "vehicle_number"):
            if key in fields:
                fields[key] = fields[key].upper()
        for key in ("license_number", "vehicle_type", "vehicle_number"):
            if key in fields:
                setattr(profile, key, fields[key])
        if "phone" in fields:
            profile.phone = fields["phone"]

        try:
            profile.save()
        except NotUniqueError:
            raise DuplicateLicenseOrVehicle()

        for key in ("name", "phone", "address"):
            if key in fields:
                setattr(user, key, fields[key])
        user.save()

        logger.info(f"Delivery profile {profile.id} updated for user {user.id}")
        return user, profile

    @staticmethod
    def set_location(user_id, latitude, longitude):
        profile = DeliveryService.require_profile(user_id)
        profile.current_location = Location(latitude=latitude, longitude=longitude)
        profile.is_online = True
        profile.save()
        return profile

    @staticmethod
    def set_availability(user_id, is_available):
        profile = DeliveryService.require_profile(user_id)
        profile.is_online = bool(is_available)
        profile.save()
        return profile

    @staticmethod
    def get_available_orders():
        return list(
            Order.objects(
                delivery_agent_id=None, status=OrderStatus.DISPATCHED.value
            ).order_by("created_at")
        )

    @staticmethod
    def get_assigned_orders(agent_id):
        return list(
            Order.objects(
                delivery_agent_id=agent_id, status=OrderStatus.DISPATCHED.value
            ).order_by("-created_at")
        )

    @staticmethod
    def get_completed_orders(agent_id, page, per_page):
        return select_with_pagination_mongo(
            Order,
            page,
            per_page,
            filters=[
                Q(delivery_agent_id=agent_id),
                Q(status=OrderStatus.DELIVERED.value),
            ],
            order_by=["-delivered_at"],
        )

    @staticmethod
    def accept_order(agent, order_id):
        order_id = to_object_id(order_id)
        DeliveryService.require_profile(agent.id)
        now = utcnow()
        # compare-and-set: only an unassigned dispatched order can be taken
        order = Order.objects(
            id=order_id,
            delivery_agent_id=None,
            status=OrderStatus.DISPATCHED.value,
        ).modify(
            new=True,
            set__delivery_agent_id=agent.id,
            set__delivery_agent_name=agent.name,
            set__delivery_accepted_at=now,
            set__updated_at=now,
        )

        if not order:
            current = Order.objects(id=order_id).first()
            if not current:
                raise NotFound(message="Order not found")
            if current.delivery_agent_id:
                raise AlreadyAssigned()
            raise NotReady()

        DeliveryAgent.objects(user_id=agent.id).update_one(inc__total_deliveries=1)
        logger.info(f"Order {order.order_number} accepted by delivery agent {agent.id}")
        return order

    @staticmethod
    def mark_delivered(agent, order_id):
        """Mark an assigned order delivered.

        Returns ``(order, changed)``; ``changed`` is False when the order was
        already delivered, in which case nothing is written.
        """
        order_id = to_object_id(order_id)
        now = utcnow()
        order = Order.objects(
            id=order_id,
            delivery_agent_id=agent.id,
            status=OrderStatus.DISPATCHED.value,
        ).modify(
            new=True,
            set__status=OrderStatus.DELIVERED.value,
            set__payment_status=PaymentStatus.PAID.value,
            set__delivered_at=now,
            set__updated_at=now,
        )

        if not order:
            current = Order.objects(id=order_id).first()
            if not current:
                raise NotFound(message="Order not found")
            if current.delivery_agent_id != agent.id:
                raise NotAssigned()
            if current.status == OrderStatus.DELIVERED.value:
                return current, False
            raise NotReady(message=f"Order is {current.status} and can't be delivered")

        DeliveryAgent.objects(user_id=agent.id).update_one(
            inc__completed_deliveries=1
        )
        logger.info(f"Order {order.order_number} delivered by agent {agent.id}")
        return order, True

    @staticmethod
    def get_stats(agent_id):
        today = datetime.combine(utcnow().date(), time.min)
        total_deliveries = Order.objects(
            delivery_agent_id=agent_id, status=OrderStatus.DELIVERED.value
        ).count()
        pending_deliveries = Order.objects(
            delivery_agent_id=agent_id, status=OrderStatus.DISPATCHED.value
        ).count()
        today_deliveries = Order.objects(
            delivery_agent_id=agent_id,
            status=OrderStatus.DELIVERED.value,
            delivered_at__gte=today,
        ).count()

        return {
            "total_deliveries": total_deliveries,
            "pending_deliveries": pending_deliveries,
            "today_deliveries": today_deliveries,
            "total_earnings": total_deliveries * const.DELIVERY_EARNINGS_RATE,
            "today_earnings": today_deliveries * const.DELIVERY_EARNINGS_RATE,
        }
