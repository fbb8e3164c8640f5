# coding: utf8
from flask import g, request
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import parameters, roles_required
from quickmart.lib.query_mongo import parse_pagination
from quickmart.lib.response import Response
from quickmart.services.delivery import DeliveryService

ns = Namespace(name="delivery", path="/delivery", description="Delivery agent API")


@ns.route("/create-account")
class APIDeliveryCreateAccount(Resource):

    @roles_required(const.DELIVERY_AGENT)
    @parameters(
        type="object",
        properties={
            "agency_name": {"type": "string", "maxLength": 100},
            "address": {"type": "string", "maxLength": 255},
            "license_number": {"type": "string", "maxLength": 50},
            "mobile_number": {"type": "string", "pattern": const.PHONE_PATTERN},
            "vehicle_type": {"type": "string", "enum": const.VEHICLE_TYPES},
            "vehicle_number": {"type": "string", "maxLength": 50},
        },
        required=[
            "agency_name",
            "address",
            "license_number",
            "mobile_number",
            "vehicle_type",
            "vehicle_number",
        ],
    )
    def post(self, args):
        profile = DeliveryService.create_account(g.current_user, **args)
        return Response(
            data={"delivery_agent": profile.to_json()},
            message="Delivery account created successfully",
            status=201,
        ).to_dict()


@ns.route("/profile")
class APIDeliveryProfile(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def get(self):
        user = g.current_user
        profile = DeliveryService.find_profile(user.id)
        return Response(
            data={
                "user": user.to_json(),
                "delivery_agent": profile.to_json() if profile else None,
            }
        ).to_dict()

    @roles_required(const.DELIVERY_AGENT)
    @parameters(
        type="object",
        properties={
            "name": {"type": "string", "maxLength": 100},
            "phone": {"type": "string", "pattern": const.PHONE_PATTERN},
            "address": {"type": "string", "maxLength": 255},
            "license_number": {"type": "string", "maxLength": 50},
            "vehicle_type": {"type": "string", "enum": const.VEHICLE_TYPES},
            "vehicle_number": {"type": "string", "maxLength": 50},
        },
    )
    def put(self, args):
        user, profile = DeliveryService.update_profile(g.current_user, **args)
        return Response(
            data={"user": user.to_json(), "delivery_agent": profile.to_json()},
            message="Profile updated successfully",
        ).to_dict()


@ns.route("/location")
class APIDeliveryLocation(Resource):

    @roles_required(const.DELIVERY_AGENT)
    @parameters(
        type="object",
        properties={
            "latitude": {"type": "number", "minimum": -90, "maximum": 90},
            "longitude": {"type": "number", "minimum": -180, "maximum": 180},
        },
        required=["latitude", "longitude"],
    )
    def put(self, args):
        profile = DeliveryService.set_location(
            g.current_user.id, args["latitude"], args["longitude"]
        )
        return Response(
            data={"delivery_agent": profile.to_json()},
            message="Location updated successfully",
        ).to_dict()


@ns.route("/available-orders")
class APIDeliveryAvailableOrders(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def get(self):
        orders = DeliveryService.get_available_orders()
        return Response(data={"orders": [order.to_json() for order in orders]}).to_dict()


@ns.route("/assigned-orders")
class APIDeliveryAssignedOrders(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def get(self):
        orders = DeliveryService.get_assigned_orders(g.current_user.id)
        return Response(data={"orders": [order.to_json() for order in orders]}).to_dict()


@ns.route("/completed-orders")
class APIDeliveryCompletedOrders(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def get(self):
        pagination = parse_pagination(request.args)
        result = DeliveryService.get_completed_orders(
            g.current_user.id, pagination["page"], pagination["per_page"]
        )
        return Response(
            data={
                "orders": [order.to_json() for order in result["items"]],
                "total": result["total"],
                "page": result["page"],
                "per_page": result["per_page"],
                "pages": result["pages"],
            }
        ).to_dict()


@ns.route("/orders/<string:order_id>/accept")
class APIDeliveryAcceptOrder(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def put(self, order_id):
        order = DeliveryService.accept_order(g.current_user, order_id)
        return Response(
            data={"order": order.to_json()}, message="Order accepted for delivery"
        ).to_dict()


@ns.route("/orders/<string:order_id>/deliver")
class APIDeliveryDeliverOrder(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def put(self, order_id):
        order, changed = DeliveryService.mark_delivered(g.current_user, order_id)
        return Response(
            data={"order": order.to_json()},
            message="Order marked as delivered"
            if changed
            else "Order was already delivered",
        ).to_dict()


@ns.route("/availability")
class APIDeliveryAvailability(Resource):

    @roles_required(const.DELIVERY_AGENT)
    @parameters(
        type="object",
        properties={"is_available": {"type": "boolean"}},
        required=["is_available"],
    )
    def put(self, args):
        profile = DeliveryService.set_availability(
            g.current_user.id, args["is_available"]
        )
        return Response(
            data={"delivery_agent": profile.to_json()},
            message="You are now online" if profile.is_online else "You are now offline",
        ).to_dict()


@ns.route("/stats")
class APIDeliveryStats(Resource):

    @roles_required(const.DELIVERY_AGENT)
    def get(self):
        return Response(data={"stats": DeliveryService.get_stats(g.current_user.id)}).to_dict()
