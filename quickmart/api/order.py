# coding: utf8
from flask import g, request
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import parameters, roles_required
from quickmart.lib.response import Response
from quickmart.services.order import OrderService

ns = Namespace(name="orders", path="/orders", description="Shop order API")


@ns.route("")
class APIOrders(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self):
        orders = OrderService.get_orders_by_owner(
            g.current_user.id, request.args.get("status")
        )
        return Response(data={"orders": [order.to_json() for order in orders]}).to_dict()


@ns.route("/stats")
class APIOrderStats(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self):
        return Response(data=OrderService.get_order_stats(g.current_user.id)).to_dict()


@ns.route("/<string:order_id>")
class APIOrder(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self, order_id):
        order = OrderService.find_order_by_owner(g.current_user.id, order_id)
        return Response(data={"order": order.to_json()}).to_dict()


@ns.route("/<string:order_id>/status")
class APIOrderStatus(Resource):

    @roles_required(const.SHOP_OWNER)
    @parameters(
        type="object",
        properties={"status": {"type": "string"}},
        required=["status"],
    )
    def put(self, args, order_id):
        order = OrderService.update_status(g.current_user.id, order_id, args["status"])
        return Response(
            data={"order": order.to_json()},
            message=f"Order status updated to {order.status}",
        ).to_dict()
