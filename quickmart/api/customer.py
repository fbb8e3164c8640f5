# coding: utf8
from flask import g
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import parameters, roles_required
from quickmart.enums.order import PaymentMethod
from quickmart.lib.response import Response
from quickmart.services.customer import CustomerService
from quickmart.services.product import ProductService

ns = Namespace(name="customer", path="/customer", description="Customer API")


@ns.route("/shops")
class APICustomerShops(Resource):

    def get(self):
        shops = CustomerService.get_open_shops()
        return Response(data={"shops": [shop.to_json() for shop in shops]}).to_dict()


@ns.route("/shops/<string:shop_id>/products")
class APICustomerShopProducts(Resource):

    def get(self, shop_id):
        products = ProductService.get_available_products(shop_id)
        return Response(
            data={"products": [product.to_json() for product in products]}
        ).to_dict()


@ns.route("/orders")
class APICustomerOrders(Resource):

    @roles_required(const.CUSTOMER)
    def get(self):
        orders = CustomerService.get_orders_by_customer(g.current_user.id)
        return Response(data={"orders": [order.to_json() for order in orders]}).to_dict()

    @roles_required(const.CUSTOMER)
    @parameters(
        type="object",
        properties={
            "shop_id": {"type": "string"},
            "items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "product_id": {"type": "string"},
                        "quantity": {"type": "integer", "minimum": 1},
                    },
                    "required": ["product_id", "quantity"],
                },
            },
            "total_amount": {"type": "number", "minimum": 0},
            "delivery_address": {"type": "string", "maxLength": 255},
            "payment_method": {"type": "string", "enum": PaymentMethod.values()},
            "delivery_instructions": {"type": "string", "maxLength": 500},
        },
        required=["shop_id"],
    )
    def post(self, args):
        order = CustomerService.place_order(
            g.current_user,
            args["shop_id"],
            args.get("items") or [],
            delivery_address=args.get("delivery_address"),
            payment_method=args.get("payment_method", PaymentMethod.CASH.value),
            delivery_instructions=args.get("delivery_instructions"),
            total_amount=args.get("total_amount"),
        )
        return Response(
            data={"order": order.to_json()},
            message="Order placed successfully",
            status=201,
        ).to_dict()


@ns.route("/orders/<string:order_id>")
class APICustomerOrder(Resource):

    @roles_required(const.CUSTOMER)
    def get(self, order_id):
        order = CustomerService.find_order_by_customer(g.current_user.id, order_id)
        return Response(data={"order": order.to_json()}).to_dict()


@ns.route("/orders/<string:order_id>/cancel")
class APICustomerOrderCancel(Resource):

    @roles_required(const.CUSTOMER)
    def put(self, order_id):
        order = CustomerService.cancel_order(g.current_user.id, order_id)
        return Response(
            data={"order": order.to_json()}, message="Order cancelled successfully"
        ).to_dict()
