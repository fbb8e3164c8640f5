# coding: utf8
from flask import Blueprint
from flask_restx import Api

from quickmart.api.auth import ns as auth_ns
from quickmart.api.shop import ns as shop_ns
from quickmart.api.product import ns as product_ns
from quickmart.api.order import ns as order_ns
from quickmart.api.customer import ns as customer_ns
from quickmart.api.delivery import ns as delivery_ns
from quickmart.api.health import ns as health_ns
from quickmart.errors.handler import api_error_handler

bp = Blueprint("api", __name__, url_prefix="/api")

api = Api(
    bp, version="1.0", title="QuickMart API", description="QuickMart API", doc="/docs/"
)


@api.errorhandler(Exception)
def handle_api_error(error):
    return api_error_handler(error)


api.add_namespace(ns=auth_ns)
api.add_namespace(ns=shop_ns)
api.add_namespace(ns=product_ns)
api.add_namespace(ns=order_ns)
api.add_namespace(ns=customer_ns)
api.add_namespace(ns=delivery_ns)
api.add_namespace(ns=health_ns)
