# coding: utf8
from flask import g
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import parameters, roles_required
from quickmart.lib.response import Response
from quickmart.services.product import ProductService

ns = Namespace(name="products", path="/products", description="Product API")

PRODUCT_PROPERTIES = {
    "name": {"type": "string", "maxLength": 100},
    "description": {"type": "string", "maxLength": 500},
    "price": {"type": "number", "minimum": 0},
    "original_price": {"type": "number", "minimum": 0},
    "unit": {"type": "string", "enum": const.PRODUCT_UNITS},
    "stock": {"type": "integer", "minimum": 0},
    "category": {"type": "string"},
    "images": {"type": "array", "items": {"type": "string"}},
    "is_available": {"type": "boolean"},
    "is_featured": {"type": "boolean"},
    "tags": {"type": "array", "items": {"type": "string"}},
    "discount": {"type": "number", "minimum": 0, "maximum": 100},
}


@ns.route("")
class APIProducts(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self):
        products = ProductService.get_products_by_owner(g.current_user.id)
        return Response(
            data={"products": [product.to_json() for product in products]}
        ).to_dict()

    @roles_required(const.SHOP_OWNER)
    @parameters(
        type="object",
        properties=PRODUCT_PROPERTIES,
        required=["name", "price", "unit", "category"],
    )
    def post(self, args):
        product = ProductService.create_product(g.current_user.id, **args)
        return Response(
            data={"product": product.to_json()},
            message="Product created successfully",
            status=201,
        ).to_dict()


@ns.route("/<string:product_id>")
class APIProduct(Resource):

    @roles_required(const.SHOP_OWNER)
    @parameters(type="object", properties=PRODUCT_PROPERTIES)
    def put(self, args, product_id):
        product = ProductService.update_product(g.current_user.id, product_id, **args)
        return Response(
            data={"product": product.to_json()},
            message="Product updated successfully",
        ).to_dict()

    @roles_required(const.SHOP_OWNER)
    def delete(self, product_id):
        ProductService.delete_product(g.current_user.id, product_id)
        return Response(message="Product deleted successfully").to_dict()


@ns.route("/<string:product_id>/stock")
class APIProductStock(Resource):

    @roles_required(const.SHOP_OWNER)
    @parameters(
        type="object",
        properties={"stock": {"type": "integer", "minimum": 0}},
        required=["stock"],
    )
    def put(self, args, product_id):
        product = ProductService.update_stock(
            g.current_user.id, product_id, args["stock"]
        )
        return Response(
            data={"product": product.to_json()},
            message="Stock updated successfully",
        ).to_dict()
