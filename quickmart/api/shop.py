# coding: utf8
from flask import g
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import parameters, roles_required
from quickmart.lib.response import Response
from quickmart.services.shop import ShopService

ns = Namespace(name="shops", path="/shops", description="Shop owner API")

SHOP_PROPERTIES = {
    "name": {"type": "string", "maxLength": 100},
    "description": {"type": "string", "maxLength": 500},
    "address": {"type": "string", "maxLength": 255},
    "phone": {"type": "string", "pattern": const.PHONE_PATTERN},
    "email": {"type": "string", "format": "email"},
    "is_open": {"type": "boolean"},
    "opening_hours": {"type": "string"},
    "categories": {"type": "array", "items": {"type": "string"}},
    "logo": {"type": "string"},
}


def _upsert_shop(args):
    shop, created = ShopService.upsert_shop(g.current_user.id, **args)
    return Response(
        data={"shop": shop.to_json()},
        message="Shop created successfully" if created else "Shop updated successfully",
        status=201 if created else 200,
    ).to_dict()


@ns.route("")
class APIShop(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self):
        shop = ShopService.find_shop_by_owner(g.current_user.id)
        return Response(data={"shop": shop.to_json() if shop else None}).to_dict()

    @roles_required(const.SHOP_OWNER)
    @parameters(type="object", properties=SHOP_PROPERTIES)
    def post(self, args):
        return _upsert_shop(args)

    @roles_required(const.SHOP_OWNER)
    @parameters(type="object", properties=SHOP_PROPERTIES)
    def put(self, args):
        return _upsert_shop(args)


@ns.route("/stats")
class APIShopStats(Resource):

    @roles_required(const.SHOP_OWNER)
    def get(self):
        stats = ShopService.get_shop_stats(g.current_user.id)
        return Response(data={"stats": stats}).to_dict()


@ns.route("/status")
class APIShopStatus(Resource):

    @roles_required(const.SHOP_OWNER)
    @parameters(
        type="object",
        properties={"is_open": {"type": "boolean"}},
        required=["is_open"],
    )
    def put(self, args):
        shop = ShopService.set_open(g.current_user.id, args["is_open"])
        return Response(
            data={"shop": shop.to_json()},
            message="Shop is now open" if shop.is_open else "Shop is now closed",
        ).to_dict()
