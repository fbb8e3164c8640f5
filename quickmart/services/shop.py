from mongoengine.errors import NotUniqueError

from quickmart.enums.order import OPEN_ORDER_STATUSES, OrderStatus
from quickmart.errors.exceptions import BadRequest, ShopRequired
from quickmart.lib.logger import logger
from quickmart.lib.string import clean_text, ensure_not_blank, normalize_email
from quickmart.models.order import Order
from quickmart.models.product import Product
from quickmart.models.shop import Shop

SHOP_FIELDS = (
    "name",
    "description",
    "address",
    "phone",
    "email",
    "is_open",
    "opening_hours",
    "categories",
    "logo",
)

SHOP_REQUIRED_FIELDS = ("name", "address", "phone", "email")


class ShopService:

    @staticmethod
    def find_shop_by_owner(owner_id):
        return Shop.objects(owner_id=owner_id).first()

    @staticmethod
    def require_shop(owner_id):
        shop = ShopService.find_shop_by_owner(owner_id)
        if not shop:
            raise ShopRequired()
        return shop

    @staticmethod
    def upsert_shop(owner_id, **kwargs):
        """Create the owner's shop, or update it when one exists.

        Returns ``(shop, created)``.
        """
        fields = {
            key: clean_text(value)
            for key, value in kwargs.items()
            if key in SHOP_FIELDS and value is not None
        }
        if "email" in fields:
            fields["email"] = normalize_email(fields["email"])

        shop = ShopService.find_shop_by_owner(owner_id)
        if shop:
            ensure_not_blank(fields, SHOP_REQUIRED_FIELDS)
            for key, value in fields.items():
                setattr(shop, key, value)
            shop.save()
            logger.info(f"Updated shop {shop.id} for owner {owner_id}")
            return shop, False

        missing = [field for field in SHOP_REQUIRED_FIELDS if not fields.get(field)]
        if missing:
            raise BadRequest(message="{} is required".format(", ".join(missing)))

        shop = Shop(owner_id=owner_id, **fields)
        try:
            shop.save()
        except NotUniqueError:
            raise BadRequest(message="Shop already exists for this owner")
        logger.info(f"Created shop {shop.id} for owner {owner_id}")
        return shop, True

    @staticmethod
    def set_open(owner_id, is_open):
        shop = ShopService.require_shop(owner_id)
        shop.is_open = bool(is_open)
        shop.save()
        return shop

    @staticmethod
    def get_shop_stats(owner_id):
        stats = {
            "total_products": 0,
            "total_orders": 0,
            "pending_orders": 0,
            "total_revenue": 0,
        }
        shop = ShopService.find_shop_by_owner(owner_id)
        if not shop:
            return stats

        stats["total_products"] = Product.objects(shop_id=shop.id).count()
        stats["total_orders"] = Order.objects(shop_id=shop.id).count()
        stats["pending_orders"] = Order.objects(
            shop_id=shop.id, status__in=OPEN_ORDER_STATUSES
        ).count()

        revenue = list(
            Order.objects(
                shop_id=shop.id, status=OrderStatus.DELIVERED.value
            ).aggregate(
                [{"$group": {"_id": None, "total": {"$sum": "$total_amount"}}}]
            )
        )
        stats["total_revenue"] = round(revenue[0]["total"], 2) if revenue else 0
        return stats
