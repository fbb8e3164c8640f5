from quickmart.errors.exceptions import NotFound
from quickmart.lib.logger import logger
from quickmart.lib.query_mongo import to_object_id
from quickmart.lib.string import clean_text, ensure_not_blank
from quickmart.models.product import Product
from quickmart.services.shop import ShopService

PRODUCT_FIELDS = (
    "name",
    "description",
    "price",
    "original_price",
    "unit",
    "stock",
    "category",
    "images",
    "is_available",
    "is_featured",
    "tags",
    "discount",
)

PRODUCT_REQUIRED_FIELDS = ("name", "unit", "category")


def _product_fields(kwargs):
    fields = {
        key: clean_text(value)
        for key, value in kwargs.items()
        if key in PRODUCT_FIELDS and value is not None
    }
    return ensure_not_blank(fields, PRODUCT_REQUIRED_FIELDS)


class ProductService:

    @staticmethod
    def get_products_by_owner(owner_id):
        shop = ShopService.find_shop_by_owner(owner_id)
        if not shop:
            return []
        return list(Product.objects(shop_id=shop.id).order_by("-created_at"))

    @staticmethod
    def create_product(owner_id, **kwargs):
        shop = ShopService.require_shop(owner_id)
        product = Product(shop_id=shop.id, **_product_fields(kwargs))
        product.save()
        logger.info(f"Created product {product.id} in shop {shop.id}")
        return product

    @staticmethod
    def find_product_by_owner(owner_id, product_id):
        product_id = to_object_id(product_id)
        shop = ShopService.require_shop(owner_id)
        product = Product.objects(id=product_id, shop_id=shop.id).first()
        if not product:
            raise NotFound(message="Product not found")
        return product

    @staticmethod
    def update_product(owner_id, product_id, **kwargs):
        product = ProductService.find_product_by_owner(owner_id, product_id)
        for key, value in _product_fields(kwargs).items():
            setattr(product, key, value)
        product.save()
        return product

    @staticmethod
    def update_stock(owner_id, product_id, stock):
        product = ProductService.find_product_by_owner(owner_id, product_id)
        product.stock = stock
        product.save()
        return product

    @staticmethod
    def delete_product(owner_id, product_id):
        product = ProductService.find_product_by_owner(owner_id, product_id)
        product.delete()
        logger.info(f"Deleted product {product_id} from shop {product.shop_id}")
        return True

    @staticmethod
    def get_available_products(shop_id):
        shop_id = to_object_id(shop_id)
        return list(
            Product.objects(shop_id=shop_id, is_available=True).order_by("-created_at")
        )
