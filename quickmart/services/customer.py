from quickmart.enums.order import (
    CUSTOMER_CANCELLABLE_STATUSES,
    OrderStatus,
    PaymentMethod,
)
from quickmart.errors.exceptions import (
    BadRequest,
    EmptyOrder,
    InvalidStatusTransition,
    NotFound,
    ShopNotFound,
    Unauthenticated,
)
from quickmart.lib.logger import logger
from quickmart.lib.query_mongo import to_object_id
from quickmart.lib.string import clean_text, generate_order_number
from quickmart.models.base_mongo import utcnow
from quickmart.models.order import Order, OrderItem
from quickmart.models.product import Product
from quickmart.models.shop import Shop


class CustomerService:

    @staticmethod
    def get_open_shops():
        return list(Shop.objects(is_active=True, is_open=True).order_by("-created_at"))

    @staticmethod
    def place_order(
        customer,
        shop_id,
        items,
        delivery_address=None,
        payment_method=PaymentMethod.CASH.value,
        delivery_instructions=None,
        total_amount=None,
    ):
        """Create a pending order from the customer's cart.

        Prices, names and units come from the shop's product records; the
        client only chooses products and quantities. ``total_amount`` as sent
        by the client is compared against the computed total and otherwise
        ignored.
        """
        if customer is None:
            raise Unauthenticated()

        shop_id = to_object_id(shop_id, message="Invalid shop ID format")
        shop = Shop.objects(id=shop_id, is_active=True).first()
        if not shop:
            raise ShopNotFound()
        if not shop.is_open:
            raise BadRequest(message="Shop is currently closed")

        if not items:
            raise EmptyOrder()

        product_ids = [
            to_object_id(item.get("product_id"), message="Invalid product ID format")
            for item in items
        ]
        products = {
            product.id: product
            for product in Product.objects(id__in=product_ids, shop_id=shop.id)
        }

        order_items = []
        for product_id, item in zip(product_ids, items):
            product = products.get(product_id)
            if not product or not product.is_available:
                raise BadRequest(
                    message=f"Product {product_id} is not available in this shop"
                )
            order_items.append(
                OrderItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    quantity=int(item.get("quantity", 1)),
                    unit=product.unit,
                    image=product.images[0] if product.images else None,
                )
            )

        computed_total = round(
            sum(order_item.price * order_item.quantity for order_item in order_items),
            2,
        )
        if total_amount is not None and abs(float(total_amount) - computed_total) > 0.005:
            logger.warning(
                f"Client total {total_amount} differs from computed total "
                f"{computed_total} for customer {customer.id}"
            )

        order = Order(
            order_number=generate_order_number(),
            customer_id=customer.id,
            customer_name=customer.name,
            customer_phone=customer.phone,
            customer_email=customer.email,
            shop_id=shop.id,
            shop_name=shop.name,
            items=order_items,
            total_amount=computed_total,
            delivery_address=clean_text(delivery_address) or customer.address,
            delivery_instructions=clean_text(delivery_instructions),
            payment_method=payment_method or PaymentMethod.CASH.value,
        )
        order.save()

        logger.info(
            f"Order {order.order_number} placed by {customer.id} at shop {shop.id} "
            f"for {computed_total}"
        )
        return order

    @staticmethod
    def get_orders_by_customer(customer_id):
        return list(Order.objects(customer_id=customer_id).order_by("-created_at"))

    @staticmethod
    def find_order_by_customer(customer_id, order_id):
        order_id = to_object_id(order_id)
        order = Order.objects(id=order_id, customer_id=customer_id).first()
        if not order:
            raise NotFound(message="Order not found")
        return order

    @staticmethod
    def cancel_order(customer_id, order_id):
        order = CustomerService.find_order_by_customer(customer_id, order_id)
        if order.status not in CUSTOMER_CANCELLABLE_STATUSES:
            raise InvalidStatusTransition(
                message=f"Order can't be cancelled once it is {order.status}"
            )

        now = utcnow()
        updated = Order.objects(
            id=order.id,
            customer_id=customer_id,
            status__in=CUSTOMER_CANCELLABLE_STATUSES,
        ).modify(
            new=True,
            set__status=OrderStatus.CANCELLED.value,
            set__cancelled_at=now,
            set__updated_at=now,
        )
        if not updated:
            raise InvalidStatusTransition(
                message="Order was updated by another request, please reload it"
            )

        logger.info(f"Order {updated.order_number} cancelled by customer {customer_id}")
        return updated
