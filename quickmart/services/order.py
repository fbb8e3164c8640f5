from quickmart.enums.order import (
    OPEN_ORDER_STATUSES,
    SHOP_OWNER_TARGET_STATUSES,
    OrderStatus,
    can_transition,
)
from quickmart.errors.exceptions import BadRequest, InvalidStatusTransition, NotFound
from quickmart.lib.logger import logger
from quickmart.lib.query_mongo import to_object_id
from quickmart.models.base_mongo import utcnow
from quickmart.models.order import Order
from quickmart.services.shop import ShopService

STATUS_SORT_ORDER = {status: index for index, status in enumerate(OrderStatus.values())}


class OrderService:

    @staticmethod
    def get_orders_by_owner(owner_id, status=None):
        shop = ShopService.find_shop_by_owner(owner_id)
        if not shop:
            return []

        query = Order.objects(shop_id=shop.id)
        if status and status != "all":
            query = query.filter(status=status)
        return list(query.order_by("-created_at"))

    @staticmethod
    def find_order_by_owner(owner_id, order_id):
        order_id = to_object_id(order_id)
        shop = ShopService.require_shop(owner_id)
        order = Order.objects(id=order_id, shop_id=shop.id).first()
        if not order:
            raise NotFound(message="Order not found")
        return order

    @staticmethod
    def update_status(owner_id, order_id, status):
        order = OrderService.find_order_by_owner(owner_id, order_id)

        target = OrderStatus.parse(status)
        if target is None:
            raise BadRequest(
                message="Invalid status. Valid statuses: {}".format(
                    ", ".join(OrderStatus.values())
                )
            )
        if target not in SHOP_OWNER_TARGET_STATUSES:
            raise InvalidStatusTransition(
                message="Only the assigned delivery agent can mark an order as delivered"
            )
        if not can_transition(order.status, target):
            raise InvalidStatusTransition(
                message=f"Order status can't move from {order.status} to {target.value}"
            )

        now = utcnow()
        updates = {"set__status": target.value, "set__updated_at": now}
        if target == OrderStatus.CANCELLED:
            updates["set__cancelled_at"] = now

        updated = Order.objects(
            id=order.id, shop_id=order.shop_id, status=order.status
        ).modify(new=True, **updates)
        if not updated:
            raise InvalidStatusTransition(
                message="Order was updated by another request, please reload it"
            )

        logger.info(f"Order {updated.order_number}: {order.status} -> {target.value}")
        return updated

    @staticmethod
    def get_order_stats(owner_id):
        result = {"stats": [], "total_orders": 0, "pending_orders": 0}
        shop = ShopService.find_shop_by_owner(owner_id)
        if not shop:
            return result

        groups = Order.objects(shop_id=shop.id).aggregate(
            [
                {
                    "$group": {
                        "_id": "$status",
                        "count": {"$sum": 1},
                        "total_amount": {"$sum": "$total_amount"},
                    }
                }
            ]
        )
        result["stats"] = sorted(
            (
                {
                    "status": group["_id"],
                    "count": group["count"],
                    "total_amount": round(group["total_amount"], 2),
                }
                for group in groups
            ),
            key=lambda item: STATUS_SORT_ORDER.get(item["status"], len(STATUS_SORT_ORDER)),
        )
        result["total_orders"] = Order.objects(shop_id=shop.id).count()
        result["pending_orders"] = Order.objects(
            shop_id=shop.id, status__in=OPEN_ORDER_STATUSES
        ).count()
        return result
