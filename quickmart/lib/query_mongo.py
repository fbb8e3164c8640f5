from typing import Type, List, Any, Dict, Optional
from bson import ObjectId
from mongoengine import Document, Q

from quickmart import const
from quickmart.errors.exceptions import InvalidId


def to_object_id(value, message=None) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidId(message=message)
    return ObjectId(value)


def parse_pagination(args) -> Dict[str, int]:
    page = args.get("page", const.DEFAULT_PAGE, type=int) or const.DEFAULT_PAGE
    per_page = (
        args.get("per_page", const.DEFAULT_PER_PAGE, type=int)
        or const.DEFAULT_PER_PAGE
    )
    return {
        "page": max(page, 1),
        "per_page": min(max(per_page, 1), const.MAX_PER_PAGE),
    }


def select_with_pagination_mongo(
    model: Type[Document],
    page: int,
    per_page: int,
    filters: Optional[List[Q]] = None,
    order_by: Optional[List[str]] = None,
) -> Dict[str, Any]:
    qs = model.objects

    if filters:
        for cond in filters:
            qs = qs.filter(cond)
    if order_by:
        qs = qs.order_by(*order_by)

    total = qs.count()

    skip = (max(page, 1) - 1) * per_page
    items = qs.skip(skip).limit(per_page)

    total_pages = (total + per_page - 1) // per_page

    return {
        "total": total,
        "page": page,
        "per_page": per_page,
        "pages": total_pages,
        "items": list(items),
    }
