import re
import uuid
from datetime import datetime, timezone

from quickmart import const
from quickmart.errors.exceptions import BadRequest


def generate_order_number(prefix=const.ORDER_NUMBER_PREFIX):
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    raw_id = f"{prefix}-{today}-{uuid.uuid4().hex[:10].upper()}"
    return re.sub(r"[^a-zA-Z0-9_-]", "", raw_id)


def normalize_email(email):
    return (email or "").strip().lower()


def clean_text(value):
    if isinstance(value, str):
        return value.strip()
    return value


def ensure_not_blank(fields, names):
    for name in names:
        if name in fields and not fields[name]:
            raise BadRequest(message=f"{name} can't be empty")
    return fields
