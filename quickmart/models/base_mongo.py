from datetime import datetime
from datetime import timezone

from bson import ObjectId
from mongoengine import DateTimeField, Document


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseDocument(Document):
    meta = {
        "abstract": True,
        "ordering": ["-created_at"],
    }
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField(default=utcnow)

    to_json_filter = ()

    def save(self, *args, **kwargs):
        self.updated_at = utcnow()
        return super(BaseDocument, self).save(*args, **kwargs)

    def to_dict(self):
        return self.to_mongo().to_dict()

    def to_json(self):
        response = {}
        for column, value in self.to_dict().items():
            if column in self.to_json_filter:
                continue
            if column == "_id":
                response["id"] = str(value)
            else:
                response[column] = self.serialize_value(value)

        return response

    @classmethod
    def serialize_value(cls, value):
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, datetime):
            return cls.format_utc_datetime(value)
        if isinstance(value, dict):
            return {
                ("id" if key == "_id" else key): cls.serialize_value(item)
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple)):
            return [cls.serialize_value(item) for item in value]
        return value

    @staticmethod
    def format_utc_datetime(dt: datetime) -> str:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
