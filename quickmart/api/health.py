# coding: utf8
from datetime import datetime, timezone

from flask_restx import Namespace, Resource

from quickmart.lib.response import Response

ns = Namespace(name="health", path="/health", description="Health check")


@ns.route("")
class APIHealth(Resource):

    def get(self):
        return Response(
            message="Server is running",
            data={
                "status": "OK",
                "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            },
        ).to_dict()
