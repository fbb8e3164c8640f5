# coding: utf8
import os
import sys

from dotenv import load_dotenv

dotenv_path = os.path.join(os.path.dirname(__file__), ".env")
load_dotenv(dotenv_path=dotenv_path, override=True)

from quickmart import create_app  # noqa
from quickmart.config import configs as config  # noqa
from quickmart.extensions import check_database_connection  # noqa
from quickmart.lib.logger import logger  # noqa

config_name = os.environ.get("FLASK_CONFIG") or "develop"
config_app = config[config_name]
application = create_app(config_app)


@application.route("/", methods=["GET"])
def index():
    return {
        "success": True,
        "message": "Welcome to the QuickMart API",
        "data": {"docs": "/api/docs/"},
    }


if __name__ == "__main__":
    if not check_database_connection():
        sys.exit(1)

    port = application.config["PORT"]
    logger.info(f"Server running on port {port}")
    application.run(host="0.0.0.0", port=port)
