# coding: utf8
import os
from datetime import timedelta


class Config(object):
    SECRET_KEY = os.environ.get("SECRET_KEY") or "<your secret key>"

    MONGODB_URI = (
        os.environ.get("MONGODB_URI") or "mongodb://localhost:27017/quickmart"
    )
    MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(
        os.environ.get("MONGODB_SERVER_SELECTION_TIMEOUT_MS") or 5000
    )

    JWT_SECRET_KEY = (
        os.environ.get("JWT_SECRET") or "your-secret-key-change-in-production"
    )
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)
    JWT_TOKEN_LOCATION = ["headers"]

    BCRYPT_LOG_ROUNDS = int(os.environ.get("BCRYPT_LOG_ROUNDS") or 12)

    PORT = int(os.environ.get("PORT") or 5000)
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS") or "*"

    # flask-restx hands unhandled exceptions back to the Flask handlers
    PROPAGATE_EXCEPTIONS = True
    RESTX_ERROR_404_HELP = False
    RESTX_MASK_SWAGGER = False


class TestingConfig(Config):
    TESTING = True
    MONGODB_URI = "mongodb://localhost:27017/quickmart_test"
    JWT_SECRET_KEY = "quickmart-testing-secret-key-0123456789"
    BCRYPT_LOG_ROUNDS = 4


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False


configs = {
    "develop": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
