# coding: utf8
from flask import Flask
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from mongoengine import connect, disconnect, get_db

from quickmart.lib.logger import logger


bcrypt = Bcrypt()
jwt = JWTManager()


def init_mongoengine(app: Flask, **kwargs):
    mongo_uri = app.config["MONGODB_URI"]
    kwargs.setdefault(
        "serverSelectionTimeoutMS", app.config["MONGODB_SERVER_SELECTION_TIMEOUT_MS"]
    )
    connect(host=mongo_uri, **kwargs)
    app.logger.info("MongoDB configured")


def close_mongoengine():
    disconnect()


def check_database_connection():
    """Ping the server; mongoengine connects lazily so this is the first round trip."""
    try:
        db = get_db()
        db.client.admin.command("ping")
        logger.info(f"MongoDB connected: {db.name}")
        logger.info(f"Database collections: {db.list_collection_names()}")
        return True
    except Exception as e:
        logger.critical(f"MongoDB connection failed: {e}")
        return False
