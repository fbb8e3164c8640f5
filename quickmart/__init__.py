# coding: utf8
from logging import DEBUG

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import default_exceptions

from quickmart.errors.handler import api_error_handler
from quickmart.extensions import bcrypt, jwt, init_mongoengine
from quickmart.lib.logger import logger


def create_app(config_app, **mongo_options):
    app = Flask(__name__)

    app.config.from_object(config_app)
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    __init_app(app, **mongo_options)
    __config_logging(app)
    __register_blueprint(app)
    __config_error_handlers(app)

    return app


def __config_logging(app):
    app.logger.setLevel(DEBUG)
    logger.info("Start flask...")


def __register_blueprint(app):
    from quickmart.api import bp as api_bp

    app.register_blueprint(api_bp)


def __init_app(app, **mongo_options):
    init_mongoengine(app, **mongo_options)
    bcrypt.init_app(app)
    jwt.init_app(app)

    logger.info("Initial app...")


def __config_error_handlers(app):
    for exp in default_exceptions:
        app.register_error_handler(exp, api_error_handler)
    app.register_error_handler(Exception, api_error_handler)

