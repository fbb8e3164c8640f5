# coding: utf8
from mongoengine.errors import ValidationError
from werkzeug.exceptions import HTTPException

from quickmart.errors.exceptions import ApiException
from quickmart.lib.logger import log_request_error


def api_error_handler(error):
    if isinstance(error, ApiException):
        log_request_error(error.message, error.status)
        return error.to_dict(), error.status

    if isinstance(error, ValidationError):
        if error.errors:
            message = ", ".join(
                f"{field}: {err.message if hasattr(err, 'message') else err}"
                for field, err in error.errors.items()
            )
        else:
            message = error.message
        log_request_error(message, 400)
        return {"success": False, "message": message, "data": None}, 400

    if isinstance(error, HTTPException):
        status = error.code or 500
        message = "Route not found" if status == 404 else error.description
        log_request_error(message, status)
        return {"success": False, "message": message, "data": None}, status

    log_request_error(f"Unhandled error: {error}", 500, error)
    return {"success": False, "message": "Internal server error", "data": None}, 500
