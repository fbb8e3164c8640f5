# coding: utf8


class ApiException(Exception):
    status = 500
    message = "Internal server error"

    def __init__(self, message=None, payload=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.payload = payload

    def to_dict(self):
        return {"success": False, "message": self.message, "data": self.payload}


class BadRequest(ApiException):
    status = 400
    message = "Bad request"


class Unauthorized(ApiException):
    status = 401
    message = "Not authorized"


class Forbidden(ApiException):
    status = 403
    message = "You are not allowed to access this resource"


class NotFound(ApiException):
    status = 404
    message = "Resource not found"


# auth
class DuplicateEmail(BadRequest):
    message = "User already exists with this email"


class InvalidCredentials(Unauthorized):
    message = "Invalid email or password"


class Unauthenticated(Unauthorized):
    message = "Please login to continue"


# lookups
class InvalidId(BadRequest):
    message = "Invalid ID format"


class ShopRequired(NotFound):
    message = "Shop not found. Please create your shop first"


class ShopNotFound(NotFound):
    message = "Shop not found"


# orders
class EmptyOrder(BadRequest):
    message = "Order must contain at least one item"


class InvalidStatusTransition(BadRequest):
    message = "Order status can't be changed"


class AlreadyAssigned(BadRequest):
    message = "Order already assigned to another delivery agent"


class NotReady(BadRequest):
    message = "Order is not ready for delivery"


class NotAssigned(Forbidden):
    message = "You are not assigned to this order"


# delivery accounts
class AlreadyExists(BadRequest):
    message = "Delivery account already exists"


class DuplicateLicenseOrVehicle(BadRequest):
    message = "License number or vehicle number already registered"
