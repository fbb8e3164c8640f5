# coding: utf8
from functools import wraps

from flask import g, request
from flask_jwt_extended import verify_jwt_in_request
from jsonschema import FormatChecker, validate
from jwt import ExpiredSignatureError
from jsonschema.exceptions import ValidationError
from quickmart.errors.exceptions import BadRequest, Forbidden, Unauthorized
from quickmart.services.auth import AuthService


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            verify_jwt_in_request()
        except ExpiredSignatureError:
            raise Unauthorized(message="The token has expired")
        except Exception:
            raise Unauthorized(message="Not authorized, no valid token provided")

        current_user = AuthService.get_current_identity()
        if not current_user:
            raise Unauthorized(message="User not found")
        if not current_user.is_active:
            raise Unauthorized(message="User account is deactivated")

        g.current_user = current_user
        return fn(*args, **kwargs)

    return wrapper


def roles_required(*roles):
    def wrapper(fn):
        @wraps(fn)
        @login_required
        def decorator(*args, **kwargs):
            current_user = g.current_user
            if current_user.role not in roles:
                raise Forbidden(
                    message=f"Role {current_user.role} is not authorized to access this resource"
                )
            return fn(*args, **kwargs)

        return decorator

    return wrapper


def _is_missing(value):
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, (list, dict)) and not value:
        return True
    return False


def parameters(**schema):
    def decorated(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            req_args = request.args.to_dict()
            if (
                request.method in ("POST", "PUT", "PATCH", "DELETE")
                and request.mimetype == "application/json"
            ):
                body = request.get_json(silent=True)
                if body is not None and not isinstance(body, dict):
                    raise BadRequest(message="Request body must be a JSON object")
                req_args.update(body or {})

            if (
                request.method in ("POST", "PUT", "PATCH", "DELETE")
                and request.mimetype == "multipart/form-data"
            ):
                req_args.update(request.form.to_dict())

            req_args = {
                k: v for k, v in req_args.items() if k in schema["properties"].keys()
            }

            if "required" in schema:
                for field in schema["required"]:
                    if field not in req_args or _is_missing(req_args[field]):
                        field_name = schema["properties"].get(field, {}).get(
                            "name", field
                        )
                        raise BadRequest(message="{} is required".format(field_name))

            try:
                validate(
                    instance=req_args, schema=schema, format_checker=FormatChecker()
                )
            except ValidationError as exp:
                field = ".".join(str(part) for part in exp.absolute_path)
                if field:
                    root = str(exp.absolute_path[0])
                    field_config = schema["properties"].get(root, {})
                    field_name = field_config.get("name", field)
                    message = f"Field '{field_name}' is not valid."
                    valid_values = exp.schema.get("enum", [])
                    if valid_values:
                        message += " Valid values: {}.".format(
                            ", ".join(str(value) for value in valid_values)
                        )
                else:
                    message = "Request parameters are invalid."

                raise BadRequest(message=message)

            new_args = args + (req_args,)
            return func(*new_args, **kwargs)

        return wrapper

    return decorated
