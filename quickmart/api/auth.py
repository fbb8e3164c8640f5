# coding: utf8
from flask import g
from flask_restx import Namespace, Resource

from quickmart import const
from quickmart.decorators import login_required, parameters
from quickmart.lib.response import Response
from quickmart.services.auth import AuthService

ns = Namespace(name="auth", path="/auth", description="Auth API")


@ns.route("/register")
class APIRegister(Resource):

    @parameters(
        type="object",
        properties={
            "name": {"type": "string", "maxLength": 100},
            "email": {"type": "string", "format": "email"},
            "password": {
                "type": "string",
                "minLength": const.PASSWORD_MIN_LENGTH,
                "maxLength": const.PASSWORD_MAX_LENGTH,
            },
            "phone": {"type": "string", "pattern": const.PHONE_PATTERN},
            "address": {"type": "string", "maxLength": 255},
            "role": {"type": "string", "enum": const.ROLES},
        },
        required=["name", "email", "password", "phone", "address"],
    )
    def post(self, args):
        user = AuthService.register(
            name=args.get("name"),
            email=args.get("email"),
            password=args.get("password"),
            phone=args.get("phone"),
            address=args.get("address"),
            role=args.get("role", const.CUSTOMER),
        )
        return Response(
            data=AuthService.generate_token(user),
            message="Registration successful! Welcome to QuickMart!",
            status=201,
        ).to_dict()


@ns.route("/login")
class APILogin(Resource):

    @parameters(
        type="object",
        properties={
            "email": {"type": "string"},
            "password": {"type": "string"},
        },
        required=["email", "password"],
    )
    def post(self, args):
        user = AuthService.login(args.get("email", ""), args.get("password", ""))
        return Response(
            data=AuthService.generate_token(user),
            message="Login successful!",
        ).to_dict()


@ns.route("/me")
class APIMe(Resource):

    @login_required
    def get(self):
        return Response(data={"user": g.current_user.to_json()}).to_dict()


@ns.route("/profile")
class APIProfile(Resource):

    @login_required
    @parameters(
        type="object",
        properties={
            "name": {"type": "string", "maxLength": 100},
            "phone": {"type": "string", "pattern": const.PHONE_PATTERN},
            "address": {"type": "string", "maxLength": 255},
        },
    )
    def put(self, args):
        user = AuthService.update_profile(g.current_user, **args)
        return Response(
            data={"user": user.to_json()}, message="Profile updated successfully"
        ).to_dict()


@ns.route("/password")
class APIChangePassword(Resource):

    @login_required
    @parameters(
        type="object",
        properties={
            "current_password": {"type": "string"},
            "new_password": {
                "type": "string",
                "minLength": const.PASSWORD_MIN_LENGTH,
                "maxLength": const.PASSWORD_MAX_LENGTH,
            },
        },
        required=["current_password", "new_password"],
    )
    def put(self, args):
        AuthService.change_password(
            g.current_user, args.get("current_password"), args.get("new_password")
        )
        return Response(message="Password updated successfully").to_dict()
