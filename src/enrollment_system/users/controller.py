from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import AuthenticatedAs
from ..common.payloads import parse_new_user
from ..container import Container
from ..core.enums import Role
from ..web.auth import role_required
from ..web.http import json_body


def register(app: Flask, container: Container) -> None:
    def expose_passwords() -> bool:
        return bool(app.config.get("EXPOSE_PASSWORDS", True))

    @app.route("/users", methods=["GET"], endpoint="list_users")
    @role_required(container, Role.ADMIN)
    def list_users(caller: AuthenticatedAs):
        users = container.user_service.list_users(caller)
        return jsonify([u.to_record(include_password=expose_passwords()) for u in users])

    @app.route("/users", methods=["POST"], endpoint="create_user")
    @role_required(container, Role.ADMIN)
    def create_user(caller: AuthenticatedAs):
        data = parse_new_user(json_body())
        user = container.user_service.provision_user(caller, data)
        return jsonify(user.to_record(include_password=expose_passwords())), 201
