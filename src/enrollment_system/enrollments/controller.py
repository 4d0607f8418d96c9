from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guard import AuthenticatedAs
from ..common.payloads import parse_new_enrollment, parse_sign_request
from ..container import Container
from ..core.enums import Role
from ..web.auth import role_required
from ..web.http import json_body


def register(app: Flask, container: Container) -> None:
    @app.route("/enrollments", methods=["GET"], endpoint="list_enrollments")
    @role_required(container, Role.ADMIN)
    def list_enrollments(caller: AuthenticatedAs):
        return jsonify([e.to_record() for e in container.enrollment_service.list_enrollments(caller)])

    @app.route("/enrollments", methods=["POST"], endpoint="create_enrollment")
    @role_required(container, Role.ADMIN)
    def create_enrollment(caller: AuthenticatedAs):
        data = parse_new_enrollment(json_body())
        enrollment = container.enrollment_service.create_enrollment(caller, data)
        return jsonify(enrollment.to_record()), 201

    @app.route("/sign-course", methods=["PATCH"], endpoint="sign_course")
    @role_required(container, Role.STUDENT)
    def sign_course(caller: AuthenticatedAs):
        data = parse_sign_request(json_body())
        enrollment = container.enrollment_service.sign(caller, data)
        return jsonify({"message": "Cours signé avec succès.", "enrollment": enrollment.to_record()}), 200
